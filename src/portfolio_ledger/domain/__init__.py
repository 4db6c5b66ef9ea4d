"""Domain layer - pure business models with no external dependencies."""

from portfolio_ledger.domain.models import (
    Portfolio,
    Position,
    CashMovement,
    Order,
    PortfolioSnapshot,
    CashMovementType,
    OrderSide,
    OrderStatus,
)

__all__ = [
    "Portfolio",
    "Position",
    "CashMovement",
    "Order",
    "PortfolioSnapshot",
    "CashMovementType",
    "OrderSide",
    "OrderStatus",
]
