"""Domain models package."""

from portfolio_ledger.domain.models.enums import CashMovementType, OrderSide, OrderStatus
from portfolio_ledger.domain.models.portfolio import Portfolio
from portfolio_ledger.domain.models.position import Position
from portfolio_ledger.domain.models.cash_movement import CashMovement
from portfolio_ledger.domain.models.order import Order
from portfolio_ledger.domain.models.snapshot import PortfolioSnapshot
from portfolio_ledger.domain.models.precision import (
    MONEY_PLACES,
    QUANTITY_PLACES,
    round_money,
)

__all__ = [
    "CashMovementType",
    "OrderSide",
    "OrderStatus",
    "Portfolio",
    "Position",
    "CashMovement",
    "Order",
    "PortfolioSnapshot",
    "MONEY_PLACES",
    "QUANTITY_PLACES",
    "round_money",
]
