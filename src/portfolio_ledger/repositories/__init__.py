"""Repository layer - data access abstractions and implementations."""

from portfolio_ledger.repositories.protocols import (
    PortfolioRepository,
    PositionRepository,
    CashMovementRepository,
    OrderRepository,
    SnapshotRepository,
    LedgerGateway,
    LedgerTransaction,
)

__all__ = [
    "PortfolioRepository",
    "PositionRepository",
    "CashMovementRepository",
    "OrderRepository",
    "SnapshotRepository",
    "LedgerGateway",
    "LedgerTransaction",
]
