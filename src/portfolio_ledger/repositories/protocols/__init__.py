"""Repository protocol definitions (interfaces)."""

from portfolio_ledger.repositories.protocols.portfolio_repo import PortfolioRepository
from portfolio_ledger.repositories.protocols.position_repo import PositionRepository
from portfolio_ledger.repositories.protocols.cash_movement_repo import CashMovementRepository
from portfolio_ledger.repositories.protocols.order_repo import OrderRepository
from portfolio_ledger.repositories.protocols.snapshot_repo import SnapshotRepository
from portfolio_ledger.repositories.protocols.gateway import LedgerGateway, LedgerTransaction

__all__ = [
    "PortfolioRepository",
    "PositionRepository",
    "CashMovementRepository",
    "OrderRepository",
    "SnapshotRepository",
    "LedgerGateway",
    "LedgerTransaction",
]
