"""Ledger storage gateway protocol."""

from dataclasses import dataclass
from typing import Callable, Protocol, TypeVar

from portfolio_ledger.repositories.protocols.portfolio_repo import PortfolioRepository
from portfolio_ledger.repositories.protocols.position_repo import PositionRepository
from portfolio_ledger.repositories.protocols.cash_movement_repo import CashMovementRepository
from portfolio_ledger.repositories.protocols.order_repo import OrderRepository
from portfolio_ledger.repositories.protocols.snapshot_repo import SnapshotRepository

T = TypeVar("T")


@dataclass(frozen=True)
class LedgerTransaction:
    """Transaction-scoped handle: repositories sharing one unit of work."""

    portfolios: PortfolioRepository
    positions: PositionRepository
    cash_movements: CashMovementRepository
    orders: OrderRepository
    snapshots: SnapshotRepository


class LedgerGateway(Protocol):
    """Atomic multi-entity read-modify-write over the ledger tables."""

    def run_transaction(self, work: Callable[[LedgerTransaction], T]) -> T:
        """
        Run ``work`` inside one transaction.

        All writes made through the handle commit together when ``work``
        returns, or are rolled back entirely if it raises; the exception
        is re-raised unchanged.
        """
        ...
