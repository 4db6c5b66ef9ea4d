"""SQLAlchemy implementation of LedgerGateway."""

import logging
from typing import Callable, TypeVar

from sqlalchemy.orm import Session

from portfolio_ledger.repositories.protocols.gateway import LedgerTransaction
from portfolio_ledger.repositories.sqlalchemy.portfolio_repo import SqlAlchemyPortfolioRepository
from portfolio_ledger.repositories.sqlalchemy.position_repo import SqlAlchemyPositionRepository
from portfolio_ledger.repositories.sqlalchemy.cash_movement_repo import (
    SqlAlchemyCashMovementRepository,
)
from portfolio_ledger.repositories.sqlalchemy.order_repo import SqlAlchemyOrderRepository
from portfolio_ledger.repositories.sqlalchemy.snapshot_repo import SqlAlchemySnapshotRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlAlchemyLedgerGateway:
    """
    Runs ledger work as one database transaction on a session.

    Repositories handed to the work only flush; this class owns commit and
    rollback, so a raised error leaves no partial write behind.
    """

    def __init__(self, db: Session):
        self._db = db
        self._tx = LedgerTransaction(
            portfolios=SqlAlchemyPortfolioRepository(db),
            positions=SqlAlchemyPositionRepository(db),
            cash_movements=SqlAlchemyCashMovementRepository(db),
            orders=SqlAlchemyOrderRepository(db),
            snapshots=SqlAlchemySnapshotRepository(db),
        )

    def run_transaction(self, work: Callable[[LedgerTransaction], T]) -> T:
        """Run ``work`` and commit, or roll back and re-raise on any error."""
        try:
            result = work(self._tx)
            self._db.commit()
        except Exception as exc:
            self._db.rollback()
            logger.debug(f"Ledger transaction rolled back: {exc!r}")
            raise
        return result
