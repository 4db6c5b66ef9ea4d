"""SQLAlchemy implementation of SnapshotRepository."""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from portfolio_ledger.domain.models import PortfolioSnapshot
from portfolio_ledger.repositories.sqlalchemy._convert import to_decimal
from portfolio_ledger.repositories.sqlalchemy.orm_models import PortfolioSnapshotORM


class SqlAlchemySnapshotRepository:
    """SQLAlchemy-backed snapshot repository."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, portfolio_id: str, as_of: datetime) -> Optional[PortfolioSnapshot]:
        """Get the snapshot for a specific timestamp."""
        orm_snapshot = self._query_one(portfolio_id, as_of)
        return self._to_domain(orm_snapshot) if orm_snapshot else None

    def upsert(self, snapshot: PortfolioSnapshot) -> PortfolioSnapshot:
        """
        Insert or overwrite the snapshot keyed by (portfolio_id, as_of).

        An existing row keeps its snapshot_id; only the values change.
        """
        orm_snapshot = self._query_one(snapshot.portfolio_id, snapshot.as_of)

        if orm_snapshot:
            orm_snapshot.total_value = snapshot.total_value
            orm_snapshot.cash_value = snapshot.cash_value
            orm_snapshot.invested_value = snapshot.invested_value
        else:
            orm_snapshot = PortfolioSnapshotORM(
                snapshot_id=snapshot.snapshot_id,
                portfolio_id=snapshot.portfolio_id,
                as_of=snapshot.as_of,
                total_value=snapshot.total_value,
                cash_value=snapshot.cash_value,
                invested_value=snapshot.invested_value,
            )
            self._db.add(orm_snapshot)

        self._db.flush()
        return self._to_domain(orm_snapshot)

    def list_by_portfolio(self, portfolio_id: str) -> list[PortfolioSnapshot]:
        """List snapshots of a portfolio, newest first."""
        orm_snapshots = (
            self._db.query(PortfolioSnapshotORM)
            .filter(PortfolioSnapshotORM.portfolio_id == portfolio_id)
            .order_by(PortfolioSnapshotORM.as_of.desc())
            .all()
        )
        return [self._to_domain(s) for s in orm_snapshots]

    def _query_one(self, portfolio_id: str, as_of: datetime) -> Optional[PortfolioSnapshotORM]:
        return (
            self._db.query(PortfolioSnapshotORM)
            .filter(
                PortfolioSnapshotORM.portfolio_id == portfolio_id,
                PortfolioSnapshotORM.as_of == as_of,
            )
            .first()
        )

    @staticmethod
    def _to_domain(orm: PortfolioSnapshotORM) -> PortfolioSnapshot:
        """Convert ORM snapshot to domain model."""
        return PortfolioSnapshot(
            snapshot_id=orm.snapshot_id,
            portfolio_id=orm.portfolio_id,
            as_of=orm.as_of,
            total_value=to_decimal(orm.total_value),
            cash_value=to_decimal(orm.cash_value),
            invested_value=to_decimal(orm.invested_value),
        )
