"""SQLAlchemy implementation of CashMovementRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from portfolio_ledger.domain.models import CashMovement
from portfolio_ledger.repositories.sqlalchemy._convert import to_decimal
from portfolio_ledger.repositories.sqlalchemy.orm_models import CashMovementORM


class SqlAlchemyCashMovementRepository:
    """SQLAlchemy-backed cash movement repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, movement: CashMovement) -> CashMovement:
        """Persist a new cash movement."""
        orm_movement = CashMovementORM(
            movement_id=movement.movement_id,
            portfolio_id=movement.portfolio_id,
            movement_type=movement.movement_type,
            amount=movement.amount,
            currency=movement.currency,
            happened_at=movement.happened_at,
            note=movement.note,
        )
        self._db.add(orm_movement)
        self._db.flush()
        return self._to_domain(orm_movement)

    def list_by_portfolio(
        self,
        portfolio_id: str,
        limit: Optional[int] = None,
    ) -> list[CashMovement]:
        """List movements of a portfolio, newest first."""
        query = (
            self._db.query(CashMovementORM)
            .filter(CashMovementORM.portfolio_id == portfolio_id)
            .order_by(CashMovementORM.happened_at.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_domain(m) for m in query.all()]

    @staticmethod
    def _to_domain(orm: CashMovementORM) -> CashMovement:
        """Convert ORM model to domain model."""
        return CashMovement(
            movement_id=orm.movement_id,
            portfolio_id=orm.portfolio_id,
            movement_type=orm.movement_type,
            amount=to_decimal(orm.amount),
            currency=orm.currency,
            happened_at=orm.happened_at,
            note=orm.note,
        )
