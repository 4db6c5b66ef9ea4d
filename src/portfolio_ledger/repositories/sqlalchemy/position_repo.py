"""SQLAlchemy implementation of PositionRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from portfolio_ledger.domain.models import Position
from portfolio_ledger.repositories.sqlalchemy._convert import to_decimal, to_optional_decimal
from portfolio_ledger.repositories.sqlalchemy.orm_models import PositionORM


class SqlAlchemyPositionRepository:
    """SQLAlchemy-backed position repository."""

    def __init__(self, db: Session):
        self._db = db

    def get(
        self,
        portfolio_id: str,
        stock_id: str,
        for_update: bool = False,
    ) -> Optional[Position]:
        """Get the position for a specific stock."""
        orm_pos = self._query_one(portfolio_id, stock_id, for_update=for_update)
        return self._to_domain(orm_pos) if orm_pos else None

    def list_by_portfolio(self, portfolio_id: str) -> list[Position]:
        """List all positions of a portfolio, most recently updated first."""
        orm_positions = (
            self._db.query(PositionORM)
            .filter(PositionORM.portfolio_id == portfolio_id)
            .order_by(PositionORM.updated_at.desc(), PositionORM.stock_id)
            .all()
        )
        return [self._to_domain(p) for p in orm_positions]

    def upsert(self, position: Position) -> Position:
        """Insert or overwrite a position row."""
        orm_pos = self._query_one(position.portfolio_id, position.stock_id)

        if orm_pos:
            orm_pos.currency = position.currency
            orm_pos.quantity = position.quantity
            orm_pos.avg_price = position.avg_price
            orm_pos.last_price = position.last_price
            orm_pos.updated_at = position.updated_at
        else:
            orm_pos = PositionORM(
                portfolio_id=position.portfolio_id,
                stock_id=position.stock_id,
                currency=position.currency,
                quantity=position.quantity,
                avg_price=position.avg_price,
                last_price=position.last_price,
                updated_at=position.updated_at,
            )
            self._db.add(orm_pos)

        self._db.flush()
        return self._to_domain(orm_pos)

    def _query_one(
        self,
        portfolio_id: str,
        stock_id: str,
        for_update: bool = False,
    ) -> Optional[PositionORM]:
        query = self._db.query(PositionORM).filter(
            PositionORM.portfolio_id == portfolio_id,
            PositionORM.stock_id == stock_id,
        )
        if for_update:
            query = query.with_for_update()
        return query.first()

    @staticmethod
    def _to_domain(orm: PositionORM) -> Position:
        """Convert ORM position to domain model."""
        return Position(
            portfolio_id=orm.portfolio_id,
            stock_id=orm.stock_id,
            currency=orm.currency,
            quantity=to_decimal(orm.quantity),
            avg_price=to_decimal(orm.avg_price),
            last_price=to_optional_decimal(orm.last_price),
            updated_at=orm.updated_at,
        )
