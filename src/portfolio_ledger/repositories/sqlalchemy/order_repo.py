"""SQLAlchemy implementation of OrderRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from portfolio_ledger.domain.models import Order
from portfolio_ledger.repositories.sqlalchemy._convert import to_decimal
from portfolio_ledger.repositories.sqlalchemy.orm_models import OrderORM


class SqlAlchemyOrderRepository:
    """SQLAlchemy-backed order repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, order: Order) -> Order:
        """Persist a new order."""
        orm_order = OrderORM(
            order_id=order.order_id,
            portfolio_id=order.portfolio_id,
            stock_id=order.stock_id,
            side=order.side,
            quantity=order.quantity,
            price=order.price,
            currency=order.currency,
            placed_at=order.placed_at,
            status=order.status,
            filled_at=order.filled_at,
        )
        self._db.add(orm_order)
        self._db.flush()
        return self._to_domain(orm_order)

    def get_by_id(self, order_id: str, for_update: bool = False) -> Optional[Order]:
        """Retrieve order by ID."""
        query = self._db.query(OrderORM).filter(OrderORM.order_id == order_id)
        if for_update:
            query = query.with_for_update()
        orm_order = query.first()
        return self._to_domain(orm_order) if orm_order else None

    def update(self, order: Order) -> Order:
        """Write status and fill time of an existing order."""
        orm_order = self._db.query(OrderORM).filter(
            OrderORM.order_id == order.order_id
        ).first()
        if not orm_order:
            raise ValueError(f"Order not found: {order.order_id}")

        orm_order.status = order.status
        orm_order.filled_at = order.filled_at

        self._db.flush()
        return self._to_domain(orm_order)

    def list_by_portfolio(
        self,
        portfolio_id: str,
        limit: Optional[int] = None,
    ) -> list[Order]:
        """List orders of a portfolio, newest first."""
        query = (
            self._db.query(OrderORM)
            .filter(OrderORM.portfolio_id == portfolio_id)
            .order_by(OrderORM.placed_at.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_domain(o) for o in query.all()]

    @staticmethod
    def _to_domain(orm: OrderORM) -> Order:
        """Convert ORM model to domain model."""
        return Order(
            order_id=orm.order_id,
            portfolio_id=orm.portfolio_id,
            stock_id=orm.stock_id,
            side=orm.side,
            quantity=to_decimal(orm.quantity),
            price=to_decimal(orm.price),
            currency=orm.currency,
            placed_at=orm.placed_at,
            status=orm.status,
            filled_at=orm.filled_at,
        )
