"""SQLAlchemy ORM model definitions."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    Integer,
    DateTime,
    Text,
    ForeignKey,
    Numeric,
    UniqueConstraint,
    Enum as SqlEnum,
)

from portfolio_ledger.repositories.sqlalchemy.database import Base
from portfolio_ledger.domain.models.enums import CashMovementType, OrderSide, OrderStatus
from portfolio_ledger.domain.models.precision import MONEY_PLACES, QUANTITY_PLACES

MONEY = Numeric(precision=18, scale=MONEY_PLACES)
QUANTITY = Numeric(precision=18, scale=QUANTITY_PLACES)


class PortfolioORM(Base):
    """SQLAlchemy model for Portfolio."""

    __tablename__ = "portfolios"

    portfolio_id = Column(String(36), primary_key=True)
    user_id = Column(Integer, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    base_currency = Column(String(3), nullable=False)
    cash_value = Column(MONEY, nullable=False, default=Decimal("0"))
    invested_value = Column(MONEY, nullable=False, default=Decimal("0"))
    total_value = Column(MONEY, nullable=False, default=Decimal("0"))
    created_at = Column(DateTime, nullable=False)


class PositionORM(Base):
    """SQLAlchemy model for Position, one row per (portfolio, stock)."""

    __tablename__ = "positions"

    portfolio_id = Column(String(36), ForeignKey("portfolios.portfolio_id"), primary_key=True)
    stock_id = Column(String(36), primary_key=True)
    currency = Column(String(3), nullable=False)
    quantity = Column(QUANTITY, nullable=False, default=Decimal("0"))
    avg_price = Column(MONEY, nullable=False, default=Decimal("0"))
    last_price = Column(MONEY, nullable=True)
    updated_at = Column(DateTime, nullable=True)


class CashMovementORM(Base):
    """SQLAlchemy model for CashMovement."""

    __tablename__ = "cash_movements"

    movement_id = Column(String(36), primary_key=True)
    portfolio_id = Column(
        String(36), ForeignKey("portfolios.portfolio_id"), nullable=False, index=True
    )
    movement_type = Column(SqlEnum(CashMovementType), nullable=False)
    amount = Column(MONEY, nullable=False)
    currency = Column(String(3), nullable=False)
    happened_at = Column(DateTime, nullable=False)
    note = Column(Text, nullable=True)


class OrderORM(Base):
    """SQLAlchemy model for Order."""

    __tablename__ = "orders"

    order_id = Column(String(36), primary_key=True)
    portfolio_id = Column(
        String(36), ForeignKey("portfolios.portfolio_id"), nullable=False, index=True
    )
    stock_id = Column(String(36), nullable=False)
    side = Column(SqlEnum(OrderSide), nullable=False)
    quantity = Column(QUANTITY, nullable=False)
    price = Column(MONEY, nullable=False)
    currency = Column(String(3), nullable=False)
    placed_at = Column(DateTime, nullable=False)
    status = Column(SqlEnum(OrderStatus), nullable=False, default=OrderStatus.PENDING)
    filled_at = Column(DateTime, nullable=True)


class PortfolioSnapshotORM(Base):
    """SQLAlchemy model for PortfolioSnapshot."""

    __tablename__ = "portfolio_snapshots"
    __table_args__ = (
        UniqueConstraint("portfolio_id", "as_of", name="uq_snapshot_portfolio_as_of"),
    )

    snapshot_id = Column(String(36), primary_key=True)
    portfolio_id = Column(String(36), ForeignKey("portfolios.portfolio_id"), nullable=False)
    as_of = Column(DateTime, nullable=False)
    total_value = Column(MONEY, nullable=False)
    cash_value = Column(MONEY, nullable=False)
    invested_value = Column(MONEY, nullable=False)
