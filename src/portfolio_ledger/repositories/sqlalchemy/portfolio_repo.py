"""SQLAlchemy implementation of PortfolioRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from portfolio_ledger.domain.models import Portfolio
from portfolio_ledger.repositories.sqlalchemy._convert import to_decimal
from portfolio_ledger.repositories.sqlalchemy.orm_models import PortfolioORM


class SqlAlchemyPortfolioRepository:
    """SQLAlchemy-backed portfolio repository. Writes are flushed, never committed."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, portfolio: Portfolio) -> Portfolio:
        """Persist a new portfolio."""
        orm_portfolio = PortfolioORM(
            portfolio_id=portfolio.portfolio_id,
            user_id=portfolio.user_id,
            name=portfolio.name,
            base_currency=portfolio.base_currency,
            cash_value=portfolio.cash_value,
            invested_value=portfolio.invested_value,
            total_value=portfolio.total_value,
            created_at=portfolio.created_at,
        )
        self._db.add(orm_portfolio)
        self._db.flush()
        return self._to_domain(orm_portfolio)

    def get_by_id(self, portfolio_id: str, for_update: bool = False) -> Optional[Portfolio]:
        """Retrieve portfolio by ID, optionally with a row lock."""
        query = self._db.query(PortfolioORM).filter(PortfolioORM.portfolio_id == portfolio_id)
        if for_update:
            query = query.with_for_update()
        orm_portfolio = query.first()
        return self._to_domain(orm_portfolio) if orm_portfolio else None

    def list_by_user(self, user_id: int) -> list[Portfolio]:
        """List a user's portfolios, newest first."""
        orm_portfolios = (
            self._db.query(PortfolioORM)
            .filter(PortfolioORM.user_id == user_id)
            .order_by(PortfolioORM.created_at.desc())
            .all()
        )
        return [self._to_domain(p) for p in orm_portfolios]

    def update(self, portfolio: Portfolio) -> Portfolio:
        """Write name, currency and aggregate values of an existing portfolio."""
        orm_portfolio = self._db.query(PortfolioORM).filter(
            PortfolioORM.portfolio_id == portfolio.portfolio_id
        ).first()
        if not orm_portfolio:
            raise ValueError(f"Portfolio not found: {portfolio.portfolio_id}")

        orm_portfolio.name = portfolio.name
        orm_portfolio.base_currency = portfolio.base_currency
        orm_portfolio.cash_value = portfolio.cash_value
        orm_portfolio.invested_value = portfolio.invested_value
        orm_portfolio.total_value = portfolio.total_value

        self._db.flush()
        return self._to_domain(orm_portfolio)

    @staticmethod
    def _to_domain(orm: PortfolioORM) -> Portfolio:
        """Convert ORM model to domain model."""
        return Portfolio(
            portfolio_id=orm.portfolio_id,
            user_id=orm.user_id,
            name=orm.name,
            base_currency=orm.base_currency,
            cash_value=to_decimal(orm.cash_value),
            invested_value=to_decimal(orm.invested_value),
            total_value=to_decimal(orm.total_value),
            created_at=orm.created_at,
        )
