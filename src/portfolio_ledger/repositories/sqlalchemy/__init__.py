"""SQLAlchemy repository implementations."""

from portfolio_ledger.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    session_scope,
    init_db,
    init_db_with_path,
    reset_database,
    Base,
)
from portfolio_ledger.repositories.sqlalchemy.portfolio_repo import SqlAlchemyPortfolioRepository
from portfolio_ledger.repositories.sqlalchemy.position_repo import SqlAlchemyPositionRepository
from portfolio_ledger.repositories.sqlalchemy.cash_movement_repo import (
    SqlAlchemyCashMovementRepository,
)
from portfolio_ledger.repositories.sqlalchemy.order_repo import SqlAlchemyOrderRepository
from portfolio_ledger.repositories.sqlalchemy.snapshot_repo import SqlAlchemySnapshotRepository
from portfolio_ledger.repositories.sqlalchemy.gateway import SqlAlchemyLedgerGateway

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "session_scope",
    "init_db",
    "init_db_with_path",
    "reset_database",
    "Base",
    "SqlAlchemyPortfolioRepository",
    "SqlAlchemyPositionRepository",
    "SqlAlchemyCashMovementRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemySnapshotRepository",
    "SqlAlchemyLedgerGateway",
]
