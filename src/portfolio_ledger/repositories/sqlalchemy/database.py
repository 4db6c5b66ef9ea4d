"""Engine, session factory and schema setup for the ledger database."""

from collections.abc import Generator, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, event, Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

from portfolio_ledger.config.settings import get_settings

Base = declarative_base()

# Lazily built from settings; reset_database() drops them so the next call
# picks up a new database_url.
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def _build_engine(database_url: str) -> Engine:
    is_sqlite = database_url.startswith("sqlite")
    connect_args = {"check_same_thread": False} if is_sqlite else {}
    engine = create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,
        echo=False,
    )
    if is_sqlite:
        _use_immediate_transactions(engine)
    return engine


def _use_immediate_transactions(engine: Engine) -> None:
    """
    Make every SQLite transaction take the write lock when it begins.

    SQLite ignores SELECT ... FOR UPDATE and pysqlite defers BEGIN until the
    first write, so two sessions could both read a balance before either
    writes. With BEGIN IMMEDIATE the second session waits on the lock
    (up to the driver's busy timeout) and then reads committed values.
    """

    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def _bind(engine: Engine) -> None:
    global _engine, _SessionLocal
    _engine = engine
    _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_engine() -> Engine:
    """Return the engine for the configured database URL."""
    if _engine is None:
        _bind(_build_engine(get_settings().get_database_url()))
    return _engine


def get_session_factory() -> sessionmaker:
    """Return the session factory bound to the current engine."""
    if _SessionLocal is None:
        get_engine()
    return _SessionLocal


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding one session per request."""
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


def get_session() -> Session:
    """Open a session the caller must close."""
    return get_session_factory()()


@contextmanager
def session_scope() -> Iterator[Session]:
    """Yield a session that is rolled back on error and always closed."""
    session = get_session()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db() -> None:
    """Create missing tables. Safe to call on every startup."""
    from portfolio_ledger.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def init_db_with_path(db_path: Path) -> None:
    """Point the module at a SQLite file and create its tables."""
    reset_database()
    _bind(_build_engine(f"sqlite:///{db_path}"))
    init_db()


def reset_database() -> None:
    """Dispose the current engine so the next access reconnects."""
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None
