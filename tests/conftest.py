"""
Pytest configuration and fixtures for portfolio ledger tests.

This module provides:
- In-memory SQLite database fixtures
- Repository, gateway and service fixtures
- Factory helpers for portfolios, deposits and orders
- A FastAPI test client bound to the test database
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from portfolio_ledger.main import app
from portfolio_ledger.config.settings import Settings, set_settings, reset_settings
from portfolio_ledger.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from portfolio_ledger.repositories.sqlalchemy import orm_models  # noqa: F401
from portfolio_ledger.repositories.sqlalchemy import (
    SqlAlchemyPortfolioRepository,
    SqlAlchemyPositionRepository,
    SqlAlchemyCashMovementRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemySnapshotRepository,
    SqlAlchemyLedgerGateway,
)
from portfolio_ledger.services import (
    CashMovementService,
    CashMovementCreate,
    OrderService,
    OrderCreate,
    PositionService,
    SnapshotService,
    PortfolioService,
    PortfolioCreate,
)
from portfolio_ledger.domain.models import (
    Portfolio,
    CashMovement,
    CashMovementType,
    Order,
    OrderSide,
)
from portfolio_ledger.core.timezone import UTC


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a naive UTC datetime (the storage form of ledger timestamps)."""
    return datetime(year, month, day, hour, minute, second)


def aware_utc_datetime(year: int, month: int, day: int, hour: int = 10) -> datetime:
    """Create a timezone-aware UTC datetime."""
    return UTC.localize(datetime(year, month, day, hour))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def portfolio_repo(test_session) -> SqlAlchemyPortfolioRepository:
    """Provide test PortfolioRepository."""
    return SqlAlchemyPortfolioRepository(test_session)


@pytest.fixture
def position_repo(test_session) -> SqlAlchemyPositionRepository:
    """Provide test PositionRepository."""
    return SqlAlchemyPositionRepository(test_session)


@pytest.fixture
def cash_movement_repo(test_session) -> SqlAlchemyCashMovementRepository:
    """Provide test CashMovementRepository."""
    return SqlAlchemyCashMovementRepository(test_session)


@pytest.fixture
def order_repo(test_session) -> SqlAlchemyOrderRepository:
    """Provide test OrderRepository."""
    return SqlAlchemyOrderRepository(test_session)


@pytest.fixture
def snapshot_repo(test_session) -> SqlAlchemySnapshotRepository:
    """Provide test SnapshotRepository."""
    return SqlAlchemySnapshotRepository(test_session)


@pytest.fixture
def gateway(test_session) -> SqlAlchemyLedgerGateway:
    """Provide the transaction gateway over the test session."""
    return SqlAlchemyLedgerGateway(test_session)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def portfolio_service(gateway) -> PortfolioService:
    """Provide test PortfolioService."""
    return PortfolioService(gateway, default_actions_limit=10)


@pytest.fixture
def cash_movement_service(gateway) -> CashMovementService:
    """Provide test CashMovementService."""
    return CashMovementService(gateway)


@pytest.fixture
def order_service(gateway) -> OrderService:
    """Provide test OrderService."""
    return OrderService(gateway)


@pytest.fixture
def position_service(gateway) -> PositionService:
    """Provide test PositionService."""
    return PositionService(gateway)


@pytest.fixture
def snapshot_service(gateway) -> SnapshotService:
    """Provide test SnapshotService."""
    return SnapshotService(gateway)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def portfolio_factory(portfolio_service) -> Callable[..., Portfolio]:
    """Factory for creating test portfolios."""

    def _create_portfolio(
        user_id: int = 1,
        name: Optional[str] = None,
        opening_cash: Decimal = Decimal("0"),
        base_currency: str = "USD",
    ) -> Portfolio:
        if name is None:
            name = f"Test Portfolio {uuid.uuid4().hex[:8]}"
        return portfolio_service.create_portfolio(
            PortfolioCreate(
                user_id=user_id,
                name=name,
                base_currency=base_currency,
                opening_cash=opening_cash,
            )
        )

    return _create_portfolio


@pytest.fixture
def deposit_factory(cash_movement_service) -> Callable[..., CashMovement]:
    """Factory for recording deposits."""

    def _deposit(
        portfolio_id: str,
        amount: Decimal,
        happened_at: Optional[datetime] = None,
        note: Optional[str] = None,
    ) -> CashMovement:
        return cash_movement_service.record_movement(
            create_cash_movement_data(
                portfolio_id,
                CashMovementType.DEPOSIT,
                amount,
                happened_at=happened_at,
                note=note,
            )
        )

    return _deposit


@pytest.fixture
def order_factory(order_service) -> Callable[..., Order]:
    """Factory for placing settled orders."""

    def _place(
        portfolio_id: str,
        side: OrderSide,
        stock_id: str,
        quantity: Decimal,
        price: Decimal,
        placed_at: Optional[datetime] = None,
    ) -> Order:
        return order_service.place_order(
            create_order_data(portfolio_id, side, stock_id, quantity, price, placed_at=placed_at)
        )

    return _place


# =============================================================================
# PRESET DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_portfolio(portfolio_factory) -> Portfolio:
    """Create an empty sample portfolio."""
    return portfolio_factory(name="Brokerage")


@pytest.fixture
def funded_portfolio(portfolio_factory) -> Portfolio:
    """Create a portfolio holding 1000.00 in cash and nothing invested."""
    return portfolio_factory(name="Funded", opening_cash=Decimal("1000"))


@pytest.fixture
def portfolio_with_position(funded_portfolio, order_factory) -> Portfolio:
    """Funded portfolio after BUY 10 x AAPL @ 50 (cash 500, invested 500)."""
    order_factory(
        funded_portfolio.portfolio_id,
        OrderSide.BUY,
        "AAPL",
        Decimal("10"),
        Decimal("50"),
        placed_at=utc_datetime(2024, 1, 15, 14, 0),
    )
    return funded_portfolio


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine) -> TestClient:
    """Provide FastAPI test client with test database."""
    # The app lifespan initializes the configured database; keep it in memory.
    set_settings(Settings(database_url="sqlite:///:memory:"))
    reset_database()

    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.0001"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(Decimal(actual) - Decimal(expected))
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"


def create_cash_movement_data(
    portfolio_id: str,
    movement_type: CashMovementType,
    amount: Decimal,
    currency: str = "USD",
    happened_at: Optional[datetime] = None,
    note: Optional[str] = None,
) -> CashMovementCreate:
    """Helper to create cash movement input."""
    return CashMovementCreate(
        portfolio_id=portfolio_id,
        movement_type=movement_type,
        amount=amount,
        currency=currency,
        happened_at=happened_at,
        note=note,
    )


def create_order_data(
    portfolio_id: str,
    side: OrderSide,
    stock_id: str,
    quantity: Decimal,
    price: Decimal,
    currency: str = "USD",
    placed_at: Optional[datetime] = None,
) -> OrderCreate:
    """Helper to create order input."""
    return OrderCreate(
        portfolio_id=portfolio_id,
        stock_id=stock_id,
        side=side,
        quantity=quantity,
        price=price,
        currency=currency,
        placed_at=placed_at,
    )
