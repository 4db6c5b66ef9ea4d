"""Dependency injection for FastAPI."""

from fastapi import Depends
from sqlalchemy.orm import Session

from portfolio_ledger.config.settings import get_settings
from portfolio_ledger.repositories.sqlalchemy import SqlAlchemyLedgerGateway, get_db
from portfolio_ledger.services import (
    CashMovementService,
    OrderService,
    PositionService,
    SnapshotService,
    PortfolioService,
)


def get_gateway(db: Session = Depends(get_db)) -> SqlAlchemyLedgerGateway:
    """Provide a LedgerGateway bound to the request's session."""
    return SqlAlchemyLedgerGateway(db)


def get_portfolio_service(
    gateway: SqlAlchemyLedgerGateway = Depends(get_gateway),
) -> PortfolioService:
    """Provide PortfolioService instance."""
    return PortfolioService(
        gateway=gateway,
        default_actions_limit=get_settings().latest_actions_limit,
    )


def get_cash_movement_service(
    gateway: SqlAlchemyLedgerGateway = Depends(get_gateway),
) -> CashMovementService:
    """Provide CashMovementService instance."""
    return CashMovementService(gateway=gateway)


def get_order_service(
    gateway: SqlAlchemyLedgerGateway = Depends(get_gateway),
) -> OrderService:
    """Provide OrderService instance."""
    return OrderService(gateway=gateway)


def get_position_service(
    gateway: SqlAlchemyLedgerGateway = Depends(get_gateway),
) -> PositionService:
    """Provide PositionService instance."""
    return PositionService(gateway=gateway)


def get_snapshot_service(
    gateway: SqlAlchemyLedgerGateway = Depends(get_gateway),
) -> SnapshotService:
    """Provide SnapshotService instance."""
    return SnapshotService(gateway=gateway)
