"""Service layer - business logic orchestration."""

from portfolio_ledger.services.cash_movement_service import CashMovementService, CashMovementCreate
from portfolio_ledger.services.order_service import OrderService, OrderCreate, OrderStatusUpdate
from portfolio_ledger.services.position_service import PositionService, PositionAdjust, PositionUpsert
from portfolio_ledger.services.snapshot_service import SnapshotService, SnapshotCapture
from portfolio_ledger.services.portfolio_service import (
    PortfolioService,
    PortfolioCreate,
    PortfolioUpdate,
)

__all__ = [
    "CashMovementService",
    "CashMovementCreate",
    "OrderService",
    "OrderCreate",
    "OrderStatusUpdate",
    "PositionService",
    "PositionAdjust",
    "PositionUpsert",
    "SnapshotService",
    "SnapshotCapture",
    "PortfolioService",
    "PortfolioCreate",
    "PortfolioUpdate",
]
