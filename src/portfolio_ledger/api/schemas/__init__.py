"""Pydantic schemas for API request/response."""

from portfolio_ledger.api.schemas.portfolio import (
    PortfolioCreateRequest,
    PortfolioUpdateRequest,
    PortfolioResponse,
    LedgerActionResponse,
)
from portfolio_ledger.api.schemas.cash_movement import (
    CashMovementCreateRequest,
    CashMovementResponse,
)
from portfolio_ledger.api.schemas.order import (
    OrderCreateRequest,
    OrderStatusRequest,
    OrderResponse,
)
from portfolio_ledger.api.schemas.position import (
    PositionUpsertRequest,
    PositionAdjustRequest,
    PositionResponse,
)
from portfolio_ledger.api.schemas.snapshot import (
    SnapshotCaptureRequest,
    SnapshotResponse,
)

__all__ = [
    "PortfolioCreateRequest",
    "PortfolioUpdateRequest",
    "PortfolioResponse",
    "LedgerActionResponse",
    "CashMovementCreateRequest",
    "CashMovementResponse",
    "OrderCreateRequest",
    "OrderStatusRequest",
    "OrderResponse",
    "PositionUpsertRequest",
    "PositionAdjustRequest",
    "PositionResponse",
    "SnapshotCaptureRequest",
    "SnapshotResponse",
]
