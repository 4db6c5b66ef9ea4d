"""Pydantic schemas for snapshot endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class SnapshotCaptureRequest(BaseModel):
    """Request schema for capturing a snapshot."""

    as_of: Optional[datetime] = Field(default=None, description="Defaults to now")
    total_value: Decimal = Field(..., ge=0)
    cash_value: Decimal = Field(..., ge=0)
    invested_value: Decimal = Field(..., ge=0)


class SnapshotResponse(BaseModel):
    """Response schema for a snapshot."""

    model_config = {"from_attributes": True}

    snapshot_id: str
    portfolio_id: str
    as_of: datetime
    total_value: float
    cash_value: float
    invested_value: float
