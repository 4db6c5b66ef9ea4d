"""Pydantic schemas for cash movement endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from portfolio_ledger.domain.models.enums import CashMovementType


class CashMovementCreateRequest(BaseModel):
    """Request schema for recording a deposit or withdrawal."""

    type: CashMovementType
    amount: Decimal = Field(..., gt=0)
    currency: str = Field(..., min_length=3, max_length=3, description="ISO 4217 code")
    happened_at: Optional[datetime] = Field(default=None, description="Defaults to now")
    note: Optional[str] = Field(default=None, max_length=512)


class CashMovementResponse(BaseModel):
    """Response schema for a cash movement."""

    model_config = {"from_attributes": True}

    movement_id: str
    portfolio_id: str
    movement_type: CashMovementType
    amount: float
    currency: str
    happened_at: datetime
    note: Optional[str] = None
