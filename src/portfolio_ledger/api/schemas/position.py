"""Pydantic schemas for position endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class PositionUpsertRequest(BaseModel):
    """Request schema for overwriting a position."""

    currency: str = Field(..., min_length=3, max_length=3)
    quantity: Decimal
    avg_price: Decimal = Field(..., ge=0)
    last_price: Optional[Decimal] = Field(default=None, ge=0)


class PositionAdjustRequest(BaseModel):
    """Request schema for a quantity delta."""

    quantity_delta: Decimal
    price: Optional[Decimal] = Field(default=None, ge=0)


class PositionResponse(BaseModel):
    """Response schema for a position."""

    model_config = {"from_attributes": True}

    portfolio_id: str
    stock_id: str
    currency: str
    quantity: float
    avg_price: float
    last_price: Optional[float] = None
    updated_at: Optional[datetime] = None
