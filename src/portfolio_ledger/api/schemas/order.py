"""Pydantic schemas for order endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from portfolio_ledger.domain.models.enums import OrderSide, OrderStatus


class OrderCreateRequest(BaseModel):
    """Request schema for placing an order."""

    stock_id: str = Field(..., min_length=1, max_length=36)
    side: OrderSide
    quantity: Decimal = Field(..., gt=0)
    price: Decimal = Field(..., gt=0)
    currency: str = Field(..., min_length=3, max_length=3, description="ISO 4217 code")
    placed_at: Optional[datetime] = Field(default=None, description="Defaults to now")


class OrderStatusRequest(BaseModel):
    """Request schema for changing an order's status."""

    status: OrderStatus
    filled_at: Optional[datetime] = None


class OrderResponse(BaseModel):
    """Response schema for an order."""

    model_config = {"from_attributes": True}

    order_id: str
    portfolio_id: str
    stock_id: str
    side: OrderSide
    quantity: float
    price: float
    currency: str
    placed_at: datetime
    status: OrderStatus
    filled_at: Optional[datetime] = None
