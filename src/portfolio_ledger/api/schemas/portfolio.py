"""Pydantic schemas for portfolio endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from portfolio_ledger.domain.views import LedgerActionKind


class PortfolioCreateRequest(BaseModel):
    """Request schema for creating a portfolio."""

    user_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=255)
    base_currency: str = Field(default="USD", min_length=3, max_length=3, description="ISO 4217 code")
    opening_cash: Decimal = Field(default=Decimal("0"), ge=0)


class PortfolioUpdateRequest(BaseModel):
    """Request schema for renaming a portfolio."""

    name: str = Field(..., min_length=1, max_length=255)


class PortfolioResponse(BaseModel):
    """Response schema for a single portfolio."""

    model_config = {"from_attributes": True}

    portfolio_id: str
    user_id: int
    name: str
    base_currency: str
    cash_value: float
    invested_value: float
    total_value: float
    created_at: Optional[datetime] = None


class LedgerActionResponse(BaseModel):
    """One entry of the latest-actions timeline."""

    model_config = {"from_attributes": True}

    kind: LedgerActionKind
    action_id: str
    occurred_at: datetime
    action_type: str
    amount: float
    currency: str
    stock_id: Optional[str] = None
    quantity: Optional[float] = None
    price: Optional[float] = None
    status: Optional[str] = None
    note: Optional[str] = None
