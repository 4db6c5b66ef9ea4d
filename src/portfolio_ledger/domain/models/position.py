"""Position domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Position:
    """Holding of one stock in one portfolio, keyed by (portfolio_id, stock_id)."""

    portfolio_id: str
    stock_id: str
    currency: str
    quantity: Decimal = field(default_factory=lambda: Decimal("0"))
    avg_price: Decimal = field(default_factory=lambda: Decimal("0"))
    last_price: Optional[Decimal] = None
    updated_at: Optional[datetime] = field(default=None)
