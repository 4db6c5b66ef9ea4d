"""Portfolio domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Portfolio:
    """
    A user's account holding cash and stock positions.

    Aggregates are maintained by the ledger engines; after every committed
    mutation ``total_value == cash_value + invested_value``.
    """

    portfolio_id: str
    user_id: int
    name: str
    base_currency: str = "USD"
    cash_value: Decimal = field(default_factory=lambda: Decimal("0"))
    invested_value: Decimal = field(default_factory=lambda: Decimal("0"))
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    created_at: Optional[datetime] = field(default=None)
