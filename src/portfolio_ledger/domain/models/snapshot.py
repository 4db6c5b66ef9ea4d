"""PortfolioSnapshot domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass
class PortfolioSnapshot:
    """Point-in-time aggregate values, unique per (portfolio_id, as_of)."""

    snapshot_id: str
    portfolio_id: str
    as_of: datetime
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    cash_value: Decimal = field(default_factory=lambda: Decimal("0"))
    invested_value: Decimal = field(default_factory=lambda: Decimal("0"))
