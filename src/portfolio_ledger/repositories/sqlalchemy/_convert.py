"""Column value conversion helpers shared by the SQLAlchemy repositories."""

from decimal import Decimal
from typing import Optional


def to_decimal(value) -> Decimal:
    """Convert a Numeric column value to Decimal, treating NULL as zero."""
    return Decimal(str(value)) if value is not None else Decimal("0")


def to_optional_decimal(value) -> Optional[Decimal]:
    """Convert a nullable Numeric column value to Decimal."""
    return Decimal(str(value)) if value is not None else None
