"""CashMovement domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from portfolio_ledger.domain.models.enums import CashMovementType


@dataclass
class CashMovement:
    """
    Immutable record of cash entering or leaving a portfolio.

    ``amount`` is always positive; the direction comes from ``movement_type``.
    """

    movement_id: str
    portfolio_id: str
    movement_type: CashMovementType
    amount: Decimal
    currency: str
    happened_at: datetime
    note: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.movement_type, str):
            self.movement_type = CashMovementType(self.movement_type)

    @property
    def signed_amount(self) -> Decimal:
        """Cash impact: positive for deposits, negative for withdrawals."""
        if self.movement_type == CashMovementType.WITHDRAWAL:
            return -self.amount
        return self.amount
