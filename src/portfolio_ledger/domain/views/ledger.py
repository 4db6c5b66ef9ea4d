"""View models for ledger timeline outputs."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class LedgerActionKind(str, Enum):
    """Source of a timeline entry."""

    CASH_MOVEMENT = "CASH_MOVEMENT"
    ORDER = "ORDER"


@dataclass
class LedgerAction:
    """One entry of a portfolio's latest-actions timeline."""

    kind: LedgerActionKind
    action_id: str
    occurred_at: datetime
    action_type: str  # DEPOSIT/WITHDRAWAL or BUY/SELL
    amount: Decimal
    currency: str
    stock_id: Optional[str] = None
    quantity: Optional[Decimal] = None
    price: Optional[Decimal] = None
    status: Optional[str] = None
    note: Optional[str] = None
