"""Enumerations for domain models."""

from enum import Enum


class CashMovementType(str, Enum):
    """Kinds of cash movement. Direction is encoded by type, never by sign."""

    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    ORDER_SETTLEMENT = "ORDER_SETTLEMENT"
    ADJUSTMENT = "ADJUSTMENT"


class OrderSide(str, Enum):
    """Order direction."""

    BUY = "BUY"
    SELL = "SELL"


class OrderStatus(str, Enum):
    """Order lifecycle states."""

    PENDING = "PENDING"
    FILLED = "FILLED"
    CANCELED = "CANCELED"
