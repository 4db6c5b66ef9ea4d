"""Decimal precision of stored money and quantity values."""

from decimal import Decimal, ROUND_HALF_UP

# Must match the scale of the MONEY / QUANTITY columns.
MONEY_PLACES = 4
QUANTITY_PLACES = 8

MONEY_QUANTUM = Decimal(1).scaleb(-MONEY_PLACES)
QUANTITY_QUANTUM = Decimal(1).scaleb(-QUANTITY_PLACES)


def round_money(value: Decimal) -> Decimal:
    """Round a derived money value (e.g. quantity * price) to storage scale."""
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
