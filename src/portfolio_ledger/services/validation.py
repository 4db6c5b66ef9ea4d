"""Boundary validation helpers shared by the ledger services.

Each helper returns the normalized value or raises ``ValidationError``.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from portfolio_ledger.core.exceptions import ValidationError
from portfolio_ledger.core.timezone import coerce_timestamp
from portfolio_ledger.domain.models.precision import MONEY_PLACES

Number = Union[Decimal, int, float, str]

MAX_NOTE_LENGTH = 512
MAX_NAME_LENGTH = 255
MAX_DIGITS = 18


def to_finite_decimal(value: Number, field_name: str, places: int = MONEY_PLACES) -> Decimal:
    """
    Convert a number to a finite Decimal that fits the storage column.

    Values with more than ``places`` decimal places, or more than
    ``MAX_DIGITS - places`` integer digits, are rejected rather than rounded.
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} must be a number")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not result.is_finite():
        raise ValidationError(f"{field_name} must be finite")
    if abs(result) >= Decimal(10) ** (MAX_DIGITS - places):
        raise ValidationError(f"{field_name} is too large")
    if result != result.quantize(Decimal(1).scaleb(-places)):
        raise ValidationError(f"{field_name} must have at most {places} decimal places")
    return result


def require_positive(value: Number, field_name: str, places: int = MONEY_PLACES) -> Decimal:
    """Require a finite number > 0."""
    result = to_finite_decimal(value, field_name, places)
    if result <= 0:
        raise ValidationError(f"{field_name} must be > 0")
    return result


def require_non_negative(value: Number, field_name: str, places: int = MONEY_PLACES) -> Decimal:
    """Require a finite number >= 0."""
    result = to_finite_decimal(value, field_name, places)
    if result < 0:
        raise ValidationError(f"{field_name} must be >= 0")
    return result


def require_id(value: Optional[str], field_name: str) -> str:
    """Require a non-blank identifier."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def normalize_currency(code: Optional[str]) -> str:
    """Trim and upper-case an ISO 4217 code."""
    if not isinstance(code, str):
        raise ValidationError("currency must be a 3-letter ISO 4217 code")
    code = code.strip().upper()
    if len(code) != 3 or not code.isalpha():
        raise ValidationError("currency must be a 3-letter ISO 4217 code")
    return code


def normalize_note(note: Optional[str]) -> Optional[str]:
    """Trim a free-text note, enforcing the maximum length."""
    if note is None:
        return None
    note = note.strip()
    if len(note) > MAX_NOTE_LENGTH:
        raise ValidationError(f"note must be at most {MAX_NOTE_LENGTH} characters")
    return note


def normalize_name(name: Optional[str]) -> str:
    """Trim a display name, enforcing 1..255 characters."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name is required")
    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"name must be at most {MAX_NAME_LENGTH} characters")
    return name


def normalize_timestamp(value: Union[datetime, str, None], field_name: str) -> datetime:
    """Coerce an optional datetime/ISO string to naive UTC, defaulting to now."""
    try:
        return coerce_timestamp(value)
    except (ValueError, OverflowError):
        raise ValidationError(f"{field_name} is not a valid timestamp: {value!r}")
