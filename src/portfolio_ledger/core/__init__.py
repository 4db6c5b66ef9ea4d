"""Core utilities and shared functionality."""

from portfolio_ledger.core.timezone import (
    now_utc,
    to_utc,
    parse_datetime_utc,
    coerce_timestamp,
    UTC,
)
from portfolio_ledger.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    PortfolioNotFoundError,
    PortfolioPositionNotFoundError,
    PositionNotFoundError,
    OrderNotFoundError,
    InsufficientFundsError,
    InsufficientStockQuantityError,
    NegativePositionError,
    InvalidOrderTransitionError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "parse_datetime_utc",
    "coerce_timestamp",
    "UTC",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "PortfolioNotFoundError",
    "PortfolioPositionNotFoundError",
    "PositionNotFoundError",
    "OrderNotFoundError",
    "InsufficientFundsError",
    "InsufficientStockQuantityError",
    "NegativePositionError",
    "InvalidOrderTransitionError",
]
