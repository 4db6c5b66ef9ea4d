"""Application-level exceptions.

Every error carries a stable machine-readable ``code`` and the HTTP status
class the API layer should answer with.
"""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    status_code: int = 400

    def __init__(self, message: str, code: str = "APP_ERROR", status_code: Optional[int] = None):
        self.message = message
        self.code = code
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str, code: str = "NOT_FOUND"):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}", code=code)


class PortfolioNotFoundError(NotFoundError):
    """Raised when a portfolio does not exist."""

    def __init__(self, portfolio_id: str):
        super().__init__("Portfolio", portfolio_id, code="PORTFOLIO_NOT_FOUND")


class PortfolioPositionNotFoundError(NotFoundError):
    """Raised when selling a stock the portfolio has never held."""

    def __init__(self, portfolio_id: str, stock_id: str):
        super().__init__(
            "Portfolio position",
            f"{portfolio_id}/{stock_id}",
            code="PORTFOLIO_POSITION_NOT_FOUND",
        )


class PositionNotFoundError(NotFoundError):
    """Raised when adjusting a position row that does not exist."""

    def __init__(self, portfolio_id: str, stock_id: str):
        super().__init__("Position", f"{portfolio_id}/{stock_id}", code="POSITION_NOT_FOUND")


class OrderNotFoundError(NotFoundError):
    """Raised when an order does not exist."""

    def __init__(self, order_id: str):
        super().__init__("Order", order_id, code="ORDER_NOT_FOUND")


class InsufficientFundsError(AppError):
    """Raised when a withdrawal or purchase exceeds the available cash."""

    def __init__(self, requested: str, available: str):
        super().__init__(
            f"Insufficient funds: requested {requested}, available {available}",
            code="INSUFFICIENT_FUNDS",
        )


class InsufficientStockQuantityError(AppError):
    """Raised when attempting to sell more shares than held."""

    def __init__(self, stock_id: str, requested: str, available: str):
        super().__init__(
            f"Insufficient quantity of {stock_id}: requested {requested}, available {available}",
            code="INSUFFICIENT_STOCK_QUANTITY",
        )


class NegativePositionError(AppError):
    """Raised when a quantity adjustment would drive a position below zero."""

    def __init__(self, stock_id: str, current: str, delta: str):
        super().__init__(
            f"Adjusting {stock_id} by {delta} would leave a negative quantity (current {current})",
            code="POSITION_NEGATIVE",
        )


class InvalidOrderTransitionError(AppError):
    """Raised when an order status change is not allowed."""

    def __init__(self, order_id: str, current: str, requested: str):
        super().__init__(
            f"Order {order_id} cannot move from {current} to {requested}",
            code="ORDER_STATUS_TRANSITION_INVALID",
        )
