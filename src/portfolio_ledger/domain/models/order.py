"""Order domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from portfolio_ledger.domain.models.enums import OrderSide, OrderStatus
from portfolio_ledger.domain.models.precision import round_money


@dataclass
class Order:
    """A buy/sell instruction for one stock at a fixed per-unit price."""

    order_id: str
    portfolio_id: str
    stock_id: str
    side: OrderSide
    quantity: Decimal
    price: Decimal
    currency: str
    placed_at: datetime
    status: OrderStatus = OrderStatus.PENDING
    filled_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.side, str):
            self.side = OrderSide(self.side)
        if isinstance(self.status, str):
            self.status = OrderStatus(self.status)

    @property
    def cost(self) -> Decimal:
        """Gross value of the order (quantity * price), rounded to money scale."""
        return round_money(self.quantity * self.price)

    @property
    def signed_quantity(self) -> Decimal:
        """Position delta: positive for BUY, negative for SELL."""
        return self.quantity if self.side == OrderSide.BUY else -self.quantity
