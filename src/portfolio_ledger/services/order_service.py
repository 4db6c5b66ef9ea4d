"""Order settlement engine: buy/sell orders and their status lifecycle."""

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from portfolio_ledger.core.exceptions import (
    ValidationError,
    PortfolioNotFoundError,
    PortfolioPositionNotFoundError,
    OrderNotFoundError,
    InsufficientFundsError,
    InsufficientStockQuantityError,
    InvalidOrderTransitionError,
)
from portfolio_ledger.domain.models import Order, OrderSide, OrderStatus, Position, QUANTITY_PLACES
from portfolio_ledger.repositories.protocols import LedgerGateway, LedgerTransaction
from portfolio_ledger.services.snapshot_service import write_snapshot
from portfolio_ledger.services.validation import (
    require_id,
    require_positive,
    normalize_currency,
    normalize_timestamp,
)

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    OrderStatus.PENDING: (OrderStatus.FILLED, OrderStatus.CANCELED),
}


@dataclass
class OrderCreate:
    """Input data for placing an order."""

    portfolio_id: str
    stock_id: str
    side: OrderSide
    quantity: Decimal
    price: Decimal
    currency: str
    placed_at: Optional[Union[datetime, str]] = None


@dataclass
class OrderStatusUpdate:
    """Input data for moving an order to a new status."""

    order_id: str
    status: OrderStatus
    filled_at: Optional[Union[datetime, str]] = None


class OrderService:
    """
    Places orders and settles fills.

    Every fill, whether immediate (``place_order``) or deferred
    (``update_order_status`` to FILLED), goes through ``_settle``: inside one
    transaction it checks funds or holdings against locked rows, moves cost
    between cash and invested value, upserts the position and writes the
    snapshot. Orders settle at their own price; there is no matching.
    """

    def __init__(self, gateway: LedgerGateway):
        self._gateway = gateway

    def place_order(self, data: OrderCreate) -> Order:
        """Place an order that fills immediately and return it (status FILLED)."""
        order = self._build_order(data)
        order = replace(order, status=OrderStatus.FILLED, filled_at=order.placed_at)

        def work(tx: LedgerTransaction) -> Order:
            self._settle(tx, order, as_of=order.placed_at)
            return tx.orders.create(order)

        created = self._gateway.run_transaction(work)
        logger.info(
            f"Filled {created.side.value} {created.quantity} x {created.stock_id} "
            f"@ {created.price} for portfolio {created.portfolio_id}"
        )
        return created

    def submit_order(self, data: OrderCreate) -> Order:
        """
        Record a PENDING order without side effects.

        Funds and holdings are checked when the order is filled.
        """
        order = self._build_order(data)

        def work(tx: LedgerTransaction) -> Order:
            if tx.portfolios.get_by_id(order.portfolio_id) is None:
                raise PortfolioNotFoundError(order.portfolio_id)
            return tx.orders.create(order)

        created = self._gateway.run_transaction(work)
        logger.info(f"Submitted pending order {created.order_id} for portfolio {created.portfolio_id}")
        return created

    def update_order_status(self, data: OrderStatusUpdate) -> Order:
        """
        Move a PENDING order to FILLED or CANCELED.

        FILLED settles the order exactly like ``place_order`` (snapshot keyed
        by ``filled_at``, default now); CANCELED only changes the label.
        """
        order_id = require_id(data.order_id, "order_id")
        try:
            status = OrderStatus(data.status)
        except ValueError:
            raise ValidationError(f"Unknown order status: {data.status}")
        filled_at = normalize_timestamp(data.filled_at, "filled_at")

        def work(tx: LedgerTransaction) -> Order:
            order = tx.orders.get_by_id(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)
            # Lock order: portfolio row, then the order row.
            tx.portfolios.get_by_id(order.portfolio_id, for_update=True)
            order = tx.orders.get_by_id(order_id, for_update=True)
            if status not in ALLOWED_TRANSITIONS.get(order.status, ()):
                raise InvalidOrderTransitionError(order_id, order.status.value, status.value)

            if status == OrderStatus.FILLED:
                self._settle(tx, order, as_of=filled_at)
                return tx.orders.update(replace(order, status=status, filled_at=filled_at))
            return tx.orders.update(replace(order, status=status, filled_at=None))

        updated = self._gateway.run_transaction(work)
        logger.info(f"Order {updated.order_id} is now {updated.status.value}")
        return updated

    def list_orders(self, portfolio_id: str) -> list[Order]:
        """List orders of a portfolio, newest first."""

        def work(tx: LedgerTransaction) -> list[Order]:
            if tx.portfolios.get_by_id(portfolio_id) is None:
                raise PortfolioNotFoundError(portfolio_id)
            return tx.orders.list_by_portfolio(portfolio_id)

        return self._gateway.run_transaction(work)

    @staticmethod
    def _settle(tx: LedgerTransaction, order: Order, as_of: datetime) -> None:
        """Apply a fill's effects. All checks run before the first write."""
        portfolio = tx.portfolios.get_by_id(order.portfolio_id, for_update=True)
        if portfolio is None:
            raise PortfolioNotFoundError(order.portfolio_id)

        cost = order.cost
        position = tx.positions.get(order.portfolio_id, order.stock_id, for_update=True)

        if order.side == OrderSide.BUY:
            if portfolio.cash_value < cost:
                logger.warning(
                    f"Rejected BUY of {order.stock_id} costing {cost}: "
                    f"cash {portfolio.cash_value} in portfolio {portfolio.portfolio_id}"
                )
                raise InsufficientFundsError(str(cost), str(portfolio.cash_value))
            next_cash = portfolio.cash_value - cost
            next_invested = portfolio.invested_value + cost
        else:
            if position is None:
                raise PortfolioPositionNotFoundError(order.portfolio_id, order.stock_id)
            if position.quantity < order.quantity:
                logger.warning(
                    f"Rejected SELL of {order.quantity} x {order.stock_id}: "
                    f"holding {position.quantity} in portfolio {portfolio.portfolio_id}"
                )
                raise InsufficientStockQuantityError(
                    order.stock_id, str(order.quantity), str(position.quantity)
                )
            next_cash = portfolio.cash_value + cost
            # Realized gains can exceed the remaining cost; invested value stays >= 0.
            next_invested = max(portfolio.invested_value - cost, Decimal("0"))

        updated = tx.portfolios.update(
            replace(
                portfolio,
                cash_value=next_cash,
                invested_value=next_invested,
                total_value=next_cash + next_invested,
            )
        )

        if position is None:
            position = Position(
                portfolio_id=order.portfolio_id,
                stock_id=order.stock_id,
                currency=order.currency,
                quantity=order.signed_quantity,
            )
        else:
            position = replace(position, quantity=position.quantity + order.signed_quantity)
        # Last fill price wins; there is no weighted-average cost basis.
        tx.positions.upsert(
            replace(position, avg_price=order.price, last_price=order.price, updated_at=as_of)
        )

        write_snapshot(tx, updated, as_of)

    @staticmethod
    def _build_order(data: OrderCreate) -> Order:
        """Validate input and build a PENDING order record."""
        try:
            side = OrderSide(data.side)
        except ValueError:
            raise ValidationError(f"Unknown order side: {data.side}")

        return Order(
            order_id=str(uuid.uuid4()),
            portfolio_id=require_id(data.portfolio_id, "portfolio_id"),
            stock_id=require_id(data.stock_id, "stock_id"),
            side=side,
            quantity=require_positive(data.quantity, "quantity", QUANTITY_PLACES),
            price=require_positive(data.price, "price"),
            currency=normalize_currency(data.currency),
            placed_at=normalize_timestamp(data.placed_at, "placed_at"),
        )
