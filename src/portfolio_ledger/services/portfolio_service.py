"""Portfolio service: creation, lookup and the latest-actions timeline."""

import logging
import uuid
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional

from portfolio_ledger.core.exceptions import ValidationError, PortfolioNotFoundError
from portfolio_ledger.core.timezone import now_utc, to_utc
from portfolio_ledger.domain.models import Portfolio, CashMovement, Order
from portfolio_ledger.domain.views import LedgerAction, LedgerActionKind
from portfolio_ledger.repositories.protocols import LedgerGateway, LedgerTransaction
from portfolio_ledger.services.validation import (
    require_id,
    require_non_negative,
    normalize_currency,
    normalize_name,
)

logger = logging.getLogger(__name__)


@dataclass
class PortfolioCreate:
    """Input data for creating a portfolio."""

    user_id: int
    name: str
    base_currency: str = "USD"
    opening_cash: Decimal = Decimal("0")


@dataclass
class PortfolioUpdate:
    """Input data for renaming a portfolio."""

    portfolio_id: str
    name: str


class PortfolioService:
    """Portfolio lifecycle outside of the cash and order engines."""

    def __init__(self, gateway: LedgerGateway, default_actions_limit: int = 10):
        self._gateway = gateway
        self._default_actions_limit = default_actions_limit

    def create_portfolio(self, data: PortfolioCreate) -> Portfolio:
        """
        Create a portfolio for a user.

        Opening cash counts as cash and total value; invested value starts at zero.
        """
        if isinstance(data.user_id, bool) or not isinstance(data.user_id, int) or data.user_id <= 0:
            raise ValidationError("user_id must be a positive integer")
        opening_cash = require_non_negative(data.opening_cash, "opening_cash")

        portfolio = Portfolio(
            portfolio_id=str(uuid.uuid4()),
            user_id=data.user_id,
            name=normalize_name(data.name),
            base_currency=normalize_currency(data.base_currency),
            cash_value=opening_cash,
            invested_value=Decimal("0"),
            total_value=opening_cash,
            created_at=to_utc(now_utc()),
        )
        created = self._gateway.run_transaction(lambda tx: tx.portfolios.create(portfolio))
        logger.info(f"Created portfolio {created.portfolio_id} for user {created.user_id}")
        return created

    def get_portfolio(self, portfolio_id: str) -> Portfolio:
        """Get portfolio by ID."""
        portfolio = self._gateway.run_transaction(
            lambda tx: tx.portfolios.get_by_id(portfolio_id)
        )
        if portfolio is None:
            raise PortfolioNotFoundError(portfolio_id)
        return portfolio

    def list_user_portfolios(self, user_id: int) -> list[Portfolio]:
        """List a user's portfolios, newest first."""
        return self._gateway.run_transaction(lambda tx: tx.portfolios.list_by_user(user_id))

    def update_portfolio_info(self, data: PortfolioUpdate) -> Portfolio:
        """Rename a portfolio. Aggregates are never edited here."""
        portfolio_id = require_id(data.portfolio_id, "portfolio_id")
        name = normalize_name(data.name)

        def work(tx: LedgerTransaction) -> Portfolio:
            portfolio = tx.portfolios.get_by_id(portfolio_id, for_update=True)
            if portfolio is None:
                raise PortfolioNotFoundError(portfolio_id)
            return tx.portfolios.update(replace(portfolio, name=name))

        return self._gateway.run_transaction(work)

    def latest_actions(self, portfolio_id: str, limit: Optional[int] = None) -> list[LedgerAction]:
        """
        Merge cash movements and orders into one timeline, newest first.

        Args:
            portfolio_id: Portfolio to inspect
            limit: Maximum number of entries (defaults to the configured limit)
        """
        limit = self._default_actions_limit if limit is None else limit
        if limit < 1:
            raise ValidationError("limit must be >= 1")

        def work(tx: LedgerTransaction) -> list[LedgerAction]:
            if tx.portfolios.get_by_id(portfolio_id) is None:
                raise PortfolioNotFoundError(portfolio_id)
            movements = tx.cash_movements.list_by_portfolio(portfolio_id, limit=limit)
            orders = tx.orders.list_by_portfolio(portfolio_id, limit=limit)
            return [self._movement_action(m) for m in movements] + [
                self._order_action(o) for o in orders
            ]

        actions = self._gateway.run_transaction(work)
        actions.sort(key=lambda a: a.occurred_at, reverse=True)
        return actions[:limit]

    @staticmethod
    def _movement_action(movement: CashMovement) -> LedgerAction:
        return LedgerAction(
            kind=LedgerActionKind.CASH_MOVEMENT,
            action_id=movement.movement_id,
            occurred_at=movement.happened_at,
            action_type=movement.movement_type.value,
            amount=movement.amount,
            currency=movement.currency,
            note=movement.note,
        )

    @staticmethod
    def _order_action(order: Order) -> LedgerAction:
        return LedgerAction(
            kind=LedgerActionKind.ORDER,
            action_id=order.order_id,
            occurred_at=order.placed_at,
            action_type=order.side.value,
            amount=order.cost,
            currency=order.currency,
            stock_id=order.stock_id,
            quantity=order.quantity,
            price=order.price,
            status=order.status.value,
        )
