"""Position service: listing, manual upserts and quantity adjustments."""

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional

from portfolio_ledger.core.exceptions import (
    PortfolioNotFoundError,
    PositionNotFoundError,
    NegativePositionError,
)
from portfolio_ledger.core.timezone import now_utc, to_utc
from portfolio_ledger.domain.models import Position, QUANTITY_PLACES
from portfolio_ledger.repositories.protocols import LedgerGateway, LedgerTransaction
from portfolio_ledger.services.validation import (
    require_id,
    to_finite_decimal,
    require_non_negative,
    normalize_currency,
)

logger = logging.getLogger(__name__)


@dataclass
class PositionAdjust:
    """Input data for a quantity delta on an existing position."""

    portfolio_id: str
    stock_id: str
    quantity_delta: Decimal
    price: Optional[Decimal] = None


@dataclass
class PositionUpsert:
    """Input data for overwriting a position row."""

    portfolio_id: str
    stock_id: str
    currency: str
    quantity: Decimal
    avg_price: Decimal
    last_price: Optional[Decimal] = None


class PositionService:
    """
    Direct position maintenance.

    These operations correct holdings without touching portfolio cash or
    invested value; order fills go through ``OrderService``.
    """

    def __init__(self, gateway: LedgerGateway):
        self._gateway = gateway

    def adjust_quantity(self, data: PositionAdjust) -> Position:
        """
        Add ``quantity_delta`` to a position's quantity.

        Fails with POSITION_NOT_FOUND if the row does not exist and with
        POSITION_NEGATIVE if the result would be below zero. ``price``, when
        given, replaces ``last_price``.
        """
        portfolio_id = require_id(data.portfolio_id, "portfolio_id")
        stock_id = require_id(data.stock_id, "stock_id")
        delta = to_finite_decimal(data.quantity_delta, "quantity_delta", QUANTITY_PLACES)
        price = require_non_negative(data.price, "price") if data.price is not None else None

        def work(tx: LedgerTransaction) -> Position:
            position = tx.positions.get(portfolio_id, stock_id, for_update=True)
            if position is None:
                raise PositionNotFoundError(portfolio_id, stock_id)

            next_quantity = position.quantity + delta
            if next_quantity < 0:
                raise NegativePositionError(stock_id, str(position.quantity), str(delta))

            return tx.positions.upsert(
                replace(
                    position,
                    quantity=next_quantity,
                    last_price=price if price is not None else position.last_price,
                    updated_at=to_utc(now_utc()),
                )
            )

        adjusted = self._gateway.run_transaction(work)
        logger.info(f"Adjusted {stock_id} in portfolio {portfolio_id} by {delta}")
        return adjusted

    def upsert_position(self, data: PositionUpsert) -> Position:
        """Create or overwrite the position for (portfolio_id, stock_id)."""
        position = Position(
            portfolio_id=require_id(data.portfolio_id, "portfolio_id"),
            stock_id=require_id(data.stock_id, "stock_id"),
            currency=normalize_currency(data.currency),
            quantity=to_finite_decimal(data.quantity, "quantity", QUANTITY_PLACES),
            avg_price=require_non_negative(data.avg_price, "avg_price"),
            last_price=(
                require_non_negative(data.last_price, "last_price")
                if data.last_price is not None
                else None
            ),
            updated_at=to_utc(now_utc()),
        )

        def work(tx: LedgerTransaction) -> Position:
            if tx.portfolios.get_by_id(position.portfolio_id) is None:
                raise PortfolioNotFoundError(position.portfolio_id)
            return tx.positions.upsert(position)

        return self._gateway.run_transaction(work)

    def list_positions(self, portfolio_id: str) -> list[Position]:
        """List positions of a portfolio, most recently updated first."""

        def work(tx: LedgerTransaction) -> list[Position]:
            if tx.portfolios.get_by_id(portfolio_id) is None:
                raise PortfolioNotFoundError(portfolio_id)
            return tx.positions.list_by_portfolio(portfolio_id)

        return self._gateway.run_transaction(work)
