"""
Unit tests for PositionService.

Tests cover:
- Quantity adjustments (positive, negative, to zero)
- POSITION_NOT_FOUND and POSITION_NEGATIVE rejections
- Manual upserts
- Portfolio aggregates untouched by direct position maintenance
"""

import pytest
from decimal import Decimal

from portfolio_ledger.services import (
    PositionService,
    PositionAdjust,
    PositionUpsert,
    PortfolioService,
)
from portfolio_ledger.core.exceptions import (
    PortfolioNotFoundError,
    PositionNotFoundError,
    NegativePositionError,
    ValidationError,
)


def _aapl(position_service: PositionService, portfolio_id: str):
    return next(p for p in position_service.list_positions(portfolio_id) if p.stock_id == "AAPL")


# =============================================================================
# ADJUST QUANTITY TESTS
# =============================================================================


class TestAdjustQuantity:
    """Tests for quantity deltas on existing positions."""

    def test_adjust_adds_delta(
        self,
        position_service: PositionService,
        portfolio_with_position,
    ):
        """
        GIVEN 10 AAPL held
        WHEN I adjust by +2.5
        THEN quantity is 12.5 and last price is unchanged
        """
        adjusted = position_service.adjust_quantity(
            PositionAdjust(
                portfolio_id=portfolio_with_position.portfolio_id,
                stock_id="AAPL",
                quantity_delta=Decimal("2.5"),
            )
        )

        assert adjusted.quantity == Decimal("12.5")
        assert adjusted.last_price == Decimal("50")

    def test_adjust_with_price_updates_last_price(
        self,
        position_service: PositionService,
        portfolio_with_position,
    ):
        """
        GIVEN 10 AAPL held at last price 50
        WHEN I adjust by -3 with price 55
        THEN quantity is 7 and last price is 55
        """
        adjusted = position_service.adjust_quantity(
            PositionAdjust(
                portfolio_id=portfolio_with_position.portfolio_id,
                stock_id="AAPL",
                quantity_delta=Decimal("-3"),
                price=Decimal("55"),
            )
        )

        assert adjusted.quantity == Decimal("7")
        assert adjusted.last_price == Decimal("55")
        assert _aapl(position_service, portfolio_with_position.portfolio_id).quantity == Decimal("7")

    def test_adjust_to_exactly_zero_allowed(
        self,
        position_service: PositionService,
        portfolio_with_position,
    ):
        """
        GIVEN 10 AAPL held
        WHEN I adjust by -10
        THEN quantity is zero
        """
        adjusted = position_service.adjust_quantity(
            PositionAdjust(
                portfolio_id=portfolio_with_position.portfolio_id,
                stock_id="AAPL",
                quantity_delta=Decimal("-10"),
            )
        )

        assert adjusted.quantity == Decimal("0")

    def test_adjust_below_zero_rejected(
        self,
        position_service: PositionService,
        portfolio_with_position,
    ):
        """
        GIVEN 10 AAPL held
        WHEN I adjust by -11
        THEN POSITION_NEGATIVE is raised and quantity stays 10
        """
        with pytest.raises(NegativePositionError) as exc_info:
            position_service.adjust_quantity(
                PositionAdjust(
                    portfolio_id=portfolio_with_position.portfolio_id,
                    stock_id="AAPL",
                    quantity_delta=Decimal("-11"),
                )
            )

        assert exc_info.value.code == "POSITION_NEGATIVE"
        assert _aapl(position_service, portfolio_with_position.portfolio_id).quantity == Decimal("10")

    def test_adjust_missing_position_rejected(
        self,
        position_service: PositionService,
        funded_portfolio,
    ):
        """
        GIVEN a portfolio without a TSLA position
        WHEN I adjust TSLA
        THEN POSITION_NOT_FOUND is raised
        """
        with pytest.raises(PositionNotFoundError) as exc_info:
            position_service.adjust_quantity(
                PositionAdjust(
                    portfolio_id=funded_portfolio.portfolio_id,
                    stock_id="TSLA",
                    quantity_delta=Decimal("1"),
                )
            )

        assert exc_info.value.code == "POSITION_NOT_FOUND"

    def test_adjust_leaves_portfolio_aggregates(
        self,
        position_service: PositionService,
        portfolio_service: PortfolioService,
        portfolio_with_position,
    ):
        """
        GIVEN cash 500 and invested 500
        WHEN I adjust the AAPL position
        THEN portfolio aggregates are unchanged
        """
        position_service.adjust_quantity(
            PositionAdjust(
                portfolio_id=portfolio_with_position.portfolio_id,
                stock_id="AAPL",
                quantity_delta=Decimal("5"),
            )
        )

        portfolio = portfolio_service.get_portfolio(portfolio_with_position.portfolio_id)
        assert portfolio.cash_value == Decimal("500")
        assert portfolio.invested_value == Decimal("500")


# =============================================================================
# UPSERT TESTS
# =============================================================================


class TestUpsertPosition:
    """Tests for manual position upserts."""

    def test_upsert_creates_then_overwrites(
        self,
        position_service: PositionService,
        sample_portfolio,
    ):
        """
        GIVEN an empty portfolio
        WHEN I upsert MSFT twice with different values
        THEN one MSFT row holds the second values
        """
        for quantity, avg_price in ((Decimal("3"), Decimal("300")), (Decimal("4"), Decimal("310"))):
            position_service.upsert_position(
                PositionUpsert(
                    portfolio_id=sample_portfolio.portfolio_id,
                    stock_id="MSFT",
                    currency="usd",
                    quantity=quantity,
                    avg_price=avg_price,
                )
            )

        positions = position_service.list_positions(sample_portfolio.portfolio_id)
        assert len(positions) == 1
        assert positions[0].quantity == Decimal("4")
        assert positions[0].avg_price == Decimal("310")
        assert positions[0].currency == "USD"

    def test_upsert_on_missing_portfolio_fails(self, position_service: PositionService):
        """
        GIVEN no portfolio with the given id
        WHEN I upsert a position into it
        THEN PortfolioNotFoundError is raised
        """
        with pytest.raises(PortfolioNotFoundError):
            position_service.upsert_position(
                PositionUpsert(
                    portfolio_id="missing",
                    stock_id="MSFT",
                    currency="USD",
                    quantity=Decimal("1"),
                    avg_price=Decimal("1"),
                )
            )

    def test_upsert_negative_price_rejected(
        self,
        position_service: PositionService,
        sample_portfolio,
    ):
        """
        GIVEN a portfolio
        WHEN I upsert with a negative average price
        THEN ValidationError is raised
        """
        with pytest.raises(ValidationError):
            position_service.upsert_position(
                PositionUpsert(
                    portfolio_id=sample_portfolio.portfolio_id,
                    stock_id="MSFT",
                    currency="USD",
                    quantity=Decimal("1"),
                    avg_price=Decimal("-1"),
                )
            )
