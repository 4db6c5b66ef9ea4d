"""
Unit tests for PortfolioService.

Tests cover:
- Portfolio creation and opening cash
- Lookup, per-user listing and renaming
- Latest-actions timeline merging movements and orders
"""

import pytest
from decimal import Decimal

from portfolio_ledger.services import PortfolioService, PortfolioCreate, PortfolioUpdate
from portfolio_ledger.domain.models import CashMovementType, OrderSide
from portfolio_ledger.domain.views import LedgerActionKind
from portfolio_ledger.core.exceptions import ValidationError, PortfolioNotFoundError

from tests.conftest import utc_datetime


# =============================================================================
# CREATE / READ TESTS
# =============================================================================


class TestCreatePortfolio:
    """Tests for portfolio creation and lookup."""

    def test_create_portfolio_defaults(self, portfolio_service: PortfolioService):
        """
        GIVEN no portfolios exist
        WHEN I create a portfolio without opening cash
        THEN all aggregates are zero and the base currency is USD
        """
        portfolio = portfolio_service.create_portfolio(
            PortfolioCreate(user_id=1, name="Demo Portfolio")
        )

        assert portfolio.portfolio_id is not None
        assert portfolio.base_currency == "USD"
        assert portfolio.cash_value == Decimal("0")
        assert portfolio.invested_value == Decimal("0")
        assert portfolio.total_value == Decimal("0")
        assert portfolio.created_at is not None

    def test_opening_cash_counts_as_cash_and_total(self, portfolio_service: PortfolioService):
        """
        GIVEN no portfolios exist
        WHEN I create a portfolio with opening cash 250
        THEN cash and total value are 250
        """
        portfolio = portfolio_service.create_portfolio(
            PortfolioCreate(user_id=1, name="Seeded", opening_cash=Decimal("250"))
        )

        assert portfolio.cash_value == Decimal("250")
        assert portfolio.total_value == Decimal("250")

    @pytest.mark.parametrize("user_id", [0, -1, True])
    def test_invalid_user_id_rejected(self, portfolio_service: PortfolioService, user_id):
        """
        GIVEN no portfolios exist
        WHEN I create a portfolio with a non-positive or boolean user id
        THEN ValidationError is raised
        """
        with pytest.raises(ValidationError):
            portfolio_service.create_portfolio(PortfolioCreate(user_id=user_id, name="Bad"))

    def test_blank_name_rejected(self, portfolio_service: PortfolioService):
        """
        GIVEN no portfolios exist
        WHEN I create a portfolio with a blank name
        THEN ValidationError is raised
        """
        with pytest.raises(ValidationError):
            portfolio_service.create_portfolio(PortfolioCreate(user_id=1, name="   "))

    def test_get_missing_portfolio_fails(self, portfolio_service: PortfolioService):
        """
        GIVEN no portfolio with the given id
        WHEN I get it
        THEN PortfolioNotFoundError is raised
        """
        with pytest.raises(PortfolioNotFoundError):
            portfolio_service.get_portfolio("missing")

    def test_list_user_portfolios_filters_by_user(
        self,
        portfolio_service: PortfolioService,
        portfolio_factory,
    ):
        """
        GIVEN two portfolios for user 1 and one for user 2
        WHEN I list user 1's portfolios
        THEN only user 1's two portfolios are returned
        """
        portfolio_factory(user_id=1, name="A")
        portfolio_factory(user_id=1, name="B")
        portfolio_factory(user_id=2, name="C")

        portfolios = portfolio_service.list_user_portfolios(1)

        assert {p.name for p in portfolios} == {"A", "B"}

    def test_rename_portfolio(
        self,
        portfolio_service: PortfolioService,
        funded_portfolio,
    ):
        """
        GIVEN a funded portfolio
        WHEN I rename it
        THEN the name changes and aggregates are preserved
        """
        updated = portfolio_service.update_portfolio_info(
            PortfolioUpdate(portfolio_id=funded_portfolio.portfolio_id, name="  Renamed ")
        )

        assert updated.name == "Renamed"
        assert updated.cash_value == Decimal("1000")


# =============================================================================
# LATEST ACTIONS TESTS
# =============================================================================


class TestLatestActions:
    """Tests for the merged latest-actions timeline."""

    def test_actions_merged_newest_first(
        self,
        portfolio_service: PortfolioService,
        deposit_factory,
        order_factory,
        sample_portfolio,
    ):
        """
        GIVEN a deposit, then a BUY, then a second deposit
        WHEN I request latest actions
        THEN all three are returned newest first with their kinds
        """
        portfolio_id = sample_portfolio.portfolio_id
        deposit_factory(portfolio_id, Decimal("1000"), happened_at=utc_datetime(2024, 1, 1))
        order_factory(
            portfolio_id,
            OrderSide.BUY,
            "AAPL",
            Decimal("2"),
            Decimal("100"),
            placed_at=utc_datetime(2024, 1, 2),
        )
        deposit_factory(portfolio_id, Decimal("50"), happened_at=utc_datetime(2024, 1, 3))

        actions = portfolio_service.latest_actions(portfolio_id)

        assert [a.kind for a in actions] == [
            LedgerActionKind.CASH_MOVEMENT,
            LedgerActionKind.ORDER,
            LedgerActionKind.CASH_MOVEMENT,
        ]
        assert actions[0].amount == Decimal("50")
        assert actions[1].action_type == OrderSide.BUY.value
        assert actions[1].amount == Decimal("200")
        assert actions[1].stock_id == "AAPL"
        assert actions[2].action_type == CashMovementType.DEPOSIT.value

    def test_limit_truncates_timeline(
        self,
        portfolio_service: PortfolioService,
        deposit_factory,
        sample_portfolio,
    ):
        """
        GIVEN five deposits
        WHEN I request latest actions with limit 2
        THEN the two newest are returned
        """
        for day in range(1, 6):
            deposit_factory(
                sample_portfolio.portfolio_id,
                Decimal(day),
                happened_at=utc_datetime(2024, 1, day),
            )

        actions = portfolio_service.latest_actions(sample_portfolio.portfolio_id, limit=2)

        assert [a.amount for a in actions] == [Decimal("5"), Decimal("4")]

    def test_non_positive_limit_rejected(
        self,
        portfolio_service: PortfolioService,
        sample_portfolio,
    ):
        """
        GIVEN a portfolio
        WHEN I request latest actions with limit 0
        THEN ValidationError is raised
        """
        with pytest.raises(ValidationError):
            portfolio_service.latest_actions(sample_portfolio.portfolio_id, limit=0)
