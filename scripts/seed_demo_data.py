#!/usr/bin/env python3
"""
Seed the configured database with a demo portfolio.

Creates "Demo Portfolio" (USD, all aggregates zero) for the demo user unless
that user already has one. Pass --with-activity to also record a deposit and
a couple of settled orders.

Usage: from project root:
  python scripts/seed_demo_data.py [--with-activity]
"""

import argparse
import logging
import sys
from decimal import Decimal

from portfolio_ledger.config import setup_logging
from portfolio_ledger.domain.models import CashMovementType, OrderSide
from portfolio_ledger.repositories.sqlalchemy import (
    SqlAlchemyLedgerGateway,
    init_db,
    session_scope,
)
from portfolio_ledger.services import (
    PortfolioService,
    PortfolioCreate,
    CashMovementService,
    CashMovementCreate,
    OrderService,
    OrderCreate,
)

logger = logging.getLogger(__name__)

DEMO_USER_ID = 1
DEMO_PORTFOLIO_NAME = "Demo Portfolio"


def seed(with_activity: bool = False) -> str:
    """Create the demo portfolio if missing and return its id."""
    init_db()
    with session_scope() as session:
        gateway = SqlAlchemyLedgerGateway(session)
        portfolio_service = PortfolioService(gateway)

        existing = [
            p for p in portfolio_service.list_user_portfolios(DEMO_USER_ID)
            if p.name == DEMO_PORTFOLIO_NAME
        ]
        if existing:
            logger.info(f"{DEMO_PORTFOLIO_NAME} already exists: {existing[0].portfolio_id}")
            return existing[0].portfolio_id

        portfolio = portfolio_service.create_portfolio(
            PortfolioCreate(user_id=DEMO_USER_ID, name=DEMO_PORTFOLIO_NAME, base_currency="USD")
        )

        if with_activity:
            CashMovementService(gateway).record_movement(
                CashMovementCreate(
                    portfolio_id=portfolio.portfolio_id,
                    movement_type=CashMovementType.DEPOSIT,
                    amount=Decimal("10000"),
                    currency="USD",
                    note="Initial funding",
                )
            )
            orders = OrderService(gateway)
            for side, stock_id, quantity, price in (
                (OrderSide.BUY, "AAPL", Decimal("10"), Decimal("185.50")),
                (OrderSide.BUY, "MSFT", Decimal("5"), Decimal("375.00")),
                (OrderSide.SELL, "AAPL", Decimal("4"), Decimal("190.25")),
            ):
                orders.place_order(
                    OrderCreate(
                        portfolio_id=portfolio.portfolio_id,
                        stock_id=stock_id,
                        side=side,
                        quantity=quantity,
                        price=price,
                        currency="USD",
                    )
                )

        logger.info(f"Seeded user {DEMO_USER_ID} with portfolio {portfolio.portfolio_id}")
        return portfolio.portfolio_id


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument(
        "--with-activity",
        action="store_true",
        help="also record a deposit and a few settled orders",
    )
    args = parser.parse_args()

    setup_logging()
    try:
        portfolio_id = seed(with_activity=args.with_activity)
    except Exception:
        logger.exception("Error while seeding database")
        return 1
    print(portfolio_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
