"""Snapshot service: point-in-time records of portfolio aggregates."""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from portfolio_ledger.core.exceptions import PortfolioNotFoundError
from portfolio_ledger.domain.models import Portfolio, PortfolioSnapshot
from portfolio_ledger.repositories.protocols import LedgerGateway, LedgerTransaction
from portfolio_ledger.services.validation import (
    require_id,
    require_non_negative,
    normalize_timestamp,
)

logger = logging.getLogger(__name__)


@dataclass
class SnapshotCapture:
    """Input data for capturing a snapshot manually."""

    portfolio_id: str
    total_value: Decimal
    cash_value: Decimal
    invested_value: Decimal
    as_of: Optional[Union[datetime, str]] = None


def write_snapshot(
    tx: LedgerTransaction,
    portfolio: Portfolio,
    as_of: datetime,
) -> PortfolioSnapshot:
    """Upsert the (portfolio, as_of) snapshot from a portfolio's current aggregates."""
    return tx.snapshots.upsert(
        PortfolioSnapshot(
            snapshot_id=str(uuid.uuid4()),
            portfolio_id=portfolio.portfolio_id,
            as_of=as_of,
            total_value=portfolio.total_value,
            cash_value=portfolio.cash_value,
            invested_value=portfolio.invested_value,
        )
    )


class SnapshotService:
    """Manual capture and listing of portfolio snapshots."""

    def __init__(self, gateway: LedgerGateway):
        self._gateway = gateway

    def capture_snapshot(self, data: SnapshotCapture) -> PortfolioSnapshot:
        """
        Record the given values for (portfolio_id, as_of).

        A second capture with the same key overwrites the first.
        """
        portfolio_id = require_id(data.portfolio_id, "portfolio_id")
        snapshot = PortfolioSnapshot(
            snapshot_id=str(uuid.uuid4()),
            portfolio_id=portfolio_id,
            as_of=normalize_timestamp(data.as_of, "as_of"),
            total_value=require_non_negative(data.total_value, "total_value"),
            cash_value=require_non_negative(data.cash_value, "cash_value"),
            invested_value=require_non_negative(data.invested_value, "invested_value"),
        )

        def work(tx: LedgerTransaction) -> PortfolioSnapshot:
            if tx.portfolios.get_by_id(portfolio_id) is None:
                raise PortfolioNotFoundError(portfolio_id)
            return tx.snapshots.upsert(snapshot)

        captured = self._gateway.run_transaction(work)
        logger.info(f"Captured snapshot for portfolio {portfolio_id} as of {captured.as_of}")
        return captured

    def list_snapshots(self, portfolio_id: str) -> list[PortfolioSnapshot]:
        """List snapshots of a portfolio, newest first."""

        def work(tx: LedgerTransaction) -> list[PortfolioSnapshot]:
            if tx.portfolios.get_by_id(portfolio_id) is None:
                raise PortfolioNotFoundError(portfolio_id)
            return tx.snapshots.list_by_portfolio(portfolio_id)

        return self._gateway.run_transaction(work)
