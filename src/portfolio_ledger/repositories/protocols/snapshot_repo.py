"""Snapshot repository protocol."""

from datetime import datetime
from typing import Protocol, Optional

from portfolio_ledger.domain.models import PortfolioSnapshot


class SnapshotRepository(Protocol):
    """Interface for portfolio snapshot data access."""

    def get(self, portfolio_id: str, as_of: datetime) -> Optional[PortfolioSnapshot]:
        """Get the snapshot for a specific timestamp."""
        ...

    def upsert(self, snapshot: PortfolioSnapshot) -> PortfolioSnapshot:
        """Insert or overwrite the snapshot keyed by (portfolio_id, as_of)."""
        ...

    def list_by_portfolio(self, portfolio_id: str) -> list[PortfolioSnapshot]:
        """List snapshots of a portfolio, newest first."""
        ...
