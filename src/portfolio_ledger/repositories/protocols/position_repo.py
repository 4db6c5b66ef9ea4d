"""Position repository protocol."""

from typing import Protocol, Optional

from portfolio_ledger.domain.models import Position


class PositionRepository(Protocol):
    """Interface for (portfolio, stock) position data access."""

    def get(
        self,
        portfolio_id: str,
        stock_id: str,
        for_update: bool = False,
    ) -> Optional[Position]:
        """Get the position for a specific stock."""
        ...

    def list_by_portfolio(self, portfolio_id: str) -> list[Position]:
        """List all positions of a portfolio, most recently updated first."""
        ...

    def upsert(self, position: Position) -> Position:
        """Insert or overwrite a position row."""
        ...
