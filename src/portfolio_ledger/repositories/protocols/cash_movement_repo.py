"""Cash movement repository protocol."""

from typing import Protocol, Optional

from portfolio_ledger.domain.models import CashMovement


class CashMovementRepository(Protocol):
    """Interface for cash movement data access. Movements are append-only."""

    def create(self, movement: CashMovement) -> CashMovement:
        """Persist a new cash movement."""
        ...

    def list_by_portfolio(
        self,
        portfolio_id: str,
        limit: Optional[int] = None,
    ) -> list[CashMovement]:
        """List movements of a portfolio, newest first."""
        ...
