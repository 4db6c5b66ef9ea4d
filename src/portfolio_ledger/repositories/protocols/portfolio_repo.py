"""Portfolio repository protocol."""

from typing import Protocol, Optional

from portfolio_ledger.domain.models import Portfolio


class PortfolioRepository(Protocol):
    """Interface for portfolio data access."""

    def create(self, portfolio: Portfolio) -> Portfolio:
        """Persist a new portfolio."""
        ...

    def get_by_id(self, portfolio_id: str, for_update: bool = False) -> Optional[Portfolio]:
        """Retrieve portfolio by ID, optionally locking the row."""
        ...

    def list_by_user(self, user_id: int) -> list[Portfolio]:
        """List a user's portfolios, newest first."""
        ...

    def update(self, portfolio: Portfolio) -> Portfolio:
        """Write name, currency and aggregate values of an existing portfolio."""
        ...
