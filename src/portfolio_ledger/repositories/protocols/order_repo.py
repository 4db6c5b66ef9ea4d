"""Order repository protocol."""

from typing import Protocol, Optional

from portfolio_ledger.domain.models import Order


class OrderRepository(Protocol):
    """Interface for order data access."""

    def create(self, order: Order) -> Order:
        """Persist a new order."""
        ...

    def get_by_id(self, order_id: str, for_update: bool = False) -> Optional[Order]:
        """Retrieve order by ID."""
        ...

    def update(self, order: Order) -> Order:
        """Write status and fill time of an existing order."""
        ...

    def list_by_portfolio(
        self,
        portfolio_id: str,
        limit: Optional[int] = None,
    ) -> list[Order]:
        """List orders of a portfolio, newest first."""
        ...
