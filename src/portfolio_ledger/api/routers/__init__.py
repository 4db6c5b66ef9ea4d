"""API routers package."""

from portfolio_ledger.api.routers.portfolios import router as portfolios_router
from portfolio_ledger.api.routers.cash_movements import router as cash_movements_router
from portfolio_ledger.api.routers.orders import router as orders_router
from portfolio_ledger.api.routers.positions import router as positions_router
from portfolio_ledger.api.routers.snapshots import router as snapshots_router

__all__ = [
    "portfolios_router",
    "cash_movements_router",
    "orders_router",
    "positions_router",
    "snapshots_router",
]
