"""Portfolio endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from portfolio_ledger.api.deps import get_portfolio_service
from portfolio_ledger.api.schemas import (
    PortfolioCreateRequest,
    PortfolioUpdateRequest,
    PortfolioResponse,
    LedgerActionResponse,
)
from portfolio_ledger.services import PortfolioService, PortfolioCreate, PortfolioUpdate

router = APIRouter(prefix="/portfolios", tags=["portfolios"])


@router.post("", response_model=PortfolioResponse, status_code=201)
def create_portfolio(
    data: PortfolioCreateRequest,
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Create a portfolio for a user."""
    portfolio = service.create_portfolio(
        PortfolioCreate(
            user_id=data.user_id,
            name=data.name,
            base_currency=data.base_currency,
            opening_cash=data.opening_cash,
        )
    )
    return PortfolioResponse.model_validate(portfolio)


@router.get("", response_model=list[PortfolioResponse])
def list_user_portfolios(
    user_id: int = Query(..., gt=0),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """List a user's portfolios, newest first."""
    return [PortfolioResponse.model_validate(p) for p in service.list_user_portfolios(user_id)]


@router.get("/{portfolio_id}", response_model=PortfolioResponse)
def get_portfolio(
    portfolio_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Get a portfolio with its aggregates."""
    return PortfolioResponse.model_validate(service.get_portfolio(portfolio_id))


@router.patch("/{portfolio_id}", response_model=PortfolioResponse)
def update_portfolio(
    portfolio_id: str,
    data: PortfolioUpdateRequest,
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Rename a portfolio."""
    portfolio = service.update_portfolio_info(
        PortfolioUpdate(portfolio_id=portfolio_id, name=data.name)
    )
    return PortfolioResponse.model_validate(portfolio)


@router.get("/{portfolio_id}/latest-actions", response_model=list[LedgerActionResponse])
def latest_actions(
    portfolio_id: str,
    limit: Optional[int] = Query(None, ge=1, le=100),
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Cash movements and orders merged into one timeline, newest first."""
    actions = service.latest_actions(portfolio_id, limit=limit)
    return [LedgerActionResponse.model_validate(a) for a in actions]
