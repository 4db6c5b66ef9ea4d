"""Position endpoints."""

from fastapi import APIRouter, Depends

from portfolio_ledger.api.deps import get_position_service
from portfolio_ledger.api.schemas import (
    PositionUpsertRequest,
    PositionAdjustRequest,
    PositionResponse,
)
from portfolio_ledger.services import PositionService, PositionAdjust, PositionUpsert

router = APIRouter(prefix="/portfolios/{portfolio_id}/positions", tags=["positions"])


@router.get("", response_model=list[PositionResponse])
def list_positions(
    portfolio_id: str,
    service: PositionService = Depends(get_position_service),
):
    """List positions of a portfolio."""
    return [PositionResponse.model_validate(p) for p in service.list_positions(portfolio_id)]


@router.put("/{stock_id}", response_model=PositionResponse)
def upsert_position(
    portfolio_id: str,
    stock_id: str,
    data: PositionUpsertRequest,
    service: PositionService = Depends(get_position_service),
):
    """Create or overwrite a position."""
    position = service.upsert_position(
        PositionUpsert(
            portfolio_id=portfolio_id,
            stock_id=stock_id,
            currency=data.currency,
            quantity=data.quantity,
            avg_price=data.avg_price,
            last_price=data.last_price,
        )
    )
    return PositionResponse.model_validate(position)


@router.post("/{stock_id}/adjust", response_model=PositionResponse)
def adjust_quantity(
    portfolio_id: str,
    stock_id: str,
    data: PositionAdjustRequest,
    service: PositionService = Depends(get_position_service),
):
    """Apply a quantity delta to an existing position."""
    position = service.adjust_quantity(
        PositionAdjust(
            portfolio_id=portfolio_id,
            stock_id=stock_id,
            quantity_delta=data.quantity_delta,
            price=data.price,
        )
    )
    return PositionResponse.model_validate(position)
