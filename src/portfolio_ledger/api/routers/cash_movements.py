"""Cash movement endpoints."""

from fastapi import APIRouter, Depends

from portfolio_ledger.api.deps import get_cash_movement_service
from portfolio_ledger.api.schemas import CashMovementCreateRequest, CashMovementResponse
from portfolio_ledger.services import CashMovementService, CashMovementCreate

router = APIRouter(prefix="/portfolios/{portfolio_id}/cash-movements", tags=["cash-movements"])


@router.post("", response_model=CashMovementResponse, status_code=201)
def record_movement(
    portfolio_id: str,
    data: CashMovementCreateRequest,
    service: CashMovementService = Depends(get_cash_movement_service),
):
    """Record a deposit or withdrawal and update the portfolio."""
    movement = service.record_movement(
        CashMovementCreate(
            portfolio_id=portfolio_id,
            movement_type=data.type,
            amount=data.amount,
            currency=data.currency,
            happened_at=data.happened_at,
            note=data.note,
        )
    )
    return CashMovementResponse.model_validate(movement)


@router.get("", response_model=list[CashMovementResponse])
def list_movements(
    portfolio_id: str,
    service: CashMovementService = Depends(get_cash_movement_service),
):
    """List cash movements, newest first."""
    return [CashMovementResponse.model_validate(m) for m in service.list_movements(portfolio_id)]
