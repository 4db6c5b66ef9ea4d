"""Order endpoints."""

from fastapi import APIRouter, Depends

from portfolio_ledger.api.deps import get_order_service
from portfolio_ledger.api.schemas import OrderCreateRequest, OrderStatusRequest, OrderResponse
from portfolio_ledger.services import OrderService, OrderCreate, OrderStatusUpdate

router = APIRouter(tags=["orders"])


def _to_order_create(portfolio_id: str, data: OrderCreateRequest) -> OrderCreate:
    return OrderCreate(
        portfolio_id=portfolio_id,
        stock_id=data.stock_id,
        side=data.side,
        quantity=data.quantity,
        price=data.price,
        currency=data.currency,
        placed_at=data.placed_at,
    )


@router.post("/portfolios/{portfolio_id}/orders", response_model=OrderResponse, status_code=201)
def place_order(
    portfolio_id: str,
    data: OrderCreateRequest,
    service: OrderService = Depends(get_order_service),
):
    """Place an order that settles immediately."""
    order = service.place_order(_to_order_create(portfolio_id, data))
    return OrderResponse.model_validate(order)


@router.post(
    "/portfolios/{portfolio_id}/orders/pending",
    response_model=OrderResponse,
    status_code=201,
)
def submit_order(
    portfolio_id: str,
    data: OrderCreateRequest,
    service: OrderService = Depends(get_order_service),
):
    """Record a pending order; it settles when its status becomes FILLED."""
    order = service.submit_order(_to_order_create(portfolio_id, data))
    return OrderResponse.model_validate(order)


@router.get("/portfolios/{portfolio_id}/orders", response_model=list[OrderResponse])
def list_orders(
    portfolio_id: str,
    service: OrderService = Depends(get_order_service),
):
    """List orders, newest first."""
    return [OrderResponse.model_validate(o) for o in service.list_orders(portfolio_id)]


@router.patch("/orders/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    order_id: str,
    data: OrderStatusRequest,
    service: OrderService = Depends(get_order_service),
):
    """Fill or cancel a pending order."""
    order = service.update_order_status(
        OrderStatusUpdate(order_id=order_id, status=data.status, filled_at=data.filled_at)
    )
    return OrderResponse.model_validate(order)
