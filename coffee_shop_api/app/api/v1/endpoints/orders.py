"""
Order endpoints for API v1.

Bodies are accepted as plain JSON objects and run through
``validate_payload`` so that every field problem is reported in one
response.  Catalog and lookup failures raised by ``OrderService`` are
rendered by the handlers registered in ``core.errors``.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from coffee_shop_api.app.core.state import ShopState, get_state
from coffee_shop_api.app.core.validation import OperationKind, validate_payload
from coffee_shop_api.app.schemas.order import Order, OrderResponse

router = APIRouter()


@router.get("/search", response_model=List[Order])
async def search_orders(
    name: Optional[str] = Query(None),
    order_id: Optional[str] = Query(None, alias="orderId"),
    loyalty_number: Optional[str] = Query(None, alias="loyaltyNumber"),
    state: ShopState = Depends(get_state),
) -> List[Order]:
    """Find orders by customer name, order id and/or loyalty number.

    Filters combine with AND.  Responds with 404 when no order matches.
    """
    return state.orders.search(name=name, order_id=order_id, loyalty_number=loyalty_number)


@router.post("", response_model=OrderResponse)
async def place_order(
    payload: Dict[str, Any] = Body(...),
    state: ShopState = Depends(get_state),
) -> OrderResponse:
    """Place an order.

    ``items``, ``loyaltyNumber`` and ``name`` are required; ``status``
    defaults to ``pending``.  The total is computed from menu prices.
    """
    data = validate_payload(OperationKind.CREATE_ORDER, payload)
    order = state.orders.place(data)
    return OrderResponse(message="Order placed", order=order)


@router.put("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: str,
    payload: Dict[str, Any] = Body(...),
    state: ShopState = Depends(get_state),
) -> OrderResponse:
    """Update any subset of an order's fields.

    Omitted fields keep their values.  Supplying ``items`` re-prices
    the order.
    """
    data = validate_payload(OperationKind.UPDATE_ORDER, payload)
    order = state.orders.update(order_id, data)
    return OrderResponse(message="Order updated", order=order)
