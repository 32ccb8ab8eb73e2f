"""
Loyalty account endpoints for API v1.

Accounts are registered once per loyalty number; afterwards only the
balance can be read or overwritten.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from coffee_shop_api.app.core.state import ShopState, get_state
from coffee_shop_api.app.core.validation import OperationKind, validate_payload
from coffee_shop_api.app.schemas.loyalty import LoyaltyAccountResponse, LoyaltyBalance

router = APIRouter()


@router.get("/{loyalty_number}", response_model=LoyaltyBalance)
async def get_balance(loyalty_number: str, state: ShopState = Depends(get_state)) -> LoyaltyBalance:
    """Return the balance of a loyalty account, or 404 if it is not registered."""
    return LoyaltyBalance(balance=state.loyalty.get_balance(loyalty_number))


@router.post("", response_model=LoyaltyAccountResponse, status_code=status.HTTP_201_CREATED)
async def create_account(
    payload: Dict[str, Any] = Body(...),
    state: ShopState = Depends(get_state),
) -> LoyaltyAccountResponse:
    """Register a loyalty account.

    Responds with 400 if the loyalty number is already registered.
    """
    data = validate_payload(OperationKind.CREATE_LOYALTY, payload)
    account = state.loyalty.create(data)
    return LoyaltyAccountResponse(message="Loyalty account created", loyalty_account=account)


@router.put("/{loyalty_number}", response_model=LoyaltyAccountResponse)
async def set_balance(
    loyalty_number: str,
    payload: Dict[str, Any] = Body(...),
    state: ShopState = Depends(get_state),
) -> LoyaltyAccountResponse:
    """Overwrite the balance of a loyalty account.

    A missing or negative ``balance`` is rejected with 400 before the
    account is looked up; an unknown loyalty number yields 404.
    """
    data = validate_payload(OperationKind.UPDATE_LOYALTY_BALANCE, payload)
    account = state.loyalty.set_balance(loyalty_number, data.balance)
    return LoyaltyAccountResponse(message="Loyalty account balance updated", loyalty_account=account)
