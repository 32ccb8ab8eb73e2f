"""
Menu endpoints for API v1.

The menu is read‑only: clients can list every item or fetch a single
item together with its description.
"""

from typing import List

from fastapi import APIRouter, Depends

from coffee_shop_api.app.core.state import ShopState, get_state
from coffee_shop_api.app.schemas.menu import MenuItem, MenuItemDetail

router = APIRouter()


@router.get("", response_model=List[MenuItem])
async def list_menu(state: ShopState = Depends(get_state)) -> List[MenuItem]:
    """Return every menu item without its description."""
    return state.catalog.list_items()


@router.get("/{item_id}", response_model=MenuItemDetail)
async def get_menu_item(item_id: str, state: ShopState = Depends(get_state)) -> MenuItemDetail:
    """Return one menu item with its description.

    Responds with 404 if the id is unknown or the item has no
    description.
    """
    return state.catalog.get_item_detail(item_id)
