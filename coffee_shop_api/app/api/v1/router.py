"""
Top‑level router for version 1 of the API.

The domain routers are mounted under the singular paths existing
clients already use (``/menu``, ``/order``, ``/loyalty``).
"""

from fastapi import APIRouter

from .endpoints import loyalty, menu, orders

router = APIRouter()

router.include_router(menu.router, prefix="/menu", tags=["menu"])
router.include_router(orders.router, prefix="/order", tags=["orders"])
router.include_router(loyalty.router, prefix="/loyalty", tags=["loyalty"])
