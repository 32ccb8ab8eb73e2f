"""
In‑memory application state and the FastAPI dependency that exposes it.

All data lives for the lifetime of the process.  ``build_state`` turns
an initial state mapping (see ``core.seed``) into the catalog, order
and loyalty services; ``create_app`` stores the result on
``app.state.shop`` and route handlers receive it through
``get_state``.  Building a separate state per application keeps test
cases isolated from each other.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from fastapi import Request

from ..schemas.loyalty import LoyaltyAccount
from ..schemas.menu import MenuItem
from ..schemas.order import Order
from ..services.catalog_service import CatalogService
from ..services.loyalty_service import LoyaltyService
from ..services.order_service import OrderService

logger = logging.getLogger(__name__)


@dataclass
class ShopState:
    catalog: CatalogService
    orders: OrderService
    loyalty: LoyaltyService


def build_state(initial_state: Optional[Mapping[str, Any]] = None, loyalty_accrual: bool = False) -> ShopState:
    """Create the services from an initial state mapping.

    Every key is optional; missing keys produce empty collections.  The
    mapping is deep‑copied so callers may reuse it.  Seeded orders are
    stored as given, including their ``totalPrice``.
    """
    seed: Dict[str, Any] = copy.deepcopy(dict(initial_state or {}))

    catalog = CatalogService(
        (MenuItem.model_validate(raw) for raw in seed.get("menuItems", [])),
        seed.get("menuItemDescriptionMap", {}),
    )
    loyalty = LoyaltyService(LoyaltyAccount.model_validate(raw) for raw in seed.get("loyaltyAccounts", []))
    orders = OrderService(
        catalog,
        (Order.model_validate(raw) for raw in seed.get("orders", [])),
        loyalty=loyalty,
        loyalty_accrual=loyalty_accrual,
    )
    logger.info(
        "Loaded %d menu items, %d orders and %d loyalty accounts",
        len(seed.get("menuItems", [])),
        len(seed.get("orders", [])),
        len(seed.get("loyaltyAccounts", [])),
    )
    return ShopState(catalog=catalog, orders=orders, loyalty=loyalty)


def get_state(request: Request) -> ShopState:
    """Dependency returning the state of the application serving ``request``."""
    return request.app.state.shop
