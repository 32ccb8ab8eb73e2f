"""
Business logic for orders.

Orders are kept in insertion order in memory.  Every order's total is
computed from the catalog whenever its item list is accepted, so a
stored total always matches its items.  Orders are never deleted.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, Iterable, List, Optional

from ..core.errors import AlreadyExistsError, NotFoundError
from ..schemas.order import Order, OrderCreate, OrderUpdate
from .catalog_service import CatalogService
from .loyalty_service import LoyaltyService

logger = logging.getLogger(__name__)


class OrderService:
    """In‑memory order ledger.

    ``loyalty`` and ``loyalty_accrual`` enable the legacy behaviour of
    crediting each placed order's total to the matching loyalty account.
    """

    def __init__(
        self,
        catalog: CatalogService,
        orders: Iterable[Order] = (),
        loyalty: Optional[LoyaltyService] = None,
        loyalty_accrual: bool = False,
    ) -> None:
        self._lock = threading.RLock()
        self._catalog = catalog
        self._loyalty = loyalty
        self._loyalty_accrual = loyalty_accrual
        self._orders: Dict[str, Order] = {}
        for order in orders:
            if order.id in self._orders:
                raise AlreadyExistsError(f"Order {order.id} already exists")
            self._orders[order.id] = order

    def _new_id(self) -> str:
        order_id = uuid.uuid4().hex
        while order_id in self._orders:
            order_id = uuid.uuid4().hex
        return order_id

    def _get(self, order_id: str) -> Order:
        order = self._orders.get(order_id)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    def place(self, data: OrderCreate) -> Order:
        """Create an order from validated fields.

        Raises ``InvalidItemsError`` listing every unknown menu item id;
        nothing is stored in that case.
        """
        total_price = self._catalog.price_of(data.items)
        with self._lock:
            order = Order(
                id=self._new_id(),
                items=list(data.items),
                loyalty_number=data.loyalty_number,
                name=data.name,
                total_price=total_price,
                status=data.status,
            )
            self._orders[order.id] = order
        logger.info("Placed order %s for %s totalling %s", order.id, order.name, total_price)
        if self._loyalty_accrual and self._loyalty is not None:
            self._loyalty.credit(order.loyalty_number, total_price)
        return order.model_copy(deep=True)

    def get(self, order_id: str) -> Order:
        with self._lock:
            return self._get(order_id).model_copy(deep=True)

    def update(self, order_id: str, data: OrderUpdate) -> Order:
        """Apply a partial update to an existing order.

        Only fields present in ``data`` are changed.  A new item list is
        checked against the catalog and re-priced before anything is
        written, so a rejected update leaves the order untouched.
        """
        changes = data.model_dump(exclude_unset=True)
        with self._lock:
            order = self._get(order_id)
            if "items" in changes:
                # price_of raises before the order is modified
                order.total_price = self._catalog.price_of(changes["items"])
                order.items = list(changes["items"])
            if "loyalty_number" in changes:
                order.loyalty_number = changes["loyalty_number"]
            if "name" in changes:
                order.name = changes["name"]
            if "status" in changes:
                order.status = changes["status"]
            logger.info("Updated order %s: %s", order_id, sorted(changes))
            return order.model_copy(deep=True)

    def search(
        self,
        name: Optional[str] = None,
        order_id: Optional[str] = None,
        loyalty_number: Optional[str] = None,
    ) -> List[Order]:
        """Return orders matching every supplied filter.

        Omitted filters do not constrain the result.  Raises
        ``NotFoundError`` when nothing matches; an empty list is never
        returned.
        """
        with self._lock:
            matches = [
                order.model_copy(deep=True)
                for order in self._orders.values()
                if (name is None or order.name == name)
                and (order_id is None or order.id == order_id)
                and (loyalty_number is None or order.loyalty_number == loyalty_number)
            ]
        if not matches:
            raise NotFoundError("Order not found")
        return matches
