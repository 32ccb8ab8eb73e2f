"""
Business logic for the menu catalog.

The catalog is reference data loaded once at startup.  Besides serving
the menu endpoints it is consulted by the order service to reject
unknown menu item ids and to price orders.
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional

from ..core.errors import InvalidItemsError, NotFoundError
from ..schemas.menu import MenuItem, MenuItemDetail


class CatalogService:
    """Read‑only lookup over menu items and their descriptions."""

    def __init__(self, menu_items: Iterable[MenuItem], descriptions: Mapping[str, str] | None = None) -> None:
        self._items: Dict[str, MenuItem] = {item.id: item for item in menu_items}
        # Seed files may key descriptions by number; ids are always strings.
        self._descriptions: Dict[str, str] = {str(k): v for k, v in (descriptions or {}).items()}

    def list_items(self) -> List[MenuItem]:
        return list(self._items.values())

    def find_item(self, item_id: str) -> Optional[MenuItem]:
        return self._items.get(item_id)

    def get_description(self, item_id: str) -> Optional[str]:
        return self._descriptions.get(item_id)

    def get_item_detail(self, item_id: str) -> MenuItemDetail:
        """Return the menu item with its description.

        An item without a description is reported as missing, the same
        as an unknown id.
        """
        item = self.find_item(item_id)
        description = self.get_description(item_id)
        if item is None or description is None:
            raise NotFoundError("Menu item not found")
        return MenuItemDetail(**item.model_dump(), description=description)

    def unresolved(self, item_ids: Iterable[str]) -> List[str]:
        """Return every id in ``item_ids`` that is not on the menu, in order."""
        return [item_id for item_id in item_ids if item_id not in self._items]

    def price_of(self, item_ids: List[str]) -> float:
        """Sum the prices of ``item_ids``.

        Raises ``InvalidItemsError`` naming all unknown ids if any id
        does not resolve.  Prices are added as decimals so that totals
        such as ``4.5 + 4.0 + 3.0`` come out exact.
        """
        invalid = self.unresolved(item_ids)
        if invalid:
            raise InvalidItemsError(invalid)
        total = sum((Decimal(str(self._items[item_id].price)) for item_id in item_ids), Decimal("0"))
        return float(total)
