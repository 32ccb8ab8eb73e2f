# tests/test_catalog_service.py

import pydantic
import pytest

from coffee_shop_api.app.core.errors import InvalidItemsError, NotFoundError
from coffee_shop_api.app.core.state import build_state


class TestCatalogService:
    """Menu lookups and pricing"""

    def test_list_items_keeps_seed_order(self, state):
        assert [item.id for item in state.catalog.list_items()] == ["1", "2", "3", "4"]

    def test_find_item(self, state):
        assert state.catalog.find_item("2").name == "Latte"
        assert state.catalog.find_item("99") is None

    def test_description_keys_are_strings(self, state):
        assert state.catalog.get_description("1") == "Short and strong."

    def test_item_detail_includes_description(self, state):
        detail = state.catalog.get_item_detail("3")

        assert detail.name == "Cappuccino"
        assert detail.description == "Foamy."

    def test_item_without_description_is_not_found(self, state):
        with pytest.raises(NotFoundError):
            state.catalog.get_item_detail("4")

    def test_price_of_sums_repeated_items(self, state):
        assert state.catalog.price_of(["1", "2", "2", "3"]) == 15.5

    def test_price_of_empty_list(self, state):
        assert state.catalog.price_of([]) == 0.0

    def test_price_of_reports_all_unknown_ids(self, state):
        with pytest.raises(InvalidItemsError) as exc_info:
            state.catalog.price_of(["1", "99", "2", "100"])

        assert exc_info.value.invalid_items == ["99", "100"]

    def test_infinite_seed_price_is_rejected(self, seed):
        seed["menuItems"].append({"id": "5", "name": "Bottomless", "price": float("inf")})

        with pytest.raises(pydantic.ValidationError):
            build_state(seed)
