# tests/conftest.py

"""
Pytest configuration for the Coffee Shop API tests.
Every test gets its own application and state built from the mock seed.
"""

import pytest
from fastapi.testclient import TestClient

from coffee_shop_api.app.core.seed import MOCK_DATA
from coffee_shop_api.app.core.state import ShopState, build_state
from coffee_shop_api.app.main import create_app


@pytest.fixture
def seed() -> dict:
    """Small catalog with round prices, one order and one account"""
    return {
        "menuItems": [
            {"id": "1", "name": "Espresso", "price": 3.0, "imageFileName": "espresso.jpg"},
            {"id": "2", "name": "Latte", "price": 4.0, "imageFileName": "latte.jpg"},
            {"id": "3", "name": "Cappuccino", "price": 4.5, "imageFileName": "cappuccino.jpg"},
            {"id": "4", "name": "Mystery Blend", "price": 5.25},
        ],
        "menuItemDescriptionMap": {1: "Short and strong.", "2": "Milky.", "3": "Foamy."},
        "orders": [
            {
                "id": "1",
                "items": ["1"],
                "totalPrice": 3.0,
                "loyaltyNumber": "123456789",
                "name": "John",
                "status": "pending",
            },
        ],
        "loyaltyAccounts": [{"name": "John", "loyaltyNumber": "123456789", "balance": 10}],
    }


@pytest.fixture
def state(seed) -> ShopState:
    """Services built directly, without an application"""
    return build_state(seed)


@pytest.fixture
def client(seed) -> TestClient:
    """Test client for an isolated application"""
    return TestClient(create_app(initial_state=seed, loyalty_accrual=False))


@pytest.fixture
def mock_client() -> TestClient:
    """Test client seeded with the bundled mock data"""
    return TestClient(create_app(initial_state=MOCK_DATA, loyalty_accrual=False))
