"""
Bundled mock data used to seed the ledgers.

The layout matches the initial state accepted by ``create_app``:
``menuItems``, ``menuItemDescriptionMap``, ``orders`` and
``loyaltyAccounts``.  Treat ``MOCK_DATA`` as read‑only; ``build_state``
works on a deep copy.
"""

MOCK_DATA = {
    "menuItems": [
        {"id": "1", "name": "Espresso", "price": 3.0, "imageFileName": "espresso.jpg"},
        {"id": "2", "name": "Latte", "price": 4.0, "imageFileName": "latte.jpg"},
        {"id": "3", "name": "Cappuccino", "price": 4.5, "imageFileName": "cappuccino.jpg"},
    ],
    "menuItemDescriptionMap": {
        "1": (
            "Espresso is a short, concentrated coffee brewed by forcing hot water "
            "through finely ground beans, topped with a layer of golden crema."
        ),
        "2": (
            "A latte starts with a shot or two of espresso, finished with silky "
            "steamed milk and a thin layer of foam."
        ),
        "3": (
            "The cappuccino balances espresso, steamed milk and a generous crown "
            "of velvety foam in roughly equal parts."
        ),
    },
    "orders": [
        {
            "id": "1",
            "items": ["1"],
            "totalPrice": 3.0,
            "loyaltyNumber": "123456789",
            "name": "John",
            "status": "pending",
        },
        {
            "id": "2",
            "items": ["2"],
            "totalPrice": 4.0,
            "loyaltyNumber": "987654321",
            "name": "Jane",
            "status": "completed",
        },
    ],
    "loyaltyAccounts": [
        {"name": "John", "loyaltyNumber": "123456789", "balance": 10},
        {"name": "Jane", "loyaltyNumber": "987654321", "balance": 20},
    ],
}
