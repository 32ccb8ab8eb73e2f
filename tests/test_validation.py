# tests/test_validation.py

import pytest

from coffee_shop_api.app.core.errors import ValidationError
from coffee_shop_api.app.core.validation import OperationKind, validate_payload
from coffee_shop_api.app.schemas.loyalty import LoyaltyAccountCreate, LoyaltyBalanceUpdate
from coffee_shop_api.app.schemas.order import OrderCreate, OrderUpdate


def _fields(exc_info) -> set:
    return {err["field"] for err in exc_info.value.errors}


class TestCreateOrder:
    """Validation of order placement payloads"""

    def test_valid_payload_defaults_status(self):
        data = validate_payload(
            OperationKind.CREATE_ORDER,
            {"items": ["1", "1"], "loyaltyNumber": "X", "name": "A"},
        )

        assert isinstance(data, OrderCreate)
        assert data.items == ["1", "1"]
        assert data.loyalty_number == "X"
        assert data.status == "pending"

    def test_accepts_completed_status(self):
        data = validate_payload(
            "create-order",
            {"items": [], "loyaltyNumber": "X", "name": "A", "status": "completed"},
        )

        assert data.status == "completed"

    def test_reports_every_bad_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(
                OperationKind.CREATE_ORDER,
                {"items": "invalid", "loyaltyNumber": 1234567890, "name": 123},
            )

        assert _fields(exc_info) == {"items", "loyaltyNumber", "name"}

    def test_reports_missing_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(OperationKind.CREATE_ORDER, {})

        assert _fields(exc_info) == {"items", "loyaltyNumber", "name"}
        assert all(err["type"] == "missing" for err in exc_info.value.errors)

    def test_rejects_unknown_status(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(
                OperationKind.CREATE_ORDER,
                {"items": ["1"], "loyaltyNumber": "X", "name": "A", "status": "received"},
            )

        assert _fields(exc_info) == {"status"}

    def test_rejects_non_string_item(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(
                OperationKind.CREATE_ORDER,
                {"items": ["1", 2], "loyaltyNumber": "X", "name": "A"},
            )

        assert _fields(exc_info) == {"items.1"}

    def test_rejects_non_object_body(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(OperationKind.CREATE_ORDER, ["1"])

        assert _fields(exc_info) == {"body"}


class TestUpdateOrder:
    """Validation of partial order updates"""

    def test_empty_payload_is_valid(self):
        data = validate_payload(OperationKind.UPDATE_ORDER, {})

        assert isinstance(data, OrderUpdate)
        assert data.model_dump(exclude_unset=True) == {}

    def test_only_supplied_fields_are_set(self):
        data = validate_payload(OperationKind.UPDATE_ORDER, {"name": "B"})

        assert data.model_dump(exclude_unset=True) == {"name": "B"}

    def test_present_fields_use_create_constraints(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(OperationKind.UPDATE_ORDER, {"items": "1", "status": "done"})

        assert _fields(exc_info) == {"items", "status"}

    def test_null_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(OperationKind.UPDATE_ORDER, {"name": None})

        assert _fields(exc_info) == {"name"}


class TestLoyaltyPayloads:
    """Validation of loyalty account payloads"""

    def test_create_accepts_integer_balance(self):
        data = validate_payload(
            OperationKind.CREATE_LOYALTY,
            {"name": "A", "loyaltyNumber": "L1", "balance": 10},
        )

        assert isinstance(data, LoyaltyAccountCreate)
        assert data.balance == 10

    def test_create_rejects_negative_balance_and_missing_name(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(OperationKind.CREATE_LOYALTY, {"loyaltyNumber": "L1", "balance": -1})

        assert _fields(exc_info) == {"name", "balance"}

    def test_balance_update_rejects_negative(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(OperationKind.UPDATE_LOYALTY_BALANCE, {"balance": -5})

        assert _fields(exc_info) == {"balance"}

    def test_balance_update_rejects_string(self):
        with pytest.raises(ValidationError):
            validate_payload(OperationKind.UPDATE_LOYALTY_BALANCE, {"balance": "100"})

    def test_balance_update_accepts_float(self):
        data = validate_payload(OperationKind.UPDATE_LOYALTY_BALANCE, {"balance": 12.5})

        assert isinstance(data, LoyaltyBalanceUpdate)
        assert data.balance == 12.5

    def test_infinite_balance_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(
                OperationKind.CREATE_LOYALTY,
                {"name": "A", "loyaltyNumber": "L1", "balance": float("inf")},
            )

        assert _fields(exc_info) == {"balance"}

    def test_balance_update_rejects_infinity(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(OperationKind.UPDATE_LOYALTY_BALANCE, {"balance": float("inf")})

        assert _fields(exc_info) == {"balance"}


class TestSchemaExamples:
    """Documented request examples in the OpenAPI schema"""

    def test_examples_are_published_as_lists(self):
        order_props = OrderCreate.model_json_schema(by_alias=True)["properties"]
        balance_props = LoyaltyBalanceUpdate.model_json_schema(by_alias=True)["properties"]

        assert order_props["items"]["examples"] == [["1", "2"]]
        assert balance_props["balance"]["examples"] == [25]
        assert "example" not in balance_props["balance"]
