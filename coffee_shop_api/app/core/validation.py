"""
Request payload validation.

Every mutating operation has a declarative pydantic schema.
``validate_payload`` checks a raw decoded JSON body against the schema
for the requested operation and either returns the typed model or
raises :class:`~coffee_shop_api.app.core.errors.ValidationError` listing
every violated constraint.  Nothing here touches the ledgers, so the
same checks apply whether the payload came over HTTP or from code.
"""

from enum import Enum
from typing import Any, Dict, Type

import pydantic
from pydantic import BaseModel

from coffee_shop_api.app.core.errors import ValidationError, format_error_entries
from coffee_shop_api.app.schemas.loyalty import LoyaltyAccountCreate, LoyaltyBalanceUpdate
from coffee_shop_api.app.schemas.order import OrderCreate, OrderUpdate


class OperationKind(str, Enum):
    CREATE_ORDER = "create-order"
    UPDATE_ORDER = "update-order"
    CREATE_LOYALTY = "create-loyalty"
    UPDATE_LOYALTY_BALANCE = "update-loyalty-balance"


SCHEMAS: Dict[OperationKind, Type[BaseModel]] = {
    OperationKind.CREATE_ORDER: OrderCreate,
    OperationKind.UPDATE_ORDER: OrderUpdate,
    OperationKind.CREATE_LOYALTY: LoyaltyAccountCreate,
    OperationKind.UPDATE_LOYALTY_BALANCE: LoyaltyBalanceUpdate,
}


def validate_payload(kind: OperationKind, payload: Any) -> BaseModel:
    """Validate ``payload`` for the operation ``kind``.

    Returns the normalized model instance.  Raises ``ValidationError``
    with the complete list of problems if the payload is not an object
    or any field is missing, mistyped or out of range.
    """
    if not isinstance(payload, dict):
        raise ValidationError(
            [{"field": "body", "message": "Request body must be a JSON object", "type": "dict_type"}]
        )
    schema = SCHEMAS[OperationKind(kind)]
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(format_error_entries(exc.errors())) from exc
