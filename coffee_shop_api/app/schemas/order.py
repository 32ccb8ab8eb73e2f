"""
Pydantic models for orders.

``OrderCreate`` and ``OrderUpdate`` describe incoming payloads and are
validated in strict mode: a number is never accepted where a string is
expected and vice versa.  ``Order`` is the stored and returned shape;
its ``total_price`` is always derived from the catalog by the order
service, never taken from a client.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

OrderStatus = Literal["pending", "completed"]


class OrderCreate(BaseModel):
    """Schema for placing an order."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    items: List[str] = Field(..., examples=[["1", "2"]], description="Menu item ids; repeats are allowed")
    loyalty_number: str = Field(..., alias="loyaltyNumber", examples=["123456789"])
    name: str = Field(..., examples=["John"])
    status: OrderStatus = Field("pending", examples=["pending"])


class OrderUpdate(BaseModel):
    """Schema for a partial order update.

    All fields are optional; only provided values will be applied.  A
    field that is present must satisfy the same constraint as on
    creation, so an explicit ``null`` is rejected rather than treated as
    "leave unchanged".
    """

    model_config = ConfigDict(strict=True, populate_by_name=True)

    items: Optional[List[str]] = None
    loyalty_number: Optional[str] = Field(None, alias="loyaltyNumber")
    name: Optional[str] = None
    status: Optional[OrderStatus] = None

    @field_validator("items", "loyalty_number", "name", "status", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field may be omitted but not null")
        return v


class Order(BaseModel):
    """Schema for reading an order."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    items: List[str]
    loyalty_number: str = Field(..., alias="loyaltyNumber")
    name: str
    total_price: float = Field(..., ge=0, allow_inf_nan=False, alias="totalPrice")
    status: OrderStatus = "pending"


class OrderResponse(BaseModel):
    """Envelope returned by the place and update endpoints."""

    message: str
    order: Order
