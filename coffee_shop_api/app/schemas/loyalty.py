"""
Pydantic models for loyalty accounts.

An account is identified by its loyalty number.  Balances are plain
bookkeeping values: they are only ever overwritten through the balance
endpoint and can never be negative.
"""

from pydantic import BaseModel, ConfigDict, Field


class LoyaltyAccountCreate(BaseModel):
    """Schema for registering a loyalty account."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    name: str = Field(..., examples=["John"])
    loyalty_number: str = Field(..., alias="loyaltyNumber", examples=["123456789"])
    balance: float = Field(..., ge=0, allow_inf_nan=False, examples=[10])


class LoyaltyBalanceUpdate(BaseModel):
    model_config = ConfigDict(strict=True)

    balance: float = Field(..., ge=0, allow_inf_nan=False, examples=[25])


class LoyaltyAccount(BaseModel):
    """Schema for reading a loyalty account."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    loyalty_number: str = Field(..., alias="loyaltyNumber")
    balance: float = Field(..., ge=0, allow_inf_nan=False)


class LoyaltyBalance(BaseModel):
    balance: float


class LoyaltyAccountResponse(BaseModel):
    """Envelope returned by the create and balance update endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    loyalty_account: LoyaltyAccount = Field(..., alias="loyaltyAccount")
