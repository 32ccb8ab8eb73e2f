"""
Pydantic models for the menu catalog.

Menu items are loaded once from seed data and never change while the
process runs.  Narrative descriptions are kept separately, keyed by
item id, and only appear in the single‑item detail view.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MenuItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., examples=["1"])
    name: str = Field(..., examples=["Espresso"])
    price: float = Field(..., ge=0, allow_inf_nan=False, examples=[3.0])
    image_file_name: Optional[str] = Field(None, alias="imageFileName", examples=["espresso.jpg"])


class MenuItemDetail(MenuItem):
    """Menu item together with its description text."""

    description: str
