"""Catalog entities supplied by the catalog collaborator."""
from __future__ import annotations

from pydantic import BaseModel, Field


class Variation(BaseModel):
    """A named option of a menu item with optional tier overrides."""

    id: str = Field(..., min_length=1, description="Variation ID")
    name: str = Field("", description="Display name")
    price: float = Field(0.0, description="Price delta added to the base price")
    member_price: float | None = Field(None, description="Override for end-user members")
    reseller_price: float | None = Field(None, description="Override for resellers")

    class Config:
        """Pydantic config."""

        from_attributes = True


class AddOn(BaseModel):
    """A named extra; quantity defaults to 1 when unspecified."""

    id: str = Field(..., min_length=1, description="Add-on ID")
    name: str = Field("", description="Display name")
    price: float = Field(0.0, description="Unit price of the add-on")
    quantity: int | None = Field(None, description="Quantity, 1 when unspecified")

    class Config:
        """Pydantic config."""

        from_attributes = True

    @property
    def effective_quantity(self) -> int:
        return 1 if self.quantity is None else self.quantity


class MenuItem(BaseModel):
    """Catalog entry. The cart copies fields from it and never mutates it."""

    id: str = Field(..., min_length=1, description="Catalog item ID")
    name: str = Field("", description="Display name")
    description: str = Field("", description="Description")
    base_price: float = Field(0.0, description="Base price")
    category: str | None = Field(None, description="Category")
    image: str | None = Field(None, description="Image URL")
    available: bool = Field(True, description="Available for purchase")
    variations: list[Variation] = Field(default_factory=list)
    add_ons: list[AddOn] = Field(default_factory=list)

    class Config:
        """Pydantic config."""

        from_attributes = True

    def get_variation(self, variation_id: str) -> Variation | None:
        """Find a variation of this item by id."""
        for variation in self.variations:
            if variation.id == variation_id:
                return variation
        return None
