"""Cart line entity."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from storefront.core.constants import CART_LINE_ID_SEPARATOR
from storefront.domain.entities.catalog import AddOn, Variation


@dataclass
class CartLine:
    """One purchasable configuration in the cart and its quantity.

    ``total_price`` is derived from the member context on every read and is
    never serialized.
    """

    id: str
    catalog_item_id: str
    name: str
    quantity: int
    base_price: float
    selected_variation: Variation | None = None
    selected_add_ons: list[AddOn] = field(default_factory=list)
    total_price: float = field(default=0.0, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "catalog_item_id": self.catalog_item_id,
            "name": self.name,
            "quantity": int(self.quantity),
            "base_price": float(self.base_price),
            "selected_variation": (
                self.selected_variation.model_dump() if self.selected_variation else None
            ),
            "selected_add_ons": [add_on.model_dump() for add_on in self.selected_add_ons],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CartLine:
        """Build a line from its stored form.

        Rows written by the previous storefront use camelCase keys and carry
        the catalog id only as the prefix of the line id.
        """
        line_id = str(data["id"])
        catalog_item_id = data.get("catalog_item_id")
        if not catalog_item_id:
            if CART_LINE_ID_SEPARATOR not in line_id:
                raise ValueError(f"Cannot recover catalog id from line id {line_id!r}")
            catalog_item_id = line_id.split(CART_LINE_ID_SEPARATOR, 1)[0]

        raw_variation = data.get("selected_variation", data.get("selectedVariation"))
        raw_add_ons = data.get("selected_add_ons", data.get("selectedAddOns")) or []
        base_price = data.get("base_price", data.get("basePrice"))

        return cls(
            id=line_id,
            catalog_item_id=str(catalog_item_id),
            name=str(data.get("name", "")),
            quantity=int(data.get("quantity", 1)),
            base_price=float(base_price or 0),
            selected_variation=Variation.model_validate(raw_variation) if raw_variation else None,
            selected_add_ons=[AddOn.model_validate(raw) for raw in raw_add_ons],
        )
