"""Identity rules for cart lines: add-on normalization and identity keys."""
from __future__ import annotations

import secrets
import string
import time
from typing import Iterable

from storefront.core.constants import CART_LINE_ID_SEPARATOR, NO_SELECTION
from storefront.domain.entities.catalog import AddOn, Variation

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits

IdentityKey = tuple[str, str, tuple[tuple[str, int], ...]]


def normalize_add_ons(add_ons: Iterable[AddOn] | None) -> list[AddOn]:
    """Group add-ons by id, sum their quantities and sort by id.

    A missing quantity counts as 1. The first occurrence of an id supplies the
    name and price of the grouped add-on. Groups whose quantities sum to zero
    or less are dropped.
    """
    grouped: dict[str, AddOn] = {}
    for add_on in add_ons or []:
        existing = grouped.get(add_on.id)
        if existing is None:
            grouped[add_on.id] = add_on.model_copy(
                update={"quantity": add_on.effective_quantity}
            )
        else:
            existing.quantity = existing.quantity + add_on.effective_quantity
    return [
        grouped[add_on_id] for add_on_id in sorted(grouped) if grouped[add_on_id].quantity > 0
    ]


def add_ons_signature(add_ons: Iterable[AddOn] | None) -> str:
    """Render normalized add-ons as ``id:quantity`` joined by commas."""
    normalized = normalize_add_ons(add_ons)
    if not normalized:
        return NO_SELECTION
    return ",".join(f"{add_on.id}:{add_on.quantity}" for add_on in normalized)


def identity_key(
    catalog_item_id: str,
    variation: Variation | None = None,
    add_ons: Iterable[AddOn] | None = None,
) -> IdentityKey:
    """Key under which two cart configurations count as the same line.

    Add-ons are compared as ``(id, quantity)`` pairs so that ids containing
    ``:`` or ``,`` cannot collide.
    """
    variation_key = variation.id if variation else NO_SELECTION
    add_ons_key = tuple((add_on.id, add_on.quantity) for add_on in normalize_add_ons(add_ons))
    return (catalog_item_id, variation_key, add_ons_key)


def new_line_id(catalog_item_id: str) -> str:
    """Synthesize ``{catalog id}:::CART:::{millis}-{random}`` for a new line."""
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(9))
    return f"{catalog_item_id}{CART_LINE_ID_SEPARATOR}{millis}-{suffix}"
