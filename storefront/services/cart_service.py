"""Cart store: ordered cart lines, live pricing and persistence."""
from __future__ import annotations

import copy
from typing import Iterable

from logging_config import logger
from storefront.domain.cart_rules import (
    add_ons_signature,
    identity_key,
    new_line_id,
    normalize_add_ons,
)
from storefront.domain.entities.cart import CartLine
from storefront.domain.entities.catalog import AddOn, MenuItem, Variation
from storefront.domain.pricing import (
    AnonymousContext,
    MemberContext,
    calculate_item_price,
    compute_line_price,
)
from storefront.integrations.cart_persistence import CartPersistence, MemoryCartPersistence


class CartStore:
    """Single-shopper cart.

    Lines are kept newest first. Each mutation builds the next list of lines,
    swaps it in and writes it through the persistence port. A failed write is
    logged and the in-memory cart stays authoritative.
    """

    def __init__(
        self,
        persistence: CartPersistence | None = None,
        member_context: MemberContext | None = None,
    ):
        self._persistence = persistence or MemoryCartPersistence()
        self._member_context = member_context or AnonymousContext()
        self._lines: list[CartLine] = self._restore()
        self._is_open = False

    def _restore(self) -> list[CartLine]:
        try:
            lines = list(self._persistence.load())
        except Exception as exc:
            logger.error("Error loading cart items, starting empty: %s", exc)
            return []
        logger.debug("Restored %s cart lines", len(lines))
        return lines

    def _commit(self, lines: list[CartLine]) -> None:
        self._lines = lines
        try:
            saved = self._persistence.save(lines)
        except Exception as exc:
            logger.error("Error saving cart items: %s", exc)
            return
        if not saved:
            logger.warning("Cart items were not persisted; keeping in-memory cart")

    def _priced(self, line: CartLine) -> CartLine:
        priced = copy.deepcopy(line)
        priced.total_price = compute_line_price(line, self._member_context)
        return priced

    @property
    def cart_items(self) -> list[CartLine]:
        """Copies of the cart lines priced for the current member."""
        return [self._priced(line) for line in self._lines]

    def get_line(self, line_id: str) -> CartLine | None:
        for line in self._lines:
            if line.id == line_id:
                return self._priced(line)
        return None

    def add_to_cart(
        self,
        item: MenuItem,
        quantity: int = 1,
        variation: Variation | None = None,
        add_ons: Iterable[AddOn] | None = None,
    ) -> None:
        """Add a configuration, merging into an existing identical line.

        A merge that brings the quantity to zero or less removes the line; a
        new line is only created for a positive quantity.
        """
        grouped_add_ons = normalize_add_ons(add_ons)
        new_key = identity_key(item.id, variation, grouped_add_ons)

        for idx, line in enumerate(self._lines):
            line_key = identity_key(
                line.catalog_item_id, line.selected_variation, line.selected_add_ons
            )
            if line_key != new_key:
                continue
            merged_quantity = line.quantity + quantity
            if merged_quantity <= 0:
                self.remove_from_cart(line.id)
                return
            merged = copy.copy(line)
            merged.quantity = merged_quantity
            lines = list(self._lines)
            lines[idx] = merged
            self._commit(lines)
            return

        if quantity <= 0:
            logger.warning("Ignoring add of %s with non-positive quantity %s", item.id, quantity)
            return

        line = CartLine(
            id=new_line_id(item.id),
            catalog_item_id=item.id,
            name=item.name,
            quantity=quantity,
            base_price=float(item.base_price),
            selected_variation=variation.model_copy() if variation else None,
            selected_add_ons=grouped_add_ons,
            total_price=calculate_item_price(
                item, self._member_context, variation, grouped_add_ons
            ),
        )
        self._commit([line, *self._lines])
        logger.debug("Added cart line %s (add-ons: %s)", line.id, add_ons_signature(grouped_add_ons))

    def update_quantity(self, line_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove_from_cart(line_id)
            return

        lines = []
        for line in self._lines:
            if line.id == line_id:
                line = copy.copy(line)
                line.quantity = quantity
            lines.append(line)
        self._commit(lines)

    def remove_from_cart(self, line_id: str) -> None:
        self._commit([line for line in self._lines if line.id != line_id])

    def clear_cart(self) -> None:
        self._commit([])

    def get_total_price(self) -> float:
        return sum(
            compute_line_price(line, self._member_context) * line.quantity
            for line in self._lines
        )

    def get_total_items(self) -> int:
        return sum(line.quantity for line in self._lines)

    @property
    def is_cart_open(self) -> bool:
        return self._is_open

    def open_cart(self) -> None:
        self._is_open = True

    def close_cart(self) -> None:
        self._is_open = False
