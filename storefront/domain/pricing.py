"""Price-tier resolution for cart lines.

Prices depend on who is looking at the cart, so nothing here is cached: every
call reads the member context again. The tier chain is

1. reseller price, for a logged-in reseller when the variation defines one;
2. member price, for a logged-in end user when the variation defines one;
3. the variation's base price otherwise.
"""
from __future__ import annotations

from typing import Iterable, Protocol

from storefront.domain.entities.cart import CartLine
from storefront.domain.entities.catalog import AddOn, MenuItem, Variation
from storefront.domain.entities.member import Member
from storefront.domain.value_objects import PriceTier


class MemberContext(Protocol):
    """Externally owned view of who is shopping."""

    @property
    def current_member(self) -> Member | None: ...

    def is_reseller(self) -> bool: ...


class AnonymousContext:
    """Member context for a shopper who is not logged in."""

    @property
    def current_member(self) -> Member | None:
        return None

    def is_reseller(self) -> bool:
        return False


def resolve_price_tier(variation: Variation, context: MemberContext) -> PriceTier:
    member = context.current_member
    reseller = context.is_reseller()
    if reseller and member is not None and variation.reseller_price is not None:
        return PriceTier.RESELLER
    if (
        member is not None
        and not reseller
        and member.is_end_user
        and variation.member_price is not None
    ):
        return PriceTier.MEMBER
    return PriceTier.BASE


def resolve_variation_price(variation: Variation | None, context: MemberContext) -> float:
    """Price contribution of the selected variation for the current member."""
    if variation is None:
        return 0.0
    tier = resolve_price_tier(variation, context)
    if tier == PriceTier.RESELLER:
        return float(variation.reseller_price)
    if tier == PriceTier.MEMBER:
        return float(variation.member_price)
    return float(variation.price)


def add_ons_total(add_ons: Iterable[AddOn] | None) -> float:
    return sum(float(add_on.price) * add_on.effective_quantity for add_on in add_ons or [])


def calculate_item_price(
    item: MenuItem,
    context: MemberContext,
    variation: Variation | None = None,
    add_ons: Iterable[AddOn] | None = None,
) -> float:
    """Unit price of a catalog configuration that is not yet in the cart."""
    return (
        float(item.base_price)
        + resolve_variation_price(variation, context)
        + add_ons_total(add_ons)
    )


def compute_line_price(line: CartLine, context: MemberContext) -> float:
    """Unit price of a cart line under the current member context."""
    return (
        float(line.base_price)
        + resolve_variation_price(line.selected_variation, context)
        + add_ons_total(line.selected_add_ons)
    )
