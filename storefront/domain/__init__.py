"""Domain package."""

from .entities import AddOn, CartLine, Member, MemberRegistration, MenuItem, TopMember, Variation
from .value_objects import MemberStatus, MemberUserType, PriceTier

__all__ = [
    # Entities
    "CartLine",
    "MenuItem",
    "Variation",
    "AddOn",
    "Member",
    "MemberRegistration",
    "TopMember",
    # Value Objects
    "MemberUserType",
    "MemberStatus",
    "PriceTier",
]
