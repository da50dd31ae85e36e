"""Domain entities package."""

from .cart import CartLine
from .catalog import AddOn, MenuItem, Variation
from .member import Member, MemberRegistration, TopMember

__all__ = [
    "CartLine",
    "MenuItem",
    "Variation",
    "AddOn",
    "Member",
    "MemberRegistration",
    "TopMember",
]
