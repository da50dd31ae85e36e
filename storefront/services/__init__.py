"""Business services orchestrating domain logic."""

from .cart_service import CartStore
from .member_service import MemberDirectory, rank_top_members, validate_registration
from .member_session import MemberSession

__all__ = [
    "CartStore",
    "MemberSession",
    "MemberDirectory",
    "rank_top_members",
    "validate_registration",
]
