"""Value Objects for domain model."""
from __future__ import annotations

from enum import Enum


class MemberUserType(str, Enum):
    """Member classes that select a price tier."""

    END_USER = "end_user"
    RESELLER = "reseller"


class MemberStatus(str, Enum):
    """Member account status."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class PriceTier(str, Enum):
    """Price tiers, resolved in fixed priority order."""

    BASE = "base"
    MEMBER = "member"
    RESELLER = "reseller"
