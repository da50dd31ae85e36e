"""Member registration checks, directory updates and top-member ranking."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from logging_config import logger
from storefront.core.constants import MIN_PASSWORD_LENGTH, TOP_MEMBERS_LIMIT
from storefront.core.exceptions import MemberNotFoundException, ValidationException
from storefront.domain.entities.member import Member, MemberRegistration, TopMember
from storefront.domain.value_objects import MemberStatus, MemberUserType


def validate_registration(
    username: str,
    email: str,
    password: str,
    confirm_password: str,
    mobile_no: str | None = None,
) -> MemberRegistration:
    """Check a sign-up form before it is sent to the auth backend."""
    if password != confirm_password:
        raise ValidationException("Passwords do not match")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationException(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    username = (username or "").strip()
    email = (email or "").strip().lower()
    if not username:
        raise ValidationException("Username is required")
    if "@" not in email:
        raise ValidationException("A valid email is required")

    return MemberRegistration(
        username=username,
        email=email,
        mobile_no=(mobile_no or "").strip() or None,
        password=password,
    )


def _sort_key(member: Member) -> datetime:
    if member.created_at is None:
        return datetime.min.replace(tzinfo=timezone.utc)
    if member.created_at.tzinfo is None:
        return member.created_at.replace(tzinfo=timezone.utc)
    return member.created_at


class MemberDirectory:
    """Members known to the admin panel, newest first."""

    def __init__(self, members: Iterable[Member] = ()):
        self._members: dict[str, Member] = {}
        for member in members:
            self._members[member.id] = member

    @property
    def members(self) -> list[Member]:
        return sorted(self._members.values(), key=_sort_key, reverse=True)

    def get(self, member_id: str) -> Member:
        member = self._members.get(member_id)
        if member is None:
            raise MemberNotFoundException(member_id)
        return member

    def find(self, member_id: str) -> Member | None:
        return self._members.get(member_id)

    def update_member(
        self,
        member_id: str,
        level: int | None = None,
        status: MemberStatus | str | None = None,
        user_type: MemberUserType | str | None = None,
    ) -> bool:
        """Apply admin changes; returns False when nothing could be applied."""
        try:
            member = self.get(member_id)
            updates: dict[str, Any] = {}
            if level is not None:
                updates["level"] = level
            if status is not None:
                updates["status"] = MemberStatus(status)
            if user_type is not None:
                updates["user_type"] = MemberUserType(user_type)
            updated = Member.model_validate({**member.model_dump(), **updates})
        except (MemberNotFoundException, ValueError, ValidationError) as exc:
            logger.error("Error updating member %s: %s", member_id, exc)
            return False

        self._members[member_id] = updated
        logger.info("Member %s updated: %s", member_id, sorted(updates))
        return True


def rank_top_members(
    orders: Iterable[Mapping[str, Any]],
    members: Iterable[Member],
    limit: int = TOP_MEMBERS_LIMIT,
) -> list[TopMember]:
    """Rank members by the summed ``total_price`` of their orders.

    Orders without a ``member_id`` are ignored; members missing from
    ``members`` are dropped from the ranking.
    """
    totals: dict[str, dict[str, float]] = {}
    for order in orders:
        member_id = order.get("member_id")
        if not member_id:
            continue
        entry = totals.setdefault(member_id, {"total_cost": 0.0, "order_count": 0})
        entry["total_cost"] += float(order.get("total_price") or 0)
        entry["order_count"] += 1

    ranked_ids = sorted(totals, key=lambda mid: totals[mid]["total_cost"], reverse=True)[:limit]
    by_id = {member.id: member for member in members}

    result: list[TopMember] = []
    for member_id in ranked_ids:
        member = by_id.get(member_id)
        if member is None:
            continue
        result.append(
            TopMember(
                member=member,
                total_orders=int(totals[member_id]["order_count"]),
                total_cost=totals[member_id]["total_cost"],
            )
        )
    return result
