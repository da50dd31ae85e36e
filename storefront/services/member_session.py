"""Logged-in member state consumed by the cart's pricing."""
from __future__ import annotations

from logging_config import logger
from storefront.core.exceptions import AuthorizationException
from storefront.domain.entities.member import Member


class MemberSession:
    """Holds the current member; the cart reads it on every price lookup."""

    def __init__(self, member: Member | None = None):
        self._member: Member | None = None
        if member is not None:
            self.login(member)

    @property
    def current_member(self) -> Member | None:
        return self._member

    @property
    def is_logged_in(self) -> bool:
        return self._member is not None

    def is_reseller(self) -> bool:
        return self._member is not None and self._member.is_reseller

    def login(self, member: Member) -> None:
        if not member.is_active:
            raise AuthorizationException(f"Member {member.id} is not active")
        self._member = member
        logger.info("Member %s logged in as %s", member.id, member.user_type)

    def logout(self) -> None:
        if self._member is not None:
            logger.info("Member %s logged out", self._member.id)
        self._member = None

    def refresh(self, member: Member) -> None:
        """Replace the current member snapshot, e.g. after an admin update."""
        if self._member is None or self._member.id != member.id:
            return
        if not member.is_active:
            self.logout()
            return
        self._member = member
