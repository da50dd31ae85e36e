"""Member entity model."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from storefront.domain.value_objects import MemberStatus, MemberUserType


class Member(BaseModel):
    """Storefront member with type-safe fields."""

    id: str = Field(..., min_length=1, description="Member ID")
    username: str = Field(..., description="Display username")
    email: str = Field(..., description="Login email")
    mobile_no: str | None = Field(None, description="Mobile number")
    user_type: MemberUserType = Field(MemberUserType.END_USER, description="Price class")
    status: MemberStatus = Field(MemberStatus.ACTIVE, description="Account status")
    level: int = Field(1, ge=1, description="Member level")
    created_at: datetime | None = Field(None, description="Registration timestamp")

    class Config:
        """Pydantic config."""

        from_attributes = True

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and sanity-check the email address."""
        email = v.strip().lower()
        if "@" not in email:
            raise ValueError("Email must contain '@'")
        return email

    @property
    def is_reseller(self) -> bool:
        return self.user_type == MemberUserType.RESELLER

    @property
    def is_end_user(self) -> bool:
        return self.user_type == MemberUserType.END_USER

    @property
    def is_active(self) -> bool:
        return self.status == MemberStatus.ACTIVE


class MemberRegistration(BaseModel):
    """Validated registration payload handed to the auth backend."""

    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    mobile_no: str | None = None
    password: str = Field(..., min_length=1)


class TopMember(BaseModel):
    """Member ranked by total order cost."""

    member: Member
    total_orders: int = 0
    total_cost: float = 0.0
