"""Custom exceptions for the storefront."""
from __future__ import annotations


class StorefrontException(Exception):
    """Base exception for all storefront errors."""

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message


class StorageException(StorefrontException):
    """Cart persistence errors."""

    pass


class ValidationException(StorefrontException):
    """Input validation errors."""

    pass


class MemberNotFoundException(StorefrontException):
    """Member not found in the directory."""

    def __init__(self, member_id: str) -> None:
        super().__init__(f"Member with ID {member_id} not found")
        self.member_id = member_id


class AuthorizationException(StorefrontException):
    """Authorization/permission errors."""

    pass


class ConfigurationException(StorefrontException):
    """Configuration errors."""

    pass
