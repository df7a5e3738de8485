"""
Domain exceptions for the employee admin backend.

Every error the API reports back to the console derives from SkyAdminError.
The exception handler registered in main.py turns them into a failed Result
envelope carrying ``message``.
"""

from __future__ import annotations


class SkyAdminError(Exception):
    """Base class for errors surfaced to API callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AccountNotFoundError(SkyAdminError):
    pass


class PasswordError(SkyAdminError):
    pass


class AccountLockedError(SkyAdminError):
    pass


class EmployeeNotFoundError(SkyAdminError):
    pass


class UsernameAlreadyExistsError(SkyAdminError):
    def __init__(self, username: str):
        super().__init__(f"{username} already exists")
        self.username = username


class AuditFillError(SkyAdminError):
    """
    Raised when audit fields could not be stamped onto an entity.

    Either the entity does not expose one of the audit attributes the
    operation needs, or setting it failed.
    """

    def __init__(self, entity_type: str, field: str, reason: str):
        super().__init__(
            f"Could not fill audit field '{field}' on {entity_type}: {reason}"
        )
        self.entity_type = entity_type
        self.field = field
        self.reason = reason
