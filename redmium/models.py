"""Domain models for Redmine users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Optional

UINT32_MAX = 2**32 - 1


class UserStatus(IntEnum):
    """Account status of a Redmine user, sent over the wire as its code."""

    ANONYMOUS = 0
    ACTIVE = 1
    REGISTERED = 2
    LOCKED = 3

    @classmethod
    def from_code(cls, code: object) -> "UserStatus":
        """Map an integer code to a status, rejecting anything unknown."""

        if isinstance(code, bool) or not isinstance(code, int):
            raise ValueError(f"status must be an integer code, got {type(code).__name__}")
        try:
            return cls(code)
        except ValueError as exc:
            known = ", ".join(str(member.value) for member in cls)
            raise ValueError(f"unknown status code {code} (expected one of {known})") from exc


@dataclass(frozen=True)
class User:
    """A Redmine user account.

    ``status`` is ``None`` when Redmine did not say; bulk ``/users`` responses
    omit it. Timestamps are naive datetimes in UTC with whole seconds.
    """

    id: int
    first_name: str
    last_name: str
    mail: str
    login: str
    is_admin: bool
    status: Optional[UserStatus]
    last_login_at: datetime
    password_changed_at: datetime
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError("id must be an integer")
        if not 0 <= self.id <= UINT32_MAX:
            raise ValueError(f"id must fit in an unsigned 32-bit integer, got {self.id}")
        for name in ("first_name", "last_name", "mail", "login"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be a string")
        if not isinstance(self.is_admin, bool):
            raise TypeError("is_admin must be a boolean")
        if self.status is not None and not isinstance(self.status, UserStatus):
            raise TypeError("status must be a UserStatus or None")
        for name in ("last_login_at", "password_changed_at", "created_at", "updated_at"):
            value = getattr(self, name)
            if not isinstance(value, datetime):
                raise TypeError(f"{name} must be a datetime")
            if value.tzinfo is not None:
                raise ValueError(f"{name} must be a naive datetime in UTC")
            if value.microsecond:
                raise ValueError(f"{name} must not carry sub-second precision")


__all__ = ["UINT32_MAX", "User", "UserStatus"]
