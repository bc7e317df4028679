"""Wire schemas for the JSON documents exchanged with the Redmine API."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, field_validator

from .models import UINT32_MAX, UserStatus

TIMESTAMP_KEYS = ("created_on", "updated_on", "last_login_on", "passwd_changed_on")


class UserPayload(BaseModel):
    """A single user object as Redmine sends it.

    Timestamps stay strings here; :mod:`redmium.timestamps` owns their format.
    ``status`` is absent from bulk responses and defaults to ``None``.
    """

    id: StrictInt = Field(..., ge=0, le=UINT32_MAX)
    login: StrictStr
    admin: StrictBool
    firstname: StrictStr
    lastname: StrictStr
    mail: StrictStr
    created_on: StrictStr
    updated_on: StrictStr
    last_login_on: StrictStr
    passwd_changed_on: StrictStr
    status: Optional[StrictInt] = None

    class Config:
        extra = "ignore"

    @field_validator("status")
    @classmethod
    def _validate_status(cls, value: Optional[int]) -> Optional[int]:
        if value is not None:
            UserStatus.from_code(value)
        return value


class UserEnvelope(BaseModel):
    """Single-entity response, ``{"user": {...}}``."""

    user: Dict[str, Any]


class UserListEnvelope(BaseModel):
    """Bulk ``/users`` response with its paging counters."""

    users: List[Dict[str, Any]]
    total_count: Optional[StrictInt] = Field(default=None, ge=0)
    offset: Optional[StrictInt] = Field(default=None, ge=0)
    limit: Optional[StrictInt] = Field(default=None, ge=0)


__all__ = ["TIMESTAMP_KEYS", "UserEnvelope", "UserListEnvelope", "UserPayload"]
