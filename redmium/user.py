"""Encode and decode Redmine users to and from JSON.

The Redmine API leaves ``status`` out of bulk ``/users`` responses while
single-user responses include it. Decoding therefore treats a missing (or
``null``) status as unknown and stores ``None``; every other key is required.
Encoding always writes ``status``, as ``null`` when it is unknown, so the
output decodes back to an equal :class:`~redmium.models.User`.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Sequence, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .config import EncoderSettings
from .errors import FormatError, PayloadSyntaxError, SchemaError
from .models import User, UserStatus
from .schemas import UserEnvelope, UserListEnvelope, UserPayload
from .timestamps import decode_timestamp, encode_timestamp

logger = logging.getLogger("redmium.user")

_DEFAULT_SETTINGS = EncoderSettings()

_ModelT = TypeVar("_ModelT", bound=BaseModel)


@dataclass(frozen=True)
class UserPage:
    """One page of a bulk ``/users`` response."""

    users: Tuple[User, ...]
    total_count: int
    offset: int
    limit: int


_MAX_INT_DIGITS = 64
_OVERSIZED_INT = 10**_MAX_INT_DIGITS


def _reject_constant(name: str) -> float:
    raise PayloadSyntaxError(f"non-standard constant {name}")


def _parse_int(literal: str) -> int:
    # int() refuses very long digit strings; such literals are out of every checked range.
    if len(literal.lstrip("-")) > _MAX_INT_DIGITS:
        return -_OVERSIZED_INT if literal.startswith("-") else _OVERSIZED_INT
    return int(literal)


def _load_json(text: Union[str, bytes]) -> Any:
    try:
        return json.loads(text, parse_int=_parse_int, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise PayloadSyntaxError(exc.msg, line=exc.lineno, column=exc.colno) from exc
    except UnicodeDecodeError as exc:
        raise PayloadSyntaxError(f"payload is not valid UTF-8: {exc.reason}") from exc
    except RecursionError as exc:
        raise PayloadSyntaxError("payload nests too deeply") from exc


def _format_loc(loc: Sequence[Union[int, str]]) -> Optional[str]:
    key = ""
    for part in loc:
        if isinstance(part, int):
            key += f"[{part}]"
        else:
            key = f"{key}.{part}" if key else str(part)
    return key or None


def _validate(model: Type[_ModelT], data: Any) -> _ModelT:
    """Validate ``data`` against ``model``, reporting the first failing key."""

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        error = exc.errors()[0]
        raise SchemaError(_format_loc(error["loc"]), error["msg"]) from exc


def _payload_to_user(payload: UserPayload) -> User:
    def timestamp(key: str) -> datetime:
        return decode_timestamp(getattr(payload, key), field=key)

    return User(
        id=payload.id,
        first_name=payload.firstname,
        last_name=payload.lastname,
        mail=payload.mail,
        login=payload.login,
        is_admin=payload.admin,
        status=UserStatus(payload.status) if payload.status is not None else None,
        last_login_at=timestamp("last_login_on"),
        password_changed_at=timestamp("passwd_changed_on"),
        created_at=timestamp("created_on"),
        updated_at=timestamp("updated_on"),
    )


def _user_to_payload(user: User) -> UserPayload:
    return UserPayload(
        id=user.id,
        login=user.login,
        admin=user.is_admin,
        firstname=user.first_name,
        lastname=user.last_name,
        mail=user.mail,
        created_on=encode_timestamp(user.created_at),
        updated_on=encode_timestamp(user.updated_at),
        last_login_on=encode_timestamp(user.last_login_at),
        passwd_changed_on=encode_timestamp(user.password_changed_at),
        status=int(user.status) if user.status is not None else None,
    )


def _decode_user_object(data: Any) -> User:
    return _payload_to_user(_validate(UserPayload, data))


def _dump(document: Dict[str, Any], settings: Optional[EncoderSettings]) -> str:
    settings = settings or _DEFAULT_SETTINGS
    separators = (",", ":") if settings.indent is None else (",", ": ")
    return json.dumps(
        document,
        indent=settings.indent,
        sort_keys=settings.sort_keys,
        separators=separators,
        ensure_ascii=False,
    )


def decode_user(text: Union[str, bytes]) -> User:
    """Build a :class:`User` from the JSON object in ``text``.

    Raises :class:`PayloadSyntaxError` for malformed JSON,
    :class:`SchemaError` for a missing or mistyped key and
    :class:`FormatError` for a timestamp that is not ``YYYY-MM-DDTHH:MM:SSZ``.
    Unknown keys are ignored.
    """

    user = _decode_user_object(_load_json(text))
    logger.debug("Decoded Redmine user %s", user.id)
    return user


def encode_user(user: User, settings: Optional[EncoderSettings] = None) -> str:
    """Return the JSON representation of ``user``."""

    return _dump(_user_to_payload(user).model_dump(), settings)


def decode_user_response(text: Union[str, bytes]) -> User:
    """Decode a single-user response of the form ``{"user": {...}}``."""

    envelope = _validate(UserEnvelope, _load_json(text))
    try:
        user = _decode_user_object(envelope.user)
    except SchemaError as exc:
        raise exc.prefixed("user") from exc
    except FormatError as exc:
        raise exc.for_field(f"user.{exc.field}") from exc
    logger.debug("Decoded Redmine user %s from single-user response", user.id)
    return user


def encode_user_response(user: User, settings: Optional[EncoderSettings] = None) -> str:
    """Return ``user`` wrapped as a single-user response."""

    return _dump({"user": _user_to_payload(user).model_dump()}, settings)


def decode_user_list(text: Union[str, bytes]) -> UserPage:
    """Decode a bulk ``/users`` response into a :class:`UserPage`.

    Missing paging counters default to the size of the page.
    """

    envelope = _validate(UserListEnvelope, _load_json(text))

    users = []
    for index, item in enumerate(envelope.users):
        prefix = f"users[{index}]"
        try:
            users.append(_decode_user_object(item))
        except SchemaError as exc:
            raise exc.prefixed(prefix) from exc
        except FormatError as exc:
            raise exc.for_field(f"{prefix}.{exc.field}") from exc

    count = len(users)
    page = UserPage(
        users=tuple(users),
        total_count=envelope.total_count if envelope.total_count is not None else count,
        offset=envelope.offset if envelope.offset is not None else 0,
        limit=envelope.limit if envelope.limit is not None else count,
    )
    logger.debug(
        "Decoded %s Redmine user(s) at offset %s of %s", count, page.offset, page.total_count
    )
    return page


__all__ = [
    "UserPage",
    "decode_user",
    "decode_user_list",
    "decode_user_response",
    "encode_user",
    "encode_user_response",
]
