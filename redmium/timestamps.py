"""Conversion between naive datetimes and Redmine's ``...Z`` timestamps.

Redmine renders every date as ``YYYY-MM-DDTHH:MM:SSZ``. The trailing ``Z`` is
only a marker: values are kept as naive :class:`~datetime.datetime` objects
that are understood to be in UTC.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone

from .errors import FormatError

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_TIMESTAMP_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})Z",
    re.ASCII,
)


def encode_timestamp(value: datetime) -> str:
    """Render ``value`` as ``YYYY-MM-DDTHH:MM:SSZ``.

    Aware datetimes are converted to UTC first. Microseconds are dropped.
    """

    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    # strftime does not zero-pad years below 1000 on every platform.
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}Z"
    )


def decode_timestamp(value: str, *, field: str | None = None) -> datetime:
    """Parse a ``YYYY-MM-DDTHH:MM:SSZ`` string into a naive datetime."""

    if not isinstance(value, str):
        raise FormatError(value, "expected a string", field=field)

    match = _TIMESTAMP_RE.fullmatch(value)
    if match is None:
        raise FormatError(value, f"does not match {TIMESTAMP_FORMAT}", field=field)

    parts = {name: int(digits) for name, digits in match.groupdict().items()}
    try:
        return datetime(**parts)
    except ValueError as exc:
        raise FormatError(value, str(exc), field=field) from exc


__all__ = ["TIMESTAMP_FORMAT", "decode_timestamp", "encode_timestamp"]
