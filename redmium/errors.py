"""Exceptions raised while decoding Redmine payloads."""
from __future__ import annotations

from typing import Optional


class CodecError(ValueError):
    """Base class for every decoding failure raised by :mod:`redmium`."""


class PayloadSyntaxError(CodecError):
    """Raised when a payload is not well-formed JSON."""

    def __init__(self, reason: str, *, line: int | None = None, column: int | None = None) -> None:
        message = f"Malformed JSON payload: {reason}"
        if line is not None and column is not None:
            message += f" (line {line}, column {column})"
        super().__init__(message)
        self.reason = reason
        self.line = line
        self.column = column


class SchemaError(CodecError):
    """Raised when well-formed JSON does not have the expected shape.

    ``key`` names the offending key, or is ``None`` when the document root
    itself is wrong (for example an array where an object was expected).
    """

    def __init__(self, key: Optional[str], reason: str) -> None:
        where = f"'{key}'" if key is not None else "payload root"
        super().__init__(f"Invalid value for {where}: {reason}")
        self.key = key
        self.reason = reason

    def prefixed(self, prefix: str) -> "SchemaError":
        """Return a copy whose key is nested under ``prefix``."""

        key = prefix if self.key is None else f"{prefix}.{self.key}"
        return SchemaError(key, self.reason)


class FormatError(CodecError):
    """Raised when a timestamp does not follow ``YYYY-MM-DDTHH:MM:SSZ``."""

    def __init__(self, value: object, reason: str, *, field: str | None = None) -> None:
        message = f"Invalid timestamp {value!r}: {reason}"
        if field:
            message = f"Invalid timestamp {value!r} for '{field}': {reason}"
        super().__init__(message)
        self.value = value
        self.field = field
        self.reason = reason

    def for_field(self, field: str) -> "FormatError":
        """Return a copy of the error annotated with ``field``."""

        return FormatError(self.value, self.reason, field=field)


__all__ = ["CodecError", "FormatError", "PayloadSyntaxError", "SchemaError"]
