"""Typed codecs for Redmine API user payloads."""

from __future__ import annotations

from .config import (
    EncoderSettings,
    load_encoder_settings,
    load_encoder_settings_from_env,
    resolve_config_path,
)
from .errors import CodecError, FormatError, PayloadSyntaxError, SchemaError
from .models import User, UserStatus
from .timestamps import decode_timestamp, encode_timestamp
from .user import (
    UserPage,
    decode_user,
    decode_user_list,
    decode_user_response,
    encode_user,
    encode_user_response,
)

__all__ = [
    "CodecError",
    "EncoderSettings",
    "FormatError",
    "PayloadSyntaxError",
    "SchemaError",
    "User",
    "UserPage",
    "UserStatus",
    "decode_timestamp",
    "decode_user",
    "decode_user_list",
    "decode_user_response",
    "encode_timestamp",
    "encode_user",
    "encode_user_response",
    "load_encoder_settings",
    "load_encoder_settings_from_env",
    "resolve_config_path",
]
