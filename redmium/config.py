"""Configuration for how redmium renders JSON."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import yaml

logger = logging.getLogger("redmium.config")

CONFIG_ENV_VAR = "REDMIUM_CONFIG"


@dataclass(frozen=True)
class EncoderSettings:
    """Formatting options applied when encoding users to JSON."""

    indent: Optional[int] = None
    sort_keys: bool = False

    @staticmethod
    def from_dict(data: Dict[str, object]) -> "EncoderSettings":
        """Create :class:`EncoderSettings` from raw dictionary data."""
        allowed_fields = {"indent", "sort_keys"}
        unknown = set(data.keys()) - allowed_fields
        if unknown:
            raise ValueError(f"Unknown encoder configuration fields: {', '.join(sorted(unknown))}")

        indent = data.get("indent")
        if indent is not None:
            if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
                raise ValueError(f"Encoder indent must be a non-negative integer, got {indent!r}")

        sort_keys = data.get("sort_keys", False)
        if not isinstance(sort_keys, bool):
            raise ValueError(f"Encoder sort_keys must be a boolean, got {sort_keys!r}")

        return EncoderSettings(indent=indent, sort_keys=sort_keys)


def load_encoder_settings(config_path: Path) -> EncoderSettings:
    """Load encoder settings from the ``encoder`` section of a YAML file."""
    with config_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}

    if not isinstance(raw, dict):
        raise ValueError("Configuration file must contain a mapping at the top level")

    section = raw.get("encoder") or {}
    if not isinstance(section, dict):
        raise ValueError("The 'encoder' key must hold a mapping of settings")

    settings = EncoderSettings.from_dict(section)
    logger.debug("Loaded encoder settings from %s: %s", config_path, settings)
    return settings


def resolve_config_path(env_value: Optional[str]) -> Path:
    """Resolve the path to the configuration file.

    ``env_value`` is normally the value of ``$REDMIUM_CONFIG``; when it is
    empty the bundled ``config/redmium.yaml`` is used.
    """
    if env_value:
        candidate = Path(env_value).expanduser().resolve(strict=False)
    else:
        candidate = (Path(__file__).resolve().parent.parent / "config" / "redmium.yaml").resolve(strict=False)
    return candidate


def load_encoder_settings_from_env() -> EncoderSettings:
    """Load encoder settings from ``$REDMIUM_CONFIG``, falling back to defaults."""
    config_path = resolve_config_path(os.getenv(CONFIG_ENV_VAR))
    if not config_path.is_file():
        logger.debug("No encoder configuration at %s; using defaults", config_path)
        return EncoderSettings()
    return load_encoder_settings(config_path)


__all__ = [
    "CONFIG_ENV_VAR",
    "EncoderSettings",
    "load_encoder_settings",
    "load_encoder_settings_from_env",
    "resolve_config_path",
]
