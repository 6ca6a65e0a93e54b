"""
Settings for redact-secrets.

Values are resolved once per process, from (highest first) explicit
overrides, environment variables, the ``defaults`` section of the user
config file, and built-in defaults.

Environment Variables:
    REDACT_SECRETS_ARTIFACT: Path of the generated registry artifact
        Example: "build/redacted_fields_gen.yaml"
    REDACT_SECRETS_DIRECTIVE: Schema directive marking secret fields
        (default: redactSecrets)
    REDACT_SECRETS_LOG_LEVEL: Log level name (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, ClassVar

import yaml
from pydantic import BaseModel, Field, field_validator

from redact_secrets.generator.plugin import DEFAULT_DIRECTIVE

logger = logging.getLogger(__name__)

DEFAULT_ARTIFACT_PATH = Path("redacted_fields_gen.yaml")
DEFAULT_LOG_LEVEL = "WARNING"

# Environment variable names
ENV_ARTIFACT = "REDACT_SECRETS_ARTIFACT"
ENV_DIRECTIVE = "REDACT_SECRETS_DIRECTIVE"
ENV_LOG_LEVEL = "REDACT_SECRETS_LOG_LEVEL"

_ENV_FIELDS: dict[str, str] = {
    "artifact_path": ENV_ARTIFACT,
    "directive": ENV_DIRECTIVE,
    "log_level": ENV_LOG_LEVEL,
}


def get_config_file() -> Path:
    """Get the config file path. Computed at runtime for test compatibility."""
    return Path.home() / ".config" / "redact-secrets" / "config.yaml"


def load_config_defaults(config_file: Path | None = None) -> dict[str, Any]:
    """Load the ``defaults`` section of the config file.

    Returns:
        Dictionary of defaults, or an empty dict if the file is missing or
        unreadable.
    """
    config_file = config_file or get_config_file()
    if not config_file.exists():
        return {}

    try:
        config = yaml.safe_load(config_file.read_text()) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", config_file, e)
        return {}

    defaults = config.get("defaults", {}) if isinstance(config, dict) else {}
    return defaults if isinstance(defaults, dict) else {}


class RedactionSettings(BaseModel):
    """Resolved settings for the generator, the registry loader and the CLI."""

    artifact_path: Path = Field(
        default=DEFAULT_ARTIFACT_PATH,
        description="Generated registry artifact to write and load",
    )
    directive: str = Field(
        default=DEFAULT_DIRECTIVE,
        min_length=1,
        description="Schema directive that marks a field as secret",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Log level name for the CLI",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, **overrides: Any) -> RedactionSettings:
        """Construct settings from overrides, environment and config file."""
        values: dict[str, Any] = {
            key: value
            for key, value in load_config_defaults().items()
            if key in cls.model_fields
        }
        for field_name, env_var in _ENV_FIELDS.items():
            env_value = os.environ.get(env_var)
            if env_value:
                values[field_name] = env_value.strip()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


class SettingsCache:
    """Holds the process settings once resolved."""

    _instance: ClassVar[RedactionSettings | None] = None

    @classmethod
    def get_instance(cls) -> RedactionSettings:
        """Get or create the cached settings."""
        if cls._instance is None:
            cls._instance = RedactionSettings.from_env()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the cached settings (for testing)."""
        cls._instance = None


def get_settings() -> RedactionSettings:
    """Return the process settings, resolving them on first use."""
    return SettingsCache.get_instance()


__all__ = [
    "DEFAULT_ARTIFACT_PATH",
    "DEFAULT_DIRECTIVE",
    "DEFAULT_LOG_LEVEL",
    "ENV_ARTIFACT",
    "ENV_DIRECTIVE",
    "ENV_LOG_LEVEL",
    "RedactionSettings",
    "SettingsCache",
    "get_config_file",
    "get_settings",
    "load_config_defaults",
]
