"""Configuration module for redact-secrets."""

from redact_secrets.config.models import (
    RedactionSettings,
    SettingsCache,
    get_config_file,
    get_settings,
    load_config_defaults,
)

__all__ = [
    "RedactionSettings",
    "SettingsCache",
    "get_config_file",
    "get_settings",
    "load_config_defaults",
]
