"""Error kinds raised by redact-secrets."""

from __future__ import annotations

from pathlib import Path


class RedactSecretsError(Exception):
    """Base class for all redact-secrets errors."""


class ArtifactWriteError(RedactSecretsError):
    """The generated registry artifact could not be created or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write redaction artifact {path}: {reason}")


class CopyError(RedactSecretsError):
    """The deep copy hit a value it cannot safely clone."""

    def __init__(self, message: str, path: str = "$") -> None:
        self.path = path
        super().__init__(f"{message} at {path}")


class SchemaLoadError(RedactSecretsError):
    """A schema document could not be read or validated."""


class RegistryLoadError(RedactSecretsError):
    """A registry artifact could not be read or is malformed."""


class PayloadDecodeError(RedactSecretsError):
    """A raw payload is not a JSON object."""


__all__ = [
    "ArtifactWriteError",
    "CopyError",
    "PayloadDecodeError",
    "RedactSecretsError",
    "RegistryLoadError",
    "SchemaLoadError",
]
