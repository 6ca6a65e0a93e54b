"""
Redaction Registry.

The set of field names whose values must never reach log output. A registry
is built once at process start, typically from the generated artifact, and
then handed to every redaction call site. It is never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from redact_secrets.errors import RegistryLoadError

if TYPE_CHECKING:
    from redact_secrets.config.models import RedactionSettings

logger = logging.getLogger(__name__)


class RedactionRegistry:
    """Immutable set of sensitive field names.

    Membership is exact string equality: no case folding, no normalization.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Iterable[str] = ()) -> None:
        names = frozenset(fields)
        for name in names:
            if not isinstance(name, str):
                raise TypeError(f"Field names must be strings, got {type(name).__name__}")
        object.__setattr__(self, "_fields", names)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("RedactionRegistry is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("RedactionRegistry is immutable")

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._fields))

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RedactionRegistry):
            return NotImplemented
        return self._fields == other._fields

    def __hash__(self) -> int:
        return hash(self._fields)

    def __repr__(self) -> str:
        return f"RedactionRegistry({sorted(self._fields)!r})"

    @property
    def fields(self) -> frozenset[str]:
        return self._fields

    def is_redacted(self, name: object) -> bool:
        """Return True if values under key ``name`` must be redacted."""
        return name in self._fields

    @classmethod
    def from_artifact(cls, path: Path) -> RedactionRegistry:
        """Load a registry from a generated artifact.

        Raises:
            RegistryLoadError: If the file is missing, unreadable, not a
                mapping, or holds anything other than ``name: true`` entries.
        """
        try:
            data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        except OSError as e:
            raise RegistryLoadError(f"Cannot read redaction artifact {path}: {e}") from e
        except yaml.YAMLError as e:
            raise RegistryLoadError(f"Malformed redaction artifact {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise RegistryLoadError(f"Redaction artifact {path} must be a mapping")

        for name, flag in data.items():
            if not isinstance(name, str):
                raise RegistryLoadError(f"Non-string field name {name!r} in {path}")
            if flag is not True:
                raise RegistryLoadError(f"Field '{name}' in {path} must map to true, got {flag!r}")

        registry = cls(data)
        logger.debug("Loaded %d redacted fields from %s", len(registry), path)
        return registry


def load_registry(settings: RedactionSettings) -> RedactionRegistry:
    """Build the process registry from the configured artifact path."""
    return RedactionRegistry.from_artifact(settings.artifact_path)


__all__ = ["RedactionRegistry", "load_registry"]
