"""
Recursive Redactor.

Replaces the value of every registered field name, at any depth, with a
fixed sentinel. The input payload is deep-copied first and only the copy is
mutated, so the caller can keep using the original for request execution.
"""

from __future__ import annotations

import logging

from redact_secrets.engine.copy import DeepCopyEngine
from redact_secrets.errors import CopyError
from redact_secrets.registry import RedactionRegistry
from redact_secrets.values import GenericMapping, ValueKind, is_mapping, kind_of

logger = logging.getLogger(__name__)

REDACTED = "REDACTED"

_default_engine = DeepCopyEngine()


def redact_fields_in_map(
    data: GenericMapping,
    registry: RedactionRegistry,
    engine: DeepCopyEngine | None = None,
) -> GenericMapping:
    """Return a redacted copy of ``data`` for logging.

    If ``data`` cannot be copied the failure is logged and an empty mapping
    is returned, so an unredacted structure is never handed back.

    Args:
        data: Decoded request/response payload. Left unchanged.
        registry: Field names to redact.
        engine: Copy engine; defaults to the built-in type table.

    Returns:
        A new mapping suitable only for log output.
    """
    try:
        data_copy = (engine or _default_engine).copy(data)
    except CopyError:
        logger.error("Failed to deep copy payload for redaction", exc_info=True)
        return {}

    if not is_mapping(data_copy):
        logger.error(
            "Refusing to redact non-mapping payload of type %s", type(data_copy).__name__
        )
        return {}

    _redact_in_place(data_copy, registry)
    return data_copy


def _redact_in_place(data: GenericMapping, registry: RedactionRegistry) -> None:
    for key, value in data.items():
        if key in registry:
            data[key] = REDACTED
            continue

        kind = kind_of(value)
        if kind is ValueKind.MAPPING:
            _redact_in_place(value, registry)
        elif kind is ValueKind.SEQUENCE:
            # Only one level of sequence nesting is examined.
            for element in value:
                if is_mapping(element):
                    _redact_in_place(element, registry)


class Redactor:
    """A registry bound to a copy engine, for injection into call sites."""

    def __init__(self, registry: RedactionRegistry, engine: DeepCopyEngine | None = None) -> None:
        self.registry = registry
        self.engine = engine or DeepCopyEngine()

    def __call__(self, data: GenericMapping) -> GenericMapping:
        return self.redact(data)

    def redact(self, data: GenericMapping) -> GenericMapping:
        return redact_fields_in_map(data, self.registry, self.engine)

    def __repr__(self) -> str:
        return f"Redactor(fields={len(self.registry)})"


__all__ = ["REDACTED", "Redactor", "redact_fields_in_map"]
