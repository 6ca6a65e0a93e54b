"""
Generic value model.

Decoded request/response payloads are trees over a closed set of shapes:
scalars, mappings and sequences. ``kind_of`` classifies a single node so the
copy engine and the redactor branch on a fixed variant set instead of
inspecting arbitrary objects.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from redact_secrets.errors import PayloadDecodeError

Scalar = Union[None, bool, int, float, str, Decimal]
GenericValue = Any
GenericMapping = dict[Any, GenericValue]

SCALAR_TYPES: tuple[type, ...] = (type(None), bool, int, float, str, Decimal)
MAPPING_TYPES: tuple[type, ...] = (dict,)
SEQUENCE_TYPES: tuple[type, ...] = (list, tuple)


class ValueKind(str, Enum):
    """Variant tag for a generic value node."""

    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    PAIR = "pair"  # KeyValuePair
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class KeyValuePair:
    """An ordered key/value entry, as produced by list-of-pairs encodings."""

    key: str
    value: GenericValue


def kind_of(value: Any) -> ValueKind:
    """Classify ``value`` by its exact concrete type.

    Subclasses of the registered types are reported as UNSUPPORTED.
    """
    value_type = type(value)
    if value_type in SCALAR_TYPES:
        return ValueKind.SCALAR
    if value_type in MAPPING_TYPES:
        return ValueKind.MAPPING
    if value_type in SEQUENCE_TYPES:
        return ValueKind.SEQUENCE
    if value_type is KeyValuePair:
        return ValueKind.PAIR
    return ValueKind.UNSUPPORTED


def is_mapping(value: Any) -> bool:
    return kind_of(value) is ValueKind.MAPPING


def decode_payload(raw: str | bytes, exact_numbers: bool = False) -> GenericMapping:
    """Decode a JSON document into a generic mapping.

    Args:
        raw: JSON text or UTF-8 bytes.
        exact_numbers: Decode non-integer numbers as ``Decimal`` instead of
            ``float``.

    Raises:
        PayloadDecodeError: If the text is not JSON or the root is not an
            object.
    """
    try:
        decoded = json.loads(raw, parse_float=Decimal if exact_numbers else None)
    except (ValueError, RecursionError) as e:
        raise PayloadDecodeError(f"Payload is not valid JSON: {e}") from e

    if not isinstance(decoded, dict):
        raise PayloadDecodeError(
            f"Payload root must be a JSON object, got {type(decoded).__name__}"
        )
    return decoded


__all__ = [
    "GenericMapping",
    "GenericValue",
    "KeyValuePair",
    "MAPPING_TYPES",
    "SCALAR_TYPES",
    "SEQUENCE_TYPES",
    "Scalar",
    "ValueKind",
    "decode_payload",
    "is_mapping",
    "kind_of",
]
