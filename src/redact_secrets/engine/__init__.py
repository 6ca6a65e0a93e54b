"""
Runtime redaction engine.

Deep copy plus recursive field redaction over generic payloads.
"""

from redact_secrets.engine.copy import DeepCopyEngine, deep_copy
from redact_secrets.engine.redactor import REDACTED, Redactor, redact_fields_in_map

__all__ = [
    "DeepCopyEngine",
    "REDACTED",
    "Redactor",
    "deep_copy",
    "redact_fields_in_map",
]
