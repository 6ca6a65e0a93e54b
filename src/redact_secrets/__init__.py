"""redact-secrets package."""

from .engine import REDACTED, DeepCopyEngine, Redactor, deep_copy, redact_fields_in_map
from .errors import (
    ArtifactWriteError,
    CopyError,
    PayloadDecodeError,
    RedactSecretsError,
    RegistryLoadError,
    SchemaLoadError,
)
from .generator import collect_secret_fields, generate_secret_fields, render_artifact
from .registry import RedactionRegistry, load_registry
from .values import KeyValuePair, ValueKind, decode_payload, kind_of

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "REDACTED",
    "ArtifactWriteError",
    "CopyError",
    "DeepCopyEngine",
    "KeyValuePair",
    "PayloadDecodeError",
    "RedactSecretsError",
    "RedactionRegistry",
    "Redactor",
    "RegistryLoadError",
    "SchemaLoadError",
    "ValueKind",
    "collect_secret_fields",
    "decode_payload",
    "deep_copy",
    "generate_secret_fields",
    "kind_of",
    "load_registry",
    "redact_fields_in_map",
    "render_artifact",
]
