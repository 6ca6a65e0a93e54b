"""
Build-time registry generator.

Turns schema directives into the persisted redaction artifact.
"""

from redact_secrets.generator.plugin import (
    ARTIFACT_HEADER,
    DEFAULT_DIRECTIVE,
    collect_secret_fields,
    generate_secret_fields,
    render_artifact,
    write_artifact,
)

__all__ = [
    "ARTIFACT_HEADER",
    "DEFAULT_DIRECTIVE",
    "collect_secret_fields",
    "generate_secret_fields",
    "render_artifact",
    "write_artifact",
]
