"""
Registry generator.

Scans schema field directives at build time and writes the sorted set of
sensitive field names to a generated artifact. Names are collected without
their owning type: if any type marks ``token`` as secret, every ``token``
key in every payload is redacted.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from redact_secrets.errors import ArtifactWriteError
from redact_secrets.schema.models import SchemaDocument

logger = logging.getLogger(__name__)

DEFAULT_DIRECTIVE = "redactSecrets"
ARTIFACT_HEADER = "# Code generated by redact-secrets generate. DO NOT EDIT.\n"


def collect_secret_fields(
    document: SchemaDocument, directive: str = DEFAULT_DIRECTIVE
) -> list[str]:
    """Return every field name carrying ``directive``, deduplicated and sorted."""
    redacted_fields: set[str] = set()
    for schema_type in document.types.values():
        for field in schema_type.fields.values():
            if field.directive(directive) is not None:
                redacted_fields.add(field.name)
    return sorted(redacted_fields)


def render_artifact(fields: Iterable[str]) -> str:
    """Render the artifact text for ``fields``.

    One ``"name": true`` entry per line. Names are JSON-quoted, which YAML
    reads back verbatim.
    """
    names = sorted(set(fields))
    if not names:
        return ARTIFACT_HEADER + "{}\n"
    lines = [f"{json.dumps(name, ensure_ascii=False)}: true\n" for name in names]
    return ARTIFACT_HEADER + "".join(lines)


def write_artifact(fields: Iterable[str], path: Path) -> None:
    """Overwrite the artifact at ``path``.

    Raises:
        ArtifactWriteError: If the file or its directory cannot be written.
    """
    path = Path(path)
    content = render_artifact(fields)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ArtifactWriteError(path, str(e)) from e


def generate_secret_fields(
    document: SchemaDocument,
    path: Path,
    directive: str = DEFAULT_DIRECTIVE,
) -> list[str]:
    """Collect redacted field names from ``document`` and write them to ``path``."""
    fields = collect_secret_fields(document, directive)
    write_artifact(fields, path)
    logger.info("Wrote %d redacted fields to %s", len(fields), path)
    return fields


__all__ = [
    "ARTIFACT_HEADER",
    "DEFAULT_DIRECTIVE",
    "collect_secret_fields",
    "generate_secret_fields",
    "render_artifact",
    "write_artifact",
]
