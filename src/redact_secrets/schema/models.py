"""
Schema document models.

The schema compiler hands over its type definitions as a YAML or JSON
document. Only what the registry generator needs is modelled: type names,
field names, and the directives attached to each field.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from redact_secrets.errors import SchemaLoadError


def _with_names(entries: Any) -> Any:
    """Copy each mapping key into its entry's ``name`` field.

    Non-mapping input is passed through for pydantic to reject.
    """
    if not isinstance(entries, dict):
        return entries
    named: dict[str, Any] = {}
    for name, entry in entries.items():
        if isinstance(entry, str):
            # Type shorthand: "login: String"
            entry = {"type": entry}
        elif entry is None:
            entry = {}
        if isinstance(entry, dict):
            entry = {"name": name, **entry}
        named[name] = entry
    return named


class Directive(BaseModel):
    """A directive attached to a schema field, e.g. ``@redactSecrets``."""

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_name(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data.lstrip("@")}
        return data


class SchemaField(BaseModel):
    """A single field of a schema type."""

    model_config = ConfigDict(extra="allow")

    name: str
    type: str | None = None
    directives: list[Directive] = Field(default_factory=list)

    def directive(self, name: str) -> Directive | None:
        """Return the directive called ``name``, or None."""
        for directive in self.directives:
            if directive.name == name:
                return directive
        return None


class SchemaType(BaseModel):
    """A named type and its fields."""

    model_config = ConfigDict(extra="allow")

    name: str
    fields: dict[str, SchemaField] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _name_fields(cls, data: Any) -> Any:
        if isinstance(data, dict) and "fields" in data:
            data = {**data, "fields": _with_names(data["fields"])}
        return data


class SchemaDocument(BaseModel):
    """All type definitions produced by the schema compiler."""

    types: dict[str, SchemaType] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _name_types(cls, data: Any) -> Any:
        if isinstance(data, dict) and "types" in data:
            data = {**data, "types": _with_names(data["types"])}
        return data


def load_schema(path: Path) -> SchemaDocument:
    """Load a schema document from a YAML or JSON file.

    Raises:
        SchemaLoadError: If the file is missing, unparsable, or invalid.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise SchemaLoadError(f"Cannot read schema {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Cannot parse schema {path}: {e}") from e

    if not isinstance(data, dict):
        raise SchemaLoadError(f"Schema {path} must be a mapping with a 'types' key")

    try:
        return SchemaDocument.model_validate(data)
    except ValidationError as e:
        raise SchemaLoadError(f"Invalid schema {path}: {e}") from e


__all__ = ["Directive", "SchemaDocument", "SchemaField", "SchemaType", "load_schema"]
