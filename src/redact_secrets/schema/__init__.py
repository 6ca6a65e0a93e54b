"""Schema document input for the registry generator."""

from redact_secrets.schema.models import (
    Directive,
    SchemaDocument,
    SchemaField,
    SchemaType,
    load_schema,
)

__all__ = ["Directive", "SchemaDocument", "SchemaField", "SchemaType", "load_schema"]
