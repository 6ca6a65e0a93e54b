#!/usr/bin/env python3
"""
Request Logging Example

This example demonstrates the two phases of redact-secrets:
- Generating the redacted field artifact from a schema
- Loading the registry once and redacting request variables before logging

Usage:
    python examples/request_logging.py
"""

import logging
import tempfile
from pathlib import Path

from redact_secrets import RedactionRegistry, Redactor, generate_secret_fields
from redact_secrets.logging import RedactionFilter, configure_logging, log_payload
from redact_secrets.schema import SchemaDocument

SCHEMA = {
    "types": {
        "User": {
            "fields": {
                "login": "String",
                "apiKey": {"directives": ["redactSecrets"]},
            }
        },
        "ProjectVars": {
            "fields": {
                "vars": {"directives": ["redactSecrets"]},
                "privateVars": {},
            }
        },
    }
}


def main():
    """Generate an artifact, then log a request with secrets removed."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("example.requests")

    with tempfile.TemporaryDirectory() as tmp:
        artifact = Path(tmp) / "redacted_fields_gen.yaml"

        # Build time
        fields = generate_secret_fields(SchemaDocument.model_validate(SCHEMA), artifact)
        print(f"Generated {len(fields)} field(s): {', '.join(fields)}")
        print(artifact.read_text())

        # Process start
        redactor = Redactor(RedactionRegistry.from_artifact(artifact))
        logger.addFilter(RedactionFilter(redactor))

    # Request time
    variables = {
        "projectId": "spruce",
        "vars": {"AWS_SECRET": "hunter2"},
        "users": [{"login": "octocat", "apiKey": "abc123"}],
    }
    log_payload(logger, logging.INFO, "saveProjectSettings", variables, redactor)
    logger.info("variables for %(projectId)s: %(vars)s", variables)

    print(f"\nOriginal still intact: {variables['vars']}")


if __name__ == "__main__":
    main()
