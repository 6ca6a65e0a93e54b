"""Pytest configuration and shared fixtures for redact-secrets tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from redact_secrets.config.models import SettingsCache
from redact_secrets.registry import RedactionRegistry
from redact_secrets.schema import SchemaDocument

SCHEMA_YAML = """\
types:
  User:
    fields:
      login: String
      apiKey:
        type: String
        directives: [redactSecrets]
      settings: UserSettings
  UserSettings:
    fields:
      timezone: {}
      githubToken:
        directives:
          - name: redactSecrets
  Project:
    fields:
      identifier: String
      vars:
        directives: ["@redactSecrets", deprecated]
      apiKey: String
"""


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch, tmp_path):
    """Isolate tests from the real environment and config file."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for var in ("REDACT_SECRETS_ARTIFACT", "REDACT_SECRETS_DIRECTIVE", "REDACT_SECRETS_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    SettingsCache.reset()
    yield
    SettingsCache.reset()


@pytest.fixture
def registry() -> RedactionRegistry:
    """Create a registry with a few secret field names."""
    return RedactionRegistry(["password", "token", "apiKey"])


@pytest.fixture
def schema_file(tmp_path) -> Path:
    """Write the sample schema document to disk."""
    path = tmp_path / "schema.yaml"
    path.write_text(SCHEMA_YAML)
    return path


@pytest.fixture
def schema_document(schema_file) -> SchemaDocument:
    """Load the sample schema document."""
    from redact_secrets.schema import load_schema

    return load_schema(schema_file)


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """Return a nested request payload with secrets at several depths."""
    return {
        "operationName": "SaveUser",
        "variables": {
            "login": "octocat",
            "password": "hunter2",
            "settings": {
                "timezone": "UTC",
                "token": {"value": "abc", "expires": 3600},
            },
            "keys": [
                {"name": "deploy", "apiKey": "k-1"},
                {"name": "ci", "apiKey": "k-2"},
                "plain",
            ],
            "nothing": None,
        },
    }
