"""
CLI entry point for redact-secrets.

Commands:
    redact-secrets generate <schema>   - Write the redaction artifact
    redact-secrets show                - List redacted field names
    redact-secrets redact [payload]    - Redact a JSON payload
    redact-secrets config              - Manage configuration
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from redact_secrets.config.models import RedactionSettings, get_config_file
from redact_secrets.errors import (
    ArtifactWriteError,
    PayloadDecodeError,
    RegistryLoadError,
    SchemaLoadError,
)
from redact_secrets.logging import configure_logging

app = typer.Typer(
    name="redact-secrets",
    help="Redact secret fields from payloads before they are logged",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _settings(**overrides: object) -> RedactionSettings:
    """Resolve settings and configure logging from them."""
    settings = RedactionSettings.from_env(**overrides)
    configure_logging(settings.log_level)
    return settings


@app.command()
def generate(
    schema: Path = typer.Argument(..., help="Schema document (YAML or JSON) with field directives"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Artifact path (default: from config or redacted_fields_gen.yaml)",
    ),
    directive: str | None = typer.Option(
        None,
        "--directive",
        "-d",
        help="Directive marking secret fields (default: redactSecrets)",
    ),
) -> None:
    """Generate the redacted field artifact from a schema."""
    from redact_secrets.generator import generate_secret_fields
    from redact_secrets.schema import load_schema

    settings = _settings(artifact_path=output, directive=directive)

    try:
        document = load_schema(schema)
        fields = generate_secret_fields(document, settings.artifact_path, settings.directive)
    except (SchemaLoadError, ArtifactWriteError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    console.print(
        f"[green]Wrote {len(fields)} redacted field(s) to {settings.artifact_path}[/green]"
    )


@app.command()
def show(
    artifact: Path | None = typer.Option(None, "--artifact", "-a", help="Artifact to read"),
) -> None:
    """Show the field names in a redaction artifact."""
    from redact_secrets.registry import load_registry

    settings = _settings(artifact_path=artifact)
    try:
        registry = load_registry(settings)
    except RegistryLoadError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    if not registry:
        console.print(f"[yellow]No redacted fields in {settings.artifact_path}.[/yellow]")
        return

    table = Table(title="Redacted Fields", min_width=40)
    table.add_column("Field", style="cyan")
    for name in registry:
        table.add_row(name)
    console.print(table)


@app.command()
def redact(
    payload: Path | None = typer.Argument(
        None, help="JSON payload file (reads stdin when omitted or '-')"
    ),
    artifact: Path | None = typer.Option(None, "--artifact", "-a", help="Artifact to read"),
) -> None:
    """Print a JSON payload with its secret fields redacted."""
    from redact_secrets.engine import redact_fields_in_map
    from redact_secrets.registry import load_registry
    from redact_secrets.values import decode_payload

    settings = _settings(artifact_path=artifact)
    try:
        registry = load_registry(settings)
        if payload is None or str(payload) == "-":
            raw = sys.stdin.read()
        else:
            raw = payload.read_text(encoding="utf-8")
        data = decode_payload(raw)
    except (RegistryLoadError, PayloadDecodeError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    print(json.dumps(redact_fields_in_map(data, registry), indent=2))


@app.command()
def config(
    show: bool = typer.Option(False, "--show", help="Show current configuration"),
    init: bool = typer.Option(False, "--init", help="Initialize default configuration"),
) -> None:
    """Manage redact-secrets configuration."""
    config_file = get_config_file()
    config_dir = config_file.parent

    if show:
        if config_file.exists():
            console.print(config_file.read_text())
        else:
            console.print("[yellow]No configuration file found.[/yellow]")
            console.print(f"Run 'redact-secrets config --init' to create one at {config_file}")
        return

    if init:
        config_dir.mkdir(parents=True, exist_ok=True)
        default_config = """\
# redact-secrets configuration

defaults:
  # Where 'generate' writes and 'show'/'redact' read the field registry
  artifact_path: redacted_fields_gen.yaml
  # Schema directive that marks a field as secret
  directive: redactSecrets
  log_level: WARNING
"""
        config_file.write_text(default_config)
        console.print(f"[green]Created configuration at {config_file}[/green]")
        return

    console.print("Usage: redact-secrets config [--show | --init]")


@app.command()
def version() -> None:
    """Show version information."""
    from redact_secrets import __version__

    console.print(f"redact-secrets v{__version__}")


if __name__ == "__main__":
    app()
