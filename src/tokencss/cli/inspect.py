"""
Token inspection commands.

- flatten: show the flattened variables of one token document
- resolve: follow one reference through the merged token store
"""

import json

import typer
import yaml

from tokencss.cli.utils import configure_logging, resolve_config
from tokencss.core.diagnostics import DiagnosticLog
from tokencss.core.errors import TokenCSSError
from tokencss.core.flattener import flatten
from tokencss.core.loader import TokenSource
from tokencss.core.resolver import ReferenceResolver

OUTPUT_FORMATS = ("json", "yaml")


def _load(config: str | None, tokens_dir: str | None):
    settings = resolve_config(config, tokens_dir)
    source = TokenSource(settings.tokens_dir, settings.manifest_file)
    store = source.load_store(source.read_manifest())
    return source, store


def flatten_command(
    document: str = typer.Argument(..., help="Document id, relative to the tokens directory"),
    prefix: str = typer.Option("", "--prefix", "-p", help="Key prefix"),
    output_format: str = typer.Option("json", "--format", "-f", help="json | yaml"),
    tokens_dir: str | None = typer.Option(None, "--tokens-dir", "-t", help="Design tokens directory"),
    config: str | None = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Debug logging"),
) -> None:
    """Print the flattened variables of one token document."""
    configure_logging(verbose)
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format '{output_format}' (use json or yaml)", err=True)
        raise typer.Exit(code=1)

    try:
        source, store = _load(config, tokens_dir)
        tokens = flatten(source.read_document(document), prefix, store, DiagnosticLog())
    except TokenCSSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == "yaml":
        typer.echo(yaml.dump(tokens, default_flow_style=False, sort_keys=False, allow_unicode=True))
    else:
        typer.echo(json.dumps(tokens, indent=2, ensure_ascii=False))


def resolve_command(
    reference: str = typer.Argument(..., help="Reference such as {color.blue.500}"),
    tokens_dir: str | None = typer.Option(None, "--tokens-dir", "-t", help="Design tokens directory"),
    config: str | None = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Debug logging"),
) -> None:
    """Resolve one reference against the merged token store."""
    configure_logging(verbose)
    if not reference.startswith("{"):
        reference = "{" + reference + "}"

    try:
        _source, store = _load(config, tokens_dir)
    except TokenCSSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    diagnostics = DiagnosticLog()
    value = ReferenceResolver(store, diagnostics).resolve(reference)
    typer.echo(f"{reference} → {value}")

    if diagnostics:
        for diagnostic in diagnostics:
            typer.echo(f"  {diagnostic.format()}")
        raise typer.Exit(code=1)
