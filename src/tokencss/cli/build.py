"""
Stylesheet build command.
"""

from pathlib import Path

import typer

from tokencss.cli.utils import configure_logging, resolve_config
from tokencss.core.errors import TokenCSSError
from tokencss.core.loader import TokenSource
from tokencss.generator import ThemeCSSGenerator, write_css


def build_command(
    tokens_dir: str | None = typer.Option(
        None, "--tokens-dir", "-t", help="Design tokens directory (holds manifest.json)"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="CSS file to write"),
    config: str | None = typer.Option(
        None, "--config", "-c", help="Config file (default: ./tokencss.toml if present)"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with code 2 if any reference stays unresolved"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Debug logging"),
) -> None:
    """Generate the theme stylesheet from the design tokens."""
    configure_logging(verbose)

    try:
        settings = resolve_config(config, tokens_dir)
        settings = settings.with_overrides(output=Path(output) if output else None)
        source = TokenSource(settings.tokens_dir, settings.manifest_file)
        result = ThemeCSSGenerator(source, settings).generate()
    except TokenCSSError as e:
        typer.echo(f"Build failed: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        written = write_css(result.css, settings.output)
    except OSError as e:
        typer.echo(f"Could not write {settings.output}: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"✓ Wrote {written}")

    if result.diagnostics:
        counts = ", ".join(f"{kind}: {n}" for kind, n in result.diagnostics.counts().items())
        typer.echo(f"⚠ {len(result.diagnostics)} unresolved reference(s) ({counts})", err=True)
        if strict:
            raise typer.Exit(code=2)
