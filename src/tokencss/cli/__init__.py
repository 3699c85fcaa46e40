"""
tokencss CLI package.

- build.py: stylesheet generation
- inspect.py: flatten / resolve inspection commands
- utils.py: shared utilities (version, logging, config discovery)
"""

import typer

from tokencss.cli.build import build_command
from tokencss.cli.inspect import flatten_command, resolve_command
from tokencss.cli.utils import version_callback

app = typer.Typer(
    help="""tokencss – design tokens to CSS custom properties

Commands:
  • build: write theme-variables.css from a design-tokens directory
  • flatten: show the variables one token document produces
  • resolve: follow a {reference} through the merged tokens
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """tokencss CLI main callback for global options."""
    pass


app.command(name="build")(build_command)
app.command(name="flatten")(flatten_command)
app.command(name="resolve")(resolve_command)


def main() -> None:
    app()


__all__ = ["app", "main"]
