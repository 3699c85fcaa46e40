"""
tokencss CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer

from tokencss import __version__
from tokencss.config import GeneratorConfig, default_log_level, find_config, load_config


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tokencss version {__version__}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else default_log_level()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def resolve_config(config_path: str | None, tokens_dir: str | None) -> GeneratorConfig:
    """Build the generator config from an explicit or discovered ``tokencss.toml``.

    ``--tokens-dir`` wins over the file.

    Raises:
        ConfigError: If the config file is invalid.
    """
    path = Path(config_path) if config_path else find_config(Path.cwd())
    config = load_config(path) if path else GeneratorConfig()
    return config.with_overrides(tokens_dir=Path(tokens_dir) if tokens_dir else None)
