"""
Generator configuration loaded from a ``tokencss.toml`` file.

Example::

    [tokencss]
    tokens_dir = "design-tokens"
    output = "theme-variables.css"
    default_theme = "💙 Blue"
    status_families = ["red", "green", "yellow", "blue"]

    [tokencss.theme_markers]
    "💙" = "blue"
    "💜" = "purple"

Relative paths are resolved against the directory holding the file.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from .core.errors import ConfigError, ErrorContext
from .core.loader import MANIFEST_FILE, SIZE_SET_GLOB

logger = logging.getLogger(__name__)

CONFIG_FILE = "tokencss.toml"
CONFIG_TABLE = "tokencss"

LOG_LEVEL_ENV = "LOG_LEVEL"


def _default_theme_markers() -> dict[str, str]:
    return {"💙": "blue", "💜": "purple", "🧡": "orange", "🩵": "sky"}


@dataclass
class GeneratorConfig:
    """Where the tokens live and how the stylesheet sections are built."""

    tokens_dir: Path = Path("design-tokens")
    output: Path = Path("theme-variables.css")
    manifest_file: str = MANIFEST_FILE

    # Theme colors: default :root theme and mode name → data-theme-color key
    default_theme: str = "💙 Blue"
    theme_markers: dict[str, str] = field(default_factory=_default_theme_markers)
    fallback_theme_key: str = "blue"

    # Brand palette families copied into the default theme block
    status_palette: str = "brand"
    status_families: list[str] = field(
        default_factory=lambda: ["red", "green", "yellow", "blue", "sky", "purple", "orange"]
    )
    alpha_families: list[str] = field(default_factory=lambda: ["blue", "purple", "orange", "sky"])

    # Palette-type blocks
    palette_modes: list[str] = field(default_factory=lambda: ["brand", "neutral"])
    palette_families: list[str] = field(default_factory=lambda: ["neutral"])

    effect_styles_file: str = "effect.styles.tokens.json"
    effect_prefix: str = "effect"
    size_set_glob: str = SIZE_SET_GLOB

    def theme_key(self, mode_name: str) -> str:
        """Map a theme mode name such as ``"💜 Purple"`` to its selector key."""
        for marker, key in self.theme_markers.items():
            if marker in mode_name:
                return key
        return self.fallback_theme_key

    def with_overrides(self, **overrides: Any) -> GeneratorConfig:
        """Copy with the non-None overrides applied (used for CLI options)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


_PATH_FIELDS = {"tokens_dir", "output"}
_LIST_FIELDS = {"status_families", "alpha_families", "palette_modes", "palette_families"}


def load_config(path: Path) -> GeneratorConfig:
    """
    Load the ``[tokencss]`` table of a TOML file.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings.
    """
    context = ErrorContext(file=path)
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError("Config file not found", context) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", context) from e

    table = data.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{CONFIG_TABLE}] must be a table", context)

    known = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(unknown)}", context)

    values: dict[str, Any] = {}
    for name, value in table.items():
        if name in _PATH_FIELDS:
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string path", context)
            value = (path.parent / value).resolve()
        elif name in _LIST_FIELDS:
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"{name} must be a list of strings", context)
        elif name == "theme_markers":
            if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
                raise ConfigError("theme_markers must map markers to keys", context)
        elif not isinstance(value, str):
            raise ConfigError(f"{name} must be a string", context)
        values[name] = value

    logger.debug(f"Loaded config from {path}: {sorted(values)}")
    return GeneratorConfig(**values)


def find_config(start: Path) -> Path | None:
    """Return ``start/tokencss.toml`` if it exists."""
    candidate = start / CONFIG_FILE
    return candidate if candidate.exists() else None


def default_log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
