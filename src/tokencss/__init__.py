"""
tokencss - design token resolution and CSS custom property generation.

Resolves DTCG-style token documents (colors, shadows, dimensions, effects)
with ``{a.b.c}`` cross-references into flat CSS variables.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .core import (
    DiagnosticLog,
    TokenCSSError,
    TokenStore,
    flatten,
    materialize,
    merge_documents,
    resolve_reference,
    rewrite_references,
)
from .generator import GenerationResult, ThemeCSSGenerator, generate_css, write_css

try:
    __version__ = version("tokencss")
except PackageNotFoundError:
    # running from a source checkout that was never installed
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "DiagnosticLog",
    "GenerationResult",
    "ThemeCSSGenerator",
    "TokenCSSError",
    "TokenStore",
    "flatten",
    "generate_css",
    "materialize",
    "merge_documents",
    "resolve_reference",
    "rewrite_references",
    "write_css",
]
