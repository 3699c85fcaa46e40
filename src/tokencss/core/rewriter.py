"""
Text-level reference rewriting over generated CSS.

This is the second resolution path. It runs on the rendered stylesheet,
after every section has been assembled, and replaces each remaining
``{reference}`` with the value it names. It differs from the structured
resolver in three ways:

- a missing path segment such as ``foo-bar`` is retried as ``foo.bar``;
- ``{--name}`` becomes ``var(--name)``;
- there is no depth ceiling; only a reference that re-enters itself is
  stopped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from .css import format_css_value
from .diagnostics import DiagnosticKind, DiagnosticLog
from .materializer import render_shadow
from .tokens import SHADOW, has_value_field, is_reference, token_type, token_value, walk_path

logger = logging.getLogger(__name__)

# No braces and no line breaks inside, so multi-line rule bodies never match.
REFERENCE_PATTERN = re.compile(r"\{([^{}\n]+)\}")

CUSTOM_PROPERTY_PREFIX = "--"


class TextReferenceRewriter:
    """Rewrites ``{reference}`` occurrences in text using a token store."""

    def __init__(self, store: Mapping[str, Any], diagnostics: DiagnosticLog | None = None) -> None:
        self.store = store
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()

    def rewrite(self, text: str) -> str:
        return self._rewrite(text, frozenset())

    def _rewrite(self, text: str, active: frozenset[str]) -> str:
        return REFERENCE_PATTERN.sub(lambda match: self._replace(match, active), text)

    def _replace(self, match: re.Match[str], active: frozenset[str]) -> str:
        original = match.group(0)
        reference = match.group(1)

        if reference in active:
            self.diagnostics.emit(
                DiagnosticKind.REFERENCE_CYCLE,
                original,
                f"CSS reference cycle through: {reference}",
            )
            return original

        walk = walk_path(self.store, reference.split("."), dash_fallback=True)
        node = walk.node
        nested = active | {reference}

        if walk.found and has_value_field(node):
            value = token_value(node)
            if is_reference(value):
                return self._rewrite(value, nested)
            if token_type(node) == SHADOW:
                return format_css_value(render_shadow(value))
            return format_css_value(value)

        if reference.startswith(CUSTOM_PROPERTY_PREFIX):
            return f"var({reference})"

        if walk.found and isinstance(node, str):
            if is_reference(node):
                return self._rewrite(node, nested)
            return node

        if walk.found:
            message = f"CSS reference has no usable value: {reference}"
        else:
            message = f"CSS reference not found: {reference}"
        self.diagnostics.emit(
            DiagnosticKind.UNRESOLVED_TEXT_REFERENCE,
            original,
            message,
            path=walk.path,
        )
        return original


def rewrite_references(
    text: str,
    store: Mapping[str, Any],
    diagnostics: DiagnosticLog | None = None,
) -> str:
    """Rewrite every ``{reference}`` in ``text``; see :class:`TextReferenceRewriter`."""
    return TextReferenceRewriter(store, diagnostics).rewrite(text)
