"""
Structured reference resolution.

Resolves ``{a.b.c}`` reference strings against a token store, following
chains of references through token values. Resolution never raises: an
unresolvable chain is reported as a diagnostic and the caller gets the
reference it passed in back unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .diagnostics import DiagnosticKind, DiagnosticLog
from .tokens import COLOR, is_reference, reference_path, token_type, token_value, walk_path

logger = logging.getLogger(__name__)

MAX_REFERENCE_DEPTH = 10


class _Unresolved(Exception):
    """Internal signal that unwinds a failed chain back to the caller."""


class ReferenceResolver:
    """
    Follows reference chains through a token store.

    Besides the depth ceiling, the resolver remembers which references are
    on the current chain, so a cycle fails on its first repetition instead
    of running into the ceiling.
    """

    def __init__(
        self,
        store: Mapping[str, Any],
        diagnostics: DiagnosticLog | None = None,
        max_depth: int = MAX_REFERENCE_DEPTH,
    ) -> None:
        self.store = store
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self.max_depth = max_depth

    def resolve(self, value: Any, depth: int = 0) -> Any:
        """
        Resolve ``value`` to the literal at the end of its reference chain.

        Args:
            value: Raw token value; only bracketed strings are looked up.
            depth: Starting depth, for callers resuming a chain.

        Returns:
            The resolved value, or ``value`` itself if it is not a
            reference or the chain could not be resolved.
        """
        try:
            return self._resolve(value, depth, ())
        except _Unresolved:
            return value

    def _resolve(self, value: Any, depth: int, chain: tuple[str, ...]) -> Any:
        if not is_reference(value):
            return value

        if depth > self.max_depth:
            self.diagnostics.emit(
                DiagnosticKind.DEPTH_EXCEEDED,
                value,
                f"Reference depth exceeded ({self.max_depth}): {value}",
            )
            raise _Unresolved

        if value in chain:
            cycle = " -> ".join((*chain[chain.index(value) :], value))
            self.diagnostics.emit(
                DiagnosticKind.REFERENCE_CYCLE,
                value,
                f"Reference cycle: {cycle}",
            )
            raise _Unresolved

        walk = walk_path(self.store, reference_path(value))
        if not walk.found:
            self.diagnostics.emit(
                DiagnosticKind.MISSING_SEGMENT,
                value,
                f"Reference not found: {value[1:-1]}",
                path=walk.path,
            )
            raise _Unresolved

        node = walk.node
        chain = (*chain, value)
        if isinstance(node, Mapping):
            raw = token_value(node)
            if raw:
                return self._resolve(raw, depth + 1, chain)
            if token_type(node) == COLOR:
                return raw
        elif isinstance(node, str):
            return self._resolve(node, depth + 1, chain)

        self.diagnostics.emit(
            DiagnosticKind.MALFORMED_TERMINAL,
            value,
            f"Reference does not point at a token value: {value[1:-1]} ({type(node).__name__})",
            path=walk.path,
        )
        raise _Unresolved


def resolve_reference(
    value: Any,
    store: Mapping[str, Any],
    depth: int = 0,
    diagnostics: DiagnosticLog | None = None,
) -> Any:
    """Resolve one value against ``store``; see :meth:`ReferenceResolver.resolve`."""
    return ReferenceResolver(store, diagnostics).resolve(value, depth)
