"""
Flattening of nested token namespaces into dash-joined keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .diagnostics import DiagnosticLog
from .materializer import materialize
from .resolver import ReferenceResolver
from .store import TokenStore
from .tokens import is_token_leaf


def flatten(
    namespace: Mapping[str, Any],
    prefix: str = "",
    store: Mapping[str, Any] | None = None,
    diagnostics: DiagnosticLog | None = None,
    resolver: ReferenceResolver | None = None,
) -> dict[str, Any]:
    """
    Flatten a token namespace depth-first, in insertion order.

    ``{"blue": {"500": leaf}}`` with prefix ``"color"`` becomes
    ``{"color-blue-500": materialize(leaf)}``. Nodes that are neither a
    token leaf nor a nested mapping are skipped without a diagnostic.

    Args:
        namespace: Nested token mapping.
        prefix: Key prefix for every emitted entry.
        store: Lookup root for references (empty store if omitted).
        diagnostics: Where unresolved references are reported.
        resolver: Resolver shared across leaves; built from ``store`` if omitted.

    Returns:
        Flat key → materialized value, in traversal order. When two paths
        flatten to the same key the later value wins and the key keeps its
        first position.
    """
    if resolver is None:
        resolver = ReferenceResolver(store if store is not None else TokenStore.empty(), diagnostics)
    result: dict[str, Any] = {}
    _flatten_into(result, namespace, prefix, resolver)
    return result


def _flatten_into(
    result: dict[str, Any],
    namespace: Mapping[str, Any],
    prefix: str,
    resolver: ReferenceResolver,
) -> None:
    for name, node in namespace.items():
        key = f"{prefix}-{name}" if prefix else str(name)
        if is_token_leaf(node):
            result[key] = materialize(node, resolver.store, resolver=resolver)
        elif isinstance(node, Mapping):
            _flatten_into(result, node, key, resolver)
