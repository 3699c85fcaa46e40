"""
Token store: the merged, read-only lookup root for reference resolution.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any


class TokenStore(Mapping[str, Any]):
    """Top-level namespace name → token namespace, in merge order."""

    def __init__(self, namespaces: Mapping[str, Any] | None = None) -> None:
        self._data = MappingProxyType(dict(namespaces or {}))

    @classmethod
    def empty(cls) -> TokenStore:
        return cls()

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"TokenStore(namespaces={list(self._data)})"


def merge_documents(documents: Iterable[Mapping[str, Any]]) -> TokenStore:
    """
    Merge token documents into one store.

    The merge is shallow: each document's top-level keys are assigned in
    order, so a later document replaces an earlier document's namespace of
    the same name wholesale. No conflict is reported.
    """
    merged: dict[str, Any] = {}
    for document in documents:
        for name, namespace in document.items():
            merged[name] = namespace
    return TokenStore(merged)
