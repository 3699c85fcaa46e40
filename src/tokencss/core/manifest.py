"""
Token manifest types.

The manifest (``manifest.json`` in the tokens directory) lists, per
collection and per mode, the token documents that belong to it:

    {"collections": {"theme": {"modes": {"💙 Blue": ["theme.blue.tokens.json"]}}}}
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from .errors import ManifestError

THEME = "theme"
PALETTE = "palette"
TOKEN = "token"
EFFECT = "effect"

# Merge order of collections into the token store
STORE_COLLECTIONS = (PALETTE, THEME, TOKEN, EFFECT)


class Collection(BaseModel):
    """One manifest collection: mode name → ordered document ids."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    modes: dict[str, list[str]] = Field(default_factory=dict)

    def documents(self, mode: str) -> list[str]:
        """Document ids for ``mode``."""
        if mode not in self.modes:
            raise ManifestError(f"Mode '{mode}' not declared (known: {', '.join(self.modes) or 'none'})")
        return self.modes[mode]

    def first_document(self, mode: str) -> str:
        documents = self.documents(mode)
        if not documents:
            raise ManifestError(f"Mode '{mode}' lists no documents")
        return documents[0]


class Manifest(BaseModel):
    """Top-level token manifest."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    collections: dict[str, Collection] = Field(default_factory=dict)

    def collection(self, name: str) -> Collection:
        if name not in self.collections:
            raise ManifestError(f"Collection '{name}' not declared in manifest")
        return self.collections[name]

    def optional_collection(self, name: str) -> Collection | None:
        return self.collections.get(name)

    def iter_documents(self, names: tuple[str, ...] = STORE_COLLECTIONS) -> Iterator[tuple[str, str, str]]:
        """
        Yield ``(collection, mode, document id)`` for the given collections.

        Collections are visited in the order given, modes and documents in
        manifest order. Missing collections other than ``effect`` raise
        ManifestError.
        """
        for name in names:
            collection = self.optional_collection(name) if name == EFFECT else self.collection(name)
            if collection is None:
                continue
            for mode, documents in collection.modes.items():
                for document in documents:
                    yield name, mode, document
