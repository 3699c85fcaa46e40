"""
Token document loading.

Reads the manifest and token documents from a tokens directory and merges
them into a :class:`~tokencss.core.store.TokenStore`. Any failure here is
fatal to the generation run.

Default layout:
    {tokens_dir}/manifest.json
    {tokens_dir}/<document id>          (JSON token documents)
    {tokens_dir}/set.<name>.tokens.json (size sets)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ErrorContext, ManifestError, TokenDocumentError
from .manifest import STORE_COLLECTIONS, Manifest
from .store import TokenStore, merge_documents

logger = logging.getLogger(__name__)

MANIFEST_FILE = "manifest.json"
SIZE_SET_GLOB = "set.*.tokens.json"


class TokenSource:
    """Token documents under one directory, parsed at most once each."""

    def __init__(self, tokens_dir: Path, manifest_file: str = MANIFEST_FILE) -> None:
        self.tokens_dir = Path(tokens_dir)
        self.manifest_file = manifest_file
        self._documents: dict[str, dict[str, Any]] = {}

    # =========================================================================
    # Manifest
    # =========================================================================

    def read_manifest(self) -> Manifest:
        """Load and validate the manifest.

        Raises:
            ManifestError: If the file is missing, not JSON, or malformed.
        """
        manifest_path = self.tokens_dir / self.manifest_file
        if not manifest_path.exists():
            raise ManifestError(f"Manifest not found: {manifest_path}")

        try:
            data = json.loads(manifest_path.read_text(encoding="utf-8"))
            return Manifest.model_validate(data)
        except json.JSONDecodeError as e:
            raise ManifestError(f"Invalid JSON in {manifest_path}: {e}") from e
        except ValidationError as e:
            raise ManifestError(f"Invalid manifest schema in {manifest_path}: {e}") from e

    # =========================================================================
    # Documents
    # =========================================================================

    def read_document(
        self,
        document_id: str,
        *,
        collection: str | None = None,
        mode: str | None = None,
    ) -> dict[str, Any]:
        """Load one token document by id (path relative to the tokens directory).

        Raises:
            TokenDocumentError: If the document is missing or not a JSON object.
        """
        if document_id in self._documents:
            return self._documents[document_id]

        path = self.tokens_dir / document_id
        context = ErrorContext(file=path, collection=collection, mode=mode)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TokenDocumentError("Token document not found", context) from e
        except OSError as e:
            raise TokenDocumentError(f"Cannot read token document: {e}", context) from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise TokenDocumentError(f"Invalid JSON: {e}", context) from e

        if not isinstance(data, dict):
            raise TokenDocumentError(
                f"Token document must be a JSON object, got {type(data).__name__}", context
            )

        logger.debug(f"Loaded token document {path}")
        self._documents[document_id] = data
        return data

    def load_store(self, manifest: Manifest) -> TokenStore:
        """Merge every document of the palette, theme, token and effect collections."""
        documents = [
            self.read_document(document_id, collection=collection, mode=mode)
            for collection, mode, document_id in manifest.iter_documents(STORE_COLLECTIONS)
        ]
        store = merge_documents(documents)
        logger.info(f"Merged {len(documents)} token documents into {len(store)} namespaces")
        return store

    def size_set_documents(self, pattern: str = SIZE_SET_GLOB) -> list[tuple[str, dict[str, Any]]]:
        """
        Load every size-set document.

        Returns:
            ``(set name, document)`` pairs sorted by file name, where the set
            name is the file name without the ``set.`` prefix and the
            ``.tokens.json`` suffix.
        """
        sets: list[tuple[str, dict[str, Any]]] = []
        for path in sorted(self.tokens_dir.glob(pattern)):
            name = path.name.removeprefix("set.").removesuffix(".tokens.json")
            sets.append((name, self.read_document(path.name)))
        return sets
