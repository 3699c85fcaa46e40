"""
Token resolution engine.

- store: merged read-only token store
- resolver: structured reference resolution
- materializer: typed leaf → emitted value
- flattener: nested namespaces → dash-joined keys
- rewriter: reference rewriting over rendered CSS text
"""

from .diagnostics import Diagnostic, DiagnosticKind, DiagnosticLog
from .errors import ConfigError, ManifestError, TokenCSSError, TokenDocumentError
from .flattener import flatten
from .materializer import ShadowLayer, materialize, render_shadow
from .resolver import MAX_REFERENCE_DEPTH, ReferenceResolver, resolve_reference
from .rewriter import TextReferenceRewriter, rewrite_references
from .store import TokenStore, merge_documents

__all__ = [
    "MAX_REFERENCE_DEPTH",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLog",
    "ManifestError",
    "ReferenceResolver",
    "ShadowLayer",
    "TextReferenceRewriter",
    "TokenCSSError",
    "TokenDocumentError",
    "TokenStore",
    "flatten",
    "materialize",
    "merge_documents",
    "render_shadow",
    "resolve_reference",
    "rewrite_references",
]
