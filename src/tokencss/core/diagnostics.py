"""
Non-fatal diagnostics produced while resolving token references.

Every diagnostic is both appended to a :class:`DiagnosticLog` (so callers
and tests can inspect what went wrong) and logged as a warning.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

logger = logging.getLogger(__name__)


class DiagnosticKind(StrEnum):
    """Why a reference could not be resolved."""

    MISSING_SEGMENT = "missing_segment"
    MALFORMED_TERMINAL = "malformed_terminal"
    DEPTH_EXCEEDED = "depth_exceeded"
    REFERENCE_CYCLE = "reference_cycle"
    UNRESOLVED_TEXT_REFERENCE = "unresolved_text_reference"


@dataclass(frozen=True)
class Diagnostic:
    """A single unresolved reference report."""

    kind: DiagnosticKind
    reference: str
    message: str
    path: tuple[str, ...] = ()

    def format(self) -> str:
        text = f"[{self.kind}] {self.message}"
        if self.path:
            text += f" (walked: {'.'.join(self.path)})"
        return text


class DiagnosticLog:
    """Ordered collection of diagnostics for one generation run."""

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def emit(
        self,
        kind: DiagnosticKind,
        reference: str,
        message: str,
        path: tuple[str, ...] = (),
    ) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, reference=reference, message=message, path=path)
        self._items.append(diagnostic)
        logger.warning(diagnostic.format())
        return diagnostic

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self._items if d.kind == kind]

    def counts(self) -> dict[str, int]:
        """Number of diagnostics per kind, in first-seen order."""
        return dict(Counter(d.kind.value for d in self._items))

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"DiagnosticLog(diagnostics={len(self._items)})"
