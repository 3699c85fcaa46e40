"""
Token document primitives shared by the resolution engine.

A token leaf is a mapping carrying a type and a value. Documents in the
W3C DTCG layout spell these ``$type`` / ``$value``; the unprefixed
``type`` / ``value`` spelling is accepted as well.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

TYPE_KEYS = ("$type", "type")

COLOR = "color"
SHADOW = "shadow"


def _first_key(node: Mapping[str, Any], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        if key in node:
            return key
    return None


def _value_key(node: Mapping[str, Any]) -> str | None:
    if "$value" in node:
        return "$value"
    # bare "value" is a group name unless the node is typed
    if "value" in node and isinstance(token_type(node), str):
        return "value"
    return None


def is_token_leaf(node: Any) -> bool:
    """True if ``node`` is a mapping with both a type and a value field."""
    if not isinstance(node, Mapping):
        return False
    # a group that happens to be called "type" is not a type field
    if not isinstance(token_type(node), str):
        return False
    return _value_key(node) is not None


def has_value_field(node: Any) -> bool:
    return isinstance(node, Mapping) and _value_key(node) is not None


def token_type(node: Mapping[str, Any]) -> Any:
    key = _first_key(node, TYPE_KEYS)
    return node[key] if key else None


def token_value(node: Mapping[str, Any]) -> Any:
    key = _value_key(node)
    return node[key] if key else None


def is_reference(value: Any) -> bool:
    """True for bracketed reference strings such as ``{color.blue.500}``."""
    return isinstance(value, str) and len(value) >= 2 and value.startswith("{") and value.endswith("}")


def reference_path(reference: str) -> list[str]:
    """Dotted path segments of a bracketed or bare reference."""
    if is_reference(reference):
        reference = reference[1:-1]
    return reference.split(".")


@dataclass(frozen=True)
class WalkResult:
    """Outcome of walking a dotted path through a token tree."""

    found: bool
    node: Any
    path: tuple[str, ...]


def _child(node: Any, name: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(name)
    return None


def walk_path(root: Mapping[str, Any], parts: list[str], *, dash_fallback: bool = False) -> WalkResult:
    """
    Walk ``parts`` segment by segment from ``root``.

    With ``dash_fallback`` a missing segment such as ``foo-bar`` is retried
    as the pair ``foo`` / ``bar`` (split at the first dash).

    Returns:
        WalkResult; on failure ``path`` holds the segments walked up to and
        including the missing one.
    """
    node: Any = root
    walked: list[str] = []
    for part in parts:
        walked.append(part)
        child = _child(node, part)
        if child is None and dash_fallback and "-" in part:
            parent, sub = part.split("-", 1)
            child = _child(_child(node, parent), sub)
        if child is None:
            return WalkResult(found=False, node=None, path=tuple(walked))
        node = child
    return WalkResult(found=True, node=node, path=tuple(walked))
