"""
CSS text helpers for emitting custom properties.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def format_css_value(value: Any) -> str:
    """Render a token value as CSS text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def css_declarations(tokens: Mapping[str, Any], indent: int = 2) -> str:
    """
    Render flat tokens as custom property declarations.

    Args:
        tokens: Flat key → value mapping (keys without the ``--`` prefix).
        indent: Number of spaces before each declaration.

    Returns:
        One ``--key: value;`` line per token, each ending in a newline.
    """
    prefix = " " * indent
    return "".join(f"{prefix}--{key}: {format_css_value(value)};\n" for key, value in tokens.items())


def rule_block(selector: str, body: str, comment: str | None = None) -> str:
    """Wrap declarations in ``selector { ... }``, optionally preceded by a comment."""
    lines: list[str] = []
    if comment:
        lines.append(f"/* {comment} */\n")
    lines.append(f"{selector} {{\n")
    lines.append(body)
    lines.append("}\n")
    return "".join(lines)


def comment_line(text: str, indent: int = 2) -> str:
    return f"{' ' * indent}/* {text} */\n"
