"""
Value materialization: typed token leaf → emitted value.

Only ``color`` leaves are resolved here. ``shadow`` leaves are assembled
into a CSS box-shadow list, and every other type passes through as is;
references they still carry are picked up later by the text rewriter.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from .css import format_css_value
from .diagnostics import DiagnosticLog
from .resolver import ReferenceResolver
from .tokens import COLOR, SHADOW, token_type, token_value

logger = logging.getLogger(__name__)

Scalar = str | int | float


class ShadowLayer(BaseModel):
    """One layer of a composite shadow value."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    offset_x: Scalar = Field(default="0px", alias="offsetX")
    offset_y: Scalar = Field(default="0px", alias="offsetY")
    blur: Scalar = Field(default="0px")
    spread: Scalar = Field(default="0px")
    color: Scalar = Field(default="transparent")

    @field_validator("offset_x", "offset_y", "blur", "spread", "color", mode="before")
    @classmethod
    def _empty_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        # "", 0 and null all fall back to the field default
        if not value:
            return cls.model_fields[info.field_name].default
        return value

    def to_css(self) -> str:
        parts = (self.offset_x, self.offset_y, self.blur, self.spread, self.color)
        return " ".join(format_css_value(part) for part in parts)


def render_shadow(value: Any) -> Any:
    """
    Render a shadow token value.

    Lists are rendered layer by layer and joined with ``", "``: strings pass
    through, mappings become ``"x y blur spread color"``, anything else
    (including a mapping that is not a valid layer) becomes ``"none"``.
    Non-list values are returned verbatim.
    """
    if not isinstance(value, list):
        return value

    rendered: list[str] = []
    for layer in value:
        if isinstance(layer, str):
            rendered.append(layer)
        elif isinstance(layer, Mapping):
            try:
                rendered.append(ShadowLayer.model_validate(layer).to_css())
            except ValidationError as e:
                logger.debug(f"Unrenderable shadow layer {layer!r}: {e}")
                rendered.append("none")
        else:
            rendered.append("none")
    return ", ".join(rendered)


def materialize(
    leaf: Mapping[str, Any],
    store: Mapping[str, Any],
    diagnostics: DiagnosticLog | None = None,
    resolver: ReferenceResolver | None = None,
) -> Any:
    """
    Convert a token leaf into its emitted value.

    Args:
        leaf: Mapping with a type and a value field.
        store: Lookup root for color references.
        diagnostics: Where unresolved references are reported.
        resolver: Resolver to reuse across many leaves; built on demand.

    Returns:
        Resolved color, rendered shadow, or the raw value for other types.
    """
    kind = token_type(leaf)
    value = token_value(leaf)

    if kind == COLOR:
        if resolver is None:
            resolver = ReferenceResolver(store, diagnostics)
        return resolver.resolve(value)
    if kind == SHADOW:
        return render_shadow(value)
    return value
