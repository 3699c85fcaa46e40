"""
Theme stylesheet generator.

Builds ``theme-variables.css`` from a tokens directory. The sections are
emitted in a fixed order, because a custom property declared again later
in the file wins over the earlier declaration:

1. theme colors (default ``:root`` theme, then one block per theme mode)
2. light mode
3. dark mode
4. palette types
5. effect styles
6. size sets

The assembled text then goes through the text reference rewriter, which
replaces any ``{reference}`` the sections still contain.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import GeneratorConfig
from .core.css import comment_line, css_declarations, format_css_value, rule_block
from .core.diagnostics import DiagnosticLog
from .core.flattener import flatten
from .core.loader import TokenSource
from .core.manifest import PALETTE, THEME, TOKEN, Manifest
from .core.resolver import ReferenceResolver
from .core.rewriter import TextReferenceRewriter
from .core.store import TokenStore
from .core.tokens import COLOR, token_type, token_value

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Generated stylesheet and the diagnostics collected on the way."""

    css: str
    diagnostics: DiagnosticLog


class ThemeCSSGenerator:
    """Generates the theme stylesheet for one tokens directory."""

    def __init__(self, source: TokenSource, config: GeneratorConfig | None = None) -> None:
        self.source = source
        self.config = config or GeneratorConfig()
        self.diagnostics = DiagnosticLog()
        self._manifest: Manifest | None = None
        self._store: TokenStore | None = None
        self._resolver: ReferenceResolver | None = None

    @property
    def manifest(self) -> Manifest:
        if self._manifest is None:
            self._manifest = self.source.read_manifest()
        return self._manifest

    @property
    def store(self) -> TokenStore:
        if self._store is None:
            self._store = self.source.load_store(self.manifest)
        return self._store

    @property
    def resolver(self) -> ReferenceResolver:
        if self._resolver is None:
            self._resolver = ReferenceResolver(self.store, self.diagnostics)
        return self._resolver

    def _flatten(self, document: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
        return flatten(document, prefix, resolver=self.resolver)

    def _document(self, collection: str, mode: str) -> dict[str, Any]:
        document_id = self.manifest.collection(collection).first_document(mode)
        return self.source.read_document(document_id, collection=collection, mode=mode)

    # =========================================================================
    # Sections
    # =========================================================================

    def theme_color_section(self) -> str:
        """Default theme in ``:root`` plus one block per theme mode."""
        config = self.config
        body = css_declarations(self._flatten(self._document(THEME, config.default_theme)))

        brand = self._document(PALETTE, config.status_palette)
        body += "\n" + comment_line("Status colors, shared by every theme")
        for family in config.status_families:
            body += css_declarations(_color_shades(brand.get(family), family))

        alpha = brand.get("alpha")
        if isinstance(alpha, Mapping):
            body += "\n" + comment_line("Alpha colors")
            for family in config.alpha_families:
                body += css_declarations(_color_shades(alpha.get(family), f"alpha-{family}"))

        blocks = [rule_block(":root", body, comment="Theme colors")]
        for mode_name in self.manifest.collection(THEME).modes:
            theme = self._document(THEME, mode_name)
            selector = f'[data-theme-color="{config.theme_key(mode_name)}"]'
            blocks.append(rule_block(selector, css_declarations(self._flatten(theme)), comment=mode_name))
        return "\n".join(blocks)

    def light_mode_section(self) -> str:
        tokens = self._flatten(self._document(TOKEN, "light"))
        return rule_block(":root", css_declarations(tokens), comment="Light mode")

    def dark_mode_section(self) -> str:
        tokens = self._flatten(self._document(TOKEN, "dark"))
        return rule_block('[data-theme-mode="dark"]', css_declarations(tokens), comment="Dark mode")

    def palette_section(self) -> str:
        """One ``[data-palette-type]`` block per palette mode, raw color values."""
        blocks: list[str] = []
        for mode in self.config.palette_modes:
            palette = self._document(PALETTE, mode)
            body = ""
            for family in self.config.palette_families:
                body += css_declarations(_color_shades(palette.get(family), family))
            blocks.append(
                rule_block(f'[data-palette-type="{mode}"]', body, comment=f"{mode.capitalize()} palette")
            )
        return "\n".join(blocks)

    def effect_section(self) -> str:
        effects = self.source.read_document(self.config.effect_styles_file)
        tokens = self._flatten(effects, self.config.effect_prefix)
        return rule_block(":root", css_declarations(tokens), comment="Effect styles")

    def size_set_section(self) -> str:
        body = ""
        for name, document in self.source.size_set_documents(self.config.size_set_glob):
            body += css_declarations(self._flatten(document, f"set-{name}")) + "\n"
        return rule_block(":root", body, comment="Size sets")

    # =========================================================================
    # Assembly
    # =========================================================================

    def generate(self) -> GenerationResult:
        """
        Build the full stylesheet.

        Raises:
            ManifestError: If the manifest or a required collection/mode is missing.
            TokenDocumentError: If a token document cannot be loaded.
        """
        sections = [
            self.theme_color_section(),
            self.light_mode_section(),
            self.dark_mode_section(),
            self.palette_section(),
            self.effect_section(),
            self.size_set_section(),
        ]
        css = "\n".join(sections)
        css = TextReferenceRewriter(self.store, self.diagnostics).rewrite(css)
        logger.info(f"Generated {css.count(';')} declarations, {len(self.diagnostics)} diagnostics")
        return GenerationResult(css=css, diagnostics=self.diagnostics)


def _color_shades(family: Any, prefix: str) -> dict[str, str]:
    """Raw ``$value`` of each color leaf directly under ``family``."""
    if not isinstance(family, Mapping):
        return {}
    return {
        f"{prefix}-{shade}": format_css_value(token_value(node))
        for shade, node in family.items()
        if isinstance(node, Mapping) and token_type(node) == COLOR
    }


def generate_css(tokens_dir: Path, config: GeneratorConfig | None = None) -> GenerationResult:
    """Generate the stylesheet for ``tokens_dir``."""
    config = config or GeneratorConfig(tokens_dir=tokens_dir)
    source = TokenSource(tokens_dir, config.manifest_file)
    return ThemeCSSGenerator(source, config).generate()


def write_css(css: str, output_path: Path) -> Path:
    """Write the stylesheet, creating parent directories.

    Returns:
        Path to the written file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(css, encoding="utf-8")
    logger.info(f"Wrote {output_path}")
    return output_path
