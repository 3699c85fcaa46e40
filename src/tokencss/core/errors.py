"""
Error types for tokencss loading and configuration.

Reference problems found while resolving tokens are not errors: they are
recorded as diagnostics (see :mod:`tokencss.core.diagnostics`) and the
generation carries on. The exceptions below are reserved for inputs the
generator cannot do without, and abort the whole run.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TokenCSSError(Exception):
    """Base exception for all tokencss errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ManifestError(TokenCSSError):
    """
    Raised when the token manifest cannot be used.

    Examples:
    - manifest.json missing or not valid JSON
    - Manifest does not match the collections/modes layout
    - A required collection or mode is not declared
    """

    pass


class TokenDocumentError(TokenCSSError):
    """
    Raised when a token document cannot be loaded.

    Examples:
    - Document listed in the manifest does not exist
    - Document is not valid JSON
    - Document root is not an object
    """

    pass


class ConfigError(TokenCSSError):
    """
    Raised when the generator configuration is invalid.

    Examples:
    - Config file is not valid TOML
    - Unknown keys in the [tokencss] table
    - Value of the wrong type
    """

    pass


@dataclass
class ErrorContext:
    """
    Where an input error was found.

    Attributes:
        file: Path of the offending file
        collection: Manifest collection being loaded, if any
        mode: Manifest mode being loaded, if any
    """

    file: Path
    collection: str | None = None
    mode: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "light.tokens.json (collection token, mode light)"
        """
        location = str(self.file)
        details = []
        if self.collection:
            details.append(f"collection {self.collection}")
        if self.mode:
            details.append(f"mode {self.mode}")
        if details:
            location += f" ({', '.join(details)})"
        return location
