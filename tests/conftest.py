"""Shared pytest fixtures for tokencss tests."""

import shutil
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def tokens_dir(tmp_path: Path) -> Path:
    """Writable copy of the sample design-tokens directory."""
    target = tmp_path / "design-tokens"
    shutil.copytree(FIXTURES_DIR / "design-tokens", target)
    return target


@pytest.fixture
def color_store():
    """Small store with a literal color, a reference chain and a namespace."""
    from tokencss.core.store import TokenStore

    return TokenStore(
        {
            "blue": {
                "500": {"$type": "color", "$value": "#3b82f6"},
                "600": {"$type": "color", "$value": "#2563eb"},
            },
            "brand": {
                "primary": {"$type": "color", "$value": "{blue.500}"},
                "accent": {"$type": "color", "$value": "{brand.primary}"},
            },
            "alias": "{blue.600}",
        }
    )
