"""Tests for token leaf helpers and path walking."""

from __future__ import annotations

import pytest


class TestLeaves:
    @pytest.mark.parametrize(
        "node, expected",
        [
            ({"$type": "color", "$value": "#fff"}, True),
            ({"type": "color", "value": "#fff"}, True),
            ({"$type": "dimension", "$value": 0}, True),
            ({"$value": "#fff"}, False),
            ({"$type": "color"}, False),
            ({"type": {"$type": "color", "$value": "#fff"}, "value": {}}, False),
            ("#fff", False),
            (42, False),
        ],
    )
    def test_is_token_leaf(self, node, expected: bool) -> None:
        from tokencss.core.tokens import is_token_leaf

        assert is_token_leaf(node) is expected

    def test_prefixed_spelling_preferred(self) -> None:
        from tokencss.core.tokens import token_type, token_value

        node = {"$type": "color", "$value": "#000", "type": "legacy", "value": "#fff"}
        assert token_type(node) == "color"
        assert token_value(node) == "#000"

    def test_untyped_value_key_is_a_group(self) -> None:
        from tokencss.core.tokens import has_value_field, token_value

        group = {"value": {"50": {"$type": "number", "$value": 0.5}}}
        assert not has_value_field(group)
        assert token_value(group) is None
        assert has_value_field({"$value": "#fff"})
        assert token_value({"type": "color", "value": "#fff"}) == "#fff"

    @pytest.mark.parametrize(
        "value, expected",
        [("{a.b}", True), ("{a}", True), ("a", False), ("{a", False), ("{}", True), (3, False)],
    )
    def test_is_reference(self, value, expected: bool) -> None:
        from tokencss.core.tokens import is_reference

        assert is_reference(value) is expected

    def test_reference_path(self) -> None:
        from tokencss.core.tokens import reference_path

        assert reference_path("{color.blue.500}") == ["color", "blue", "500"]
        assert reference_path("color.blue") == ["color", "blue"]


class TestWalkPath:
    ROOT = {"color": {"blue": {"500": "#00f"}, "text": {"muted": "#999"}}}

    def test_found(self) -> None:
        from tokencss.core.tokens import walk_path

        walk = walk_path(self.ROOT, ["color", "blue", "500"])
        assert walk.found
        assert walk.node == "#00f"

    def test_missing_reports_partial_path(self) -> None:
        from tokencss.core.tokens import walk_path

        walk = walk_path(self.ROOT, ["color", "red", "500"])
        assert not walk.found
        assert walk.path == ("color", "red")

    def test_walk_through_string_fails(self) -> None:
        from tokencss.core.tokens import walk_path

        assert not walk_path(self.ROOT, ["color", "blue", "500", "x"]).found

    def test_dash_fallback_only_when_enabled(self) -> None:
        from tokencss.core.tokens import walk_path

        assert not walk_path(self.ROOT, ["color", "text-muted"]).found
        walk = walk_path(self.ROOT, ["color", "text-muted"], dash_fallback=True)
        assert walk.found
        assert walk.node == "#999"
