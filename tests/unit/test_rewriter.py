"""Tests for text-level reference rewriting."""

from __future__ import annotations


class TestLookup:
    def test_dotted_path(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {"foo": {"bar": {"type": "color", "value": "#fff"}}}
        assert rewrite_references("  --x: {foo.bar};", store) == "  --x: #fff;"

    def test_dash_fallback(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {"foo": {"bar": {"type": "color", "value": "#fff"}}}
        assert rewrite_references("color: {foo-bar};", store) == "color: #fff;"

    def test_dash_fallback_splits_at_first_dash(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {"space": {"x-large": {"$type": "dimension", "$value": "32px"}}}
        assert rewrite_references("{space-x-large}", store) == "32px"

    def test_dash_fallback_mid_path(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {"theme": {"text": {"muted": {"$type": "color", "$value": "#999"}}}}
        assert rewrite_references("{theme.text-muted}", store) == "#999"

    def test_exact_key_preferred_over_split(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {
            "foo-bar": {"$type": "color", "$value": "exact"},
            "foo": {"bar": {"$type": "color", "$value": "split"}},
        }
        assert rewrite_references("{foo-bar}", store) == "exact"

    def test_value_reference_followed(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {
            "blue": {"500": {"$type": "color", "$value": "#3b82f6"}},
            "primary": {"$type": "color", "$value": "{blue.500}"},
            "link": {"$type": "color", "$value": "{primary}"},
        }
        assert rewrite_references("a { color: {link}; }", store) == "a { color: #3b82f6; }"

    def test_chain_longer_than_structured_ceiling(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store: dict = {f"t{i}": {"$type": "color", "$value": f"{{t{i + 1}}}"} for i in range(30)}
        store["t30"] = {"$type": "color", "$value": "#000"}
        assert rewrite_references("{t0}", store) == "#000"

    def test_plain_string_node(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {"alias": "{blue.500}", "blue": {"500": {"$type": "color", "$value": "#00f"}}, "raw": "red"}
        assert rewrite_references("{alias} {raw}", store) == "#00f red"

    def test_non_string_values_formatted(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {
            "weight": {"$type": "fontWeight", "$value": 600},
            "flag": {"$type": "boolean", "$value": True},
        }
        assert rewrite_references("{weight} {flag}", store) == "600 true"

    def test_shadow_list_rendered(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {"elevation": {"$type": "shadow", "$value": [{"offsetY": "1px"}, "0 0 1px red"]}}
        assert rewrite_references("{elevation}", store) == "0px 1px 0px 0px transparent, 0 0 1px red"

    def test_reference_inside_value_text(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {"primary": {"$type": "color", "$value": "#00f"}}
        assert rewrite_references("--ring: 2px solid {primary};", store) == "--ring: 2px solid #00f;"


class TestCustomProperties:
    def test_custom_property_becomes_var(self) -> None:
        from tokencss.core.diagnostics import DiagnosticLog
        from tokencss.core.rewriter import rewrite_references

        log = DiagnosticLog()
        assert rewrite_references("--a: {--brand-primary};", {}, log) == "--a: var(--brand-primary);"
        assert not log

    def test_store_value_wins_over_var(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {"--gap": {"$type": "dimension", "$value": "4px"}}
        assert rewrite_references("{--gap}", store) == "4px"


class TestUnresolved:
    def test_missing_left_in_place(self) -> None:
        from tokencss.core.diagnostics import DiagnosticKind, DiagnosticLog
        from tokencss.core.rewriter import rewrite_references

        log = DiagnosticLog()
        assert rewrite_references("x: {nope.value};", {}, log) == "x: {nope.value};"
        [diagnostic] = list(log)
        assert diagnostic.kind == DiagnosticKind.UNRESOLVED_TEXT_REFERENCE
        assert diagnostic.reference == "{nope.value}"

    def test_namespace_target_left_in_place(self) -> None:
        from tokencss.core.diagnostics import DiagnosticKind, DiagnosticLog
        from tokencss.core.rewriter import rewrite_references

        log = DiagnosticLog()
        store = {"blue": {"500": {"$type": "color", "$value": "#00f"}}}
        assert rewrite_references("{blue}", store, log) == "{blue}"
        assert [d.kind for d in log] == [DiagnosticKind.UNRESOLVED_TEXT_REFERENCE]

    def test_group_named_value_left_in_place(self) -> None:
        from tokencss.core.diagnostics import DiagnosticKind, DiagnosticLog
        from tokencss.core.rewriter import rewrite_references

        log = DiagnosticLog()
        store = {"opacity": {"value": {"50": {"$type": "number", "$value": 0.5}}}}
        assert rewrite_references("--o: {opacity};", store, log) == "--o: {opacity};"
        assert [d.kind for d in log] == [DiagnosticKind.UNRESOLVED_TEXT_REFERENCE]
        assert rewrite_references("--o: {opacity.value.50};", store) == "--o: 0.5;"

    def test_unresolved_inner_reference_leaves_inner_text(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {"primary": {"$type": "color", "$value": "{gone}"}}
        assert rewrite_references("{primary}", store) == "{gone}"

    def test_cycle_stopped(self) -> None:
        from tokencss.core.diagnostics import DiagnosticKind, DiagnosticLog
        from tokencss.core.rewriter import rewrite_references

        store = {
            "a": {"$type": "color", "$value": "{b}"},
            "b": {"$type": "color", "$value": "{a}"},
        }
        log = DiagnosticLog()
        assert rewrite_references("{a}", store, log) == "{a}"
        assert log.of_kind(DiagnosticKind.REFERENCE_CYCLE)


class TestCssText:
    def test_rule_bodies_are_not_references(self) -> None:
        from tokencss.core.diagnostics import DiagnosticLog
        from tokencss.core.rewriter import rewrite_references

        css = ":root {\n  --a: 1px;\n}\n[data-theme-mode=\"dark\"] {\n  --b: 2px;\n}\n"
        log = DiagnosticLog()
        assert rewrite_references(css, {}, log) == css
        assert not log

    def test_references_inside_rule_rewritten(self) -> None:
        from tokencss.core.rewriter import rewrite_references

        store = {"blue": {"500": {"$type": "color", "$value": "#00f"}}}
        css = ":root {\n  --a: {blue.500};\n  --b: {blue-500};\n}\n"
        assert rewrite_references(css, store) == ":root {\n  --a: #00f;\n  --b: #00f;\n}\n"
