"""Tests for stylesheet generation."""

from __future__ import annotations

from scopepaint.css import class_name, class_selector, css_classes, to_css
from scopepaint.scopes import scope_index
from scopepaint.theme import Theme


class TestToCss:
    """Stylesheet layout and content."""

    def test_keyword_rule(self) -> None:
        theme = Theme.from_helix('keyword = "red"\n[palette]\nred = "#ff0000"\n')
        assert ".tsc-keyword { color: #ff0000; }" in to_css(theme)

    def test_exact_output(self, theme: Theme) -> None:
        assert to_css(theme) == (
            ":root { --tsc-main-fg-color: #eeeeee; --tsc-main-bg-color: #111111; }\n"
            ".tsc-comment { color: #888888; font-style: italic; }\n"
            ".tsc-function\\.method { color: #0000ff; }\n"
            ".tsc-keyword { color: #ff0000; }\n"
            ".tsc-string { color: #00ff00; font-weight: bold; font-style: italic; }\n"
            ".tsc-line { word-wrap: normal; white-space: pre; }\n"
        )

    def test_one_rule_per_styled_scope(self, theme: Theme) -> None:
        lines = to_css(theme).splitlines()
        assert len(lines) == len(theme.style_map) + 2
        assert lines[0].startswith(":root")
        assert lines[-1].startswith(".tsc-line")

    def test_rules_in_scope_table_order(self) -> None:
        doc = 'variable = "a"\nattribute = "a"\nkeyword = "a"\n[palette]\na = "#aaa"\n'
        lines = to_css(Theme.from_helix(doc)).splitlines()[1:-1]
        assert [line.split()[0] for line in lines] == [
            ".tsc-attribute",
            ".tsc-keyword",
            ".tsc-variable",
        ]

    def test_default_background_in_root(self) -> None:
        theme = Theme.from_helix('"ui.text" = "a"\n[palette]\na = "#abc"\n')
        root = to_css(theme).splitlines()[0]
        assert root == ":root { --tsc-main-fg-color: #abc; --tsc-main-bg-color: #000; }"

    def test_empty_theme(self) -> None:
        assert to_css(Theme.from_helix("[palette]\n")) == (
            ":root { --tsc-main-fg-color: #fff; --tsc-main-bg-color: #000; }\n"
            ".tsc-line { word-wrap: normal; white-space: pre; }\n"
        )

    def test_custom_prefix(self, theme: Theme) -> None:
        css = to_css(theme, prefix="hl")
        assert "--hl-main-fg-color" in css
        assert ".hl-keyword { color: #ff0000; }" in css
        assert ".hl-line" in css
        assert "tsc" not in css

    def test_idempotent(self, theme: Theme) -> None:
        assert to_css(theme) == to_css(theme)


class TestClassNames:
    """Class names keep dots; selectors escape them."""

    def test_class_name(self) -> None:
        assert class_name(scope_index("keyword")) == "tsc-keyword"
        assert class_name(scope_index("function.method")) == "tsc-function.method"
        assert class_name(scope_index("keyword"), "hl") == "hl-keyword"

    def test_selector(self) -> None:
        assert class_selector("tsc-keyword") == ".tsc-keyword"
        assert class_selector("tsc-function.method") == ".tsc-function\\.method"

    def test_css_classes_only_styled(self, theme: Theme) -> None:
        classes = css_classes(theme)
        assert set(classes) == set(theme.style_map)
        assert classes[scope_index("keyword")] == 'class="tsc-keyword"'
        assert classes[scope_index("function.method")] == 'class="tsc-function.method"'
