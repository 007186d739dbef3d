"""Tests for theme resolution."""

from __future__ import annotations

import dataclasses
import tomllib

import pytest

from scopepaint.errors import (
    ColorReferenceError,
    InvalidThemeError,
    MalformedThemeError,
    ThemeError,
)
from scopepaint.scopes import SCOPE_NAMES, scope_index
from scopepaint.theme import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND, Style, Theme, resolve_theme

KEYWORD = scope_index("keyword")


class TestResolveStyles:
    """Scope entries resolve through the palette."""

    def test_bare_reference(self) -> None:
        theme = Theme.from_helix('keyword = "red"\n[palette]\nred = "#ff0000"\n')
        assert theme.style_map[KEYWORD] == Style("#ff0000")

    def test_table_with_modifiers(self) -> None:
        doc = 'keyword = { fg = "red", modifiers = ["bold", "italic"] }\n[palette]\nred = "#ff0000"\n'
        style = Theme.from_helix(doc).style_map[KEYWORD]
        assert style.color == "#ff0000"
        assert style.is_bold is True
        assert style.is_italic is True

    def test_table_without_modifiers(self) -> None:
        doc = 'keyword = { fg = "red" }\n[palette]\nred = "#ff0000"\n'
        assert Theme.from_helix(doc).style_map[KEYWORD] == Style("#ff0000")

    def test_unknown_modifiers_ignored(self) -> None:
        doc = 'keyword = { fg = "red", modifiers = ["underlined", "bold"] }\n[palette]\nred = "#f00"\n'
        style = Theme.from_helix(doc).style_map[KEYWORD]
        assert style.is_bold is True
        assert style.is_italic is False

    def test_only_present_entries_populated(self, theme: Theme) -> None:
        styled = {SCOPE_NAMES[index] for index in theme.style_map}
        assert styled == {"keyword", "comment", "string", "function.method"}

    def test_fixture_theme(self, theme: Theme) -> None:
        assert theme.style_map[scope_index("comment")] == Style("#888888", is_italic=True)
        assert theme.style_map[scope_index("string")] == Style("#00ff00", True, True)
        assert theme.style_map[scope_index("function.method")].color == "#0000ff"

    def test_entries_outside_table_ignored(self) -> None:
        doc = 'tag = "red"\n"markup.heading" = "red"\n[palette]\nred = "#f00"\n'
        assert len(Theme.from_helix(doc).style_map) == 0

    def test_unsupported_entry_type_ignored(self) -> None:
        doc = 'keyword = 3\n[palette]\nred = "#f00"\n'
        assert KEYWORD not in Theme.from_helix(doc).style_map

    def test_resolve_theme_alias(self, theme_document: str) -> None:
        first = resolve_theme(theme_document)
        second = Theme.from_helix(theme_document)
        assert dict(first.style_map) == dict(second.style_map)
        assert first.foreground == second.foreground
        assert first.background == second.background


class TestForegroundBackground:
    """ui.text and ui.background defaults."""

    def test_fixture_colors(self, theme: Theme) -> None:
        assert theme.foreground.color == "#eeeeee"
        assert theme.background.color == "#111111"

    def test_defaults_when_absent(self) -> None:
        theme = Theme.from_helix("[palette]\n")
        assert theme.foreground == Style(DEFAULT_FOREGROUND)
        assert theme.background == Style(DEFAULT_BACKGROUND)
        assert theme.foreground.color == "#fff"
        assert theme.background.color == "#000"

    def test_background_without_bg_field(self) -> None:
        doc = '"ui.background" = { fg = "red" }\n[palette]\nred = "#f00"\n'
        assert Theme.from_helix(doc).background.color == DEFAULT_BACKGROUND

    def test_background_bare_string_uses_default(self) -> None:
        doc = '"ui.background" = "red"\n[palette]\nred = "#f00"\n'
        assert Theme.from_helix(doc).background.color == DEFAULT_BACKGROUND

    def test_background_ignores_modifiers(self) -> None:
        doc = '"ui.background" = { bg = "red", modifiers = ["bold"] }\n[palette]\nred = "#f00"\n'
        assert Theme.from_helix(doc).background == Style("#f00")

    def test_foreground_table_form(self) -> None:
        doc = '"ui.text" = { fg = "red", modifiers = ["italic"] }\n[palette]\nred = "#f00"\n'
        assert Theme.from_helix(doc).foreground == Style("#f00", is_italic=True)

    def test_unresolved_foreground_uses_default(self) -> None:
        theme = Theme.from_helix('"ui.text" = "ink"\n[palette]\nred = "#f00"\n')
        assert theme.foreground.color == "#fff"
        assert theme.foreground == Style(DEFAULT_FOREGROUND)

    def test_unresolved_foreground_table_fg_raises(self) -> None:
        with pytest.raises(ColorReferenceError) as exc_info:
            Theme.from_helix('"ui.text" = { fg = "ink" }\n[palette]\nred = "#f00"\n')
        assert exc_info.value.scope == "ui.text"
        assert exc_info.value.field == "fg"


class TestThemeErrors:
    """Each failure mode raises a distinct error."""

    def test_invalid_toml(self) -> None:
        with pytest.raises(MalformedThemeError) as exc_info:
            Theme.from_helix("keyword = = 'red'")
        assert isinstance(exc_info.value.__cause__, tomllib.TOMLDecodeError)

    def test_missing_palette(self) -> None:
        with pytest.raises(MalformedThemeError, match="palette"):
            Theme.from_helix('keyword = "red"\n')

    def test_palette_not_a_table(self) -> None:
        with pytest.raises(MalformedThemeError):
            Theme.from_helix('palette = "red"\n')

    def test_top_level_not_a_table(self) -> None:
        with pytest.raises(InvalidThemeError):
            Theme.from_mapping(["palette"])

    def test_unresolved_bare_reference(self) -> None:
        with pytest.raises(ColorReferenceError) as exc_info:
            Theme.from_helix('keyword = "purple"\n[palette]\nred = "#f00"\n')
        err = exc_info.value
        assert err.scope == "keyword"
        assert err.field is None
        assert err.reference == "purple"
        assert "purple" in str(err)
        assert "keyword" in str(err)

    def test_unresolved_fg_reference(self) -> None:
        with pytest.raises(ColorReferenceError) as exc_info:
            Theme.from_helix('"function.method" = { fg = "purple" }\n[palette]\nred = "#f00"\n')
        assert exc_info.value.scope == "function.method"
        assert exc_info.value.field == "fg"
        assert "function.method.fg" in str(exc_info.value)

    def test_missing_fg_field(self) -> None:
        with pytest.raises(ColorReferenceError) as exc_info:
            Theme.from_helix('keyword = { modifiers = ["bold"] }\n[palette]\nred = "#f00"\n')
        assert exc_info.value.field == "fg"
        assert exc_info.value.reference is None

    def test_unresolved_background(self) -> None:
        with pytest.raises(ColorReferenceError) as exc_info:
            Theme.from_helix('"ui.background" = { bg = "night" }\n[palette]\nred = "#f00"\n')
        assert exc_info.value.scope == "ui.background"
        assert exc_info.value.field == "bg"

    def test_palette_value_must_be_string(self) -> None:
        with pytest.raises(ColorReferenceError):
            Theme.from_helix('keyword = "red"\n[palette]\nred = 16711680\n')

    def test_errors_are_distinguishable(self) -> None:
        kinds = {MalformedThemeError, InvalidThemeError, ColorReferenceError}
        assert len(kinds) == 3
        for kind in kinds:
            assert issubclass(kind, ThemeError)
        assert not issubclass(MalformedThemeError, InvalidThemeError)
        assert not issubclass(InvalidThemeError, MalformedThemeError)


class TestThemeImmutability:
    """Resolved themes are read-only."""

    def test_frozen(self, theme: Theme) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            theme.foreground = Style("#000")  # type: ignore[misc]

    def test_style_map_read_only(self, theme: Theme) -> None:
        with pytest.raises(TypeError):
            theme.style_map[0] = Style("#000")  # type: ignore[index]

    def test_style_frozen(self) -> None:
        style = Style("#fff")
        with pytest.raises(dataclasses.FrozenInstanceError):
            style.is_bold = True  # type: ignore[misc]

    def test_style_defaults(self) -> None:
        style = Style("red")
        assert style.is_bold is False
        assert style.is_italic is False
