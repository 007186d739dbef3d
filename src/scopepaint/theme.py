"""Theme resolution from Helix-style TOML theme documents.

A theme document declares a palette of named colors and assigns palette
references to highlight scopes:

    keyword = "red"
    comment = { fg = "grey", modifiers = ["italic"] }
    "ui.text" = "grey"
    "ui.background" = { bg = "black" }

    [palette]
    red = "#ff0000"
    grey = "#888888"
    black = "#000000"

Scope keys must be quoted when they contain dots ("function.method");
an unquoted dotted key would create a nested table instead.

Resolution turns this into a Theme: a sparse, read-only map from scope index
(see scopepaint.scopes) to Style, plus foreground and background styles.

Thread Safety:
    Theme and Style are immutable after construction. Safe to share.

Example:
    >>> theme = Theme.from_helix('keyword = "red"\\n[palette]\\nred = "#f00"')
    >>> theme.style_map[11].color
    '#f00'
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from scopepaint.errors import ColorReferenceError, InvalidThemeError, MalformedThemeError
from scopepaint.scopes import SCOPE_NAMES
from scopepaint.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_FOREGROUND = "#fff"
DEFAULT_BACKGROUND = "#000"

FOREGROUND_KEY = "ui.text"
BACKGROUND_KEY = "ui.background"


@dataclass(frozen=True, slots=True)
class Style:
    """A resolved color with optional modifiers.

    The color is opaque CSS color syntax, copied verbatim from the palette.
    """

    color: str
    is_bold: bool = False
    is_italic: bool = False


@dataclass(frozen=True, slots=True)
class Theme:
    """Colors and modifiers used for syntax highlighting.

    Attributes:
        style_map: Scope index -> Style, only for scopes the theme styles
        foreground: Default text style (``ui.text``)
        background: Background style (``ui.background.bg``)
    """

    style_map: Mapping[int, Style] = field(default_factory=lambda: MappingProxyType({}))
    foreground: Style = Style(DEFAULT_FOREGROUND)
    background: Style = Style(DEFAULT_BACKGROUND)

    @classmethod
    def from_helix(cls, document: str) -> Theme:
        """Load a theme from a Helix-compatible TOML theme document.

        Args:
            document: TOML source text

        Returns:
            The resolved Theme

        Raises:
            MalformedThemeError: The text is not valid TOML or has no palette
            InvalidThemeError: The top level is not a table
            ColorReferenceError: An entry references a missing palette color
        """
        try:
            data = tomllib.loads(document)
        except tomllib.TOMLDecodeError as e:
            raise MalformedThemeError(f"theme is not valid TOML: {e}") from e
        return cls.from_mapping(data)

    @classmethod
    def from_mapping(cls, data: Any) -> Theme:
        """Resolve a theme from an already-parsed document tree.

        Raises the same errors as from_helix(), except TOML syntax errors.
        """
        if not isinstance(data, Mapping):
            raise InvalidThemeError()

        palette = data.get("palette")
        if palette is None:
            raise MalformedThemeError("theme has no [palette] table")
        if not isinstance(palette, Mapping):
            raise MalformedThemeError("theme 'palette' must be a table")

        resolver = _Resolver(data, palette)

        style_map: dict[int, Style] = {}
        for index, name in enumerate(SCOPE_NAMES):
            style = resolver.entry(name)
            if style is not None:
                style_map[index] = style

        foreground = resolver.foreground() or Style(DEFAULT_FOREGROUND)
        background = resolver.background() or Style(DEFAULT_BACKGROUND)

        logger.debug("Resolved theme with %d styled scopes", len(style_map))
        return cls(
            style_map=MappingProxyType(style_map),
            foreground=foreground,
            background=background,
        )


class _Resolver:
    """Looks up theme entries against one document's palette."""

    __slots__ = ("_root", "_palette")

    def __init__(self, root: Mapping[str, Any], palette: Mapping[str, Any]) -> None:
        self._root = root
        self._palette = palette

    def color(self, reference: Any, scope: str, key: str | None = None) -> str:
        if not isinstance(reference, str):
            raise ColorReferenceError(scope, field=key)
        color = self._palette.get(reference)
        if not isinstance(color, str):
            raise ColorReferenceError(scope, field=key, reference=reference)
        return color

    def entry(self, name: str) -> Style | None:
        """Resolve a foreground entry in bare or table form, or None if absent."""
        value = self._root.get(name)
        if value is None:
            return None

        if isinstance(value, str):
            return Style(self.color(value, name))

        if isinstance(value, Mapping):
            color = self.color(value.get("fg"), name, "fg")
            is_bold = False
            is_italic = False
            modifiers = value.get("modifiers")
            if isinstance(modifiers, list):
                for modifier in modifiers:
                    if modifier == "bold":
                        is_bold = True
                    elif modifier == "italic":
                        is_italic = True
                    else:
                        logger.debug("Ignoring modifier %r on %s", modifier, name)
            return Style(color, is_bold=is_bold, is_italic=is_italic)

        logger.debug("Ignoring %s entry of type %s", name, type(value).__name__)
        return None

    def foreground(self) -> Style | None:
        """Resolve ``ui.text``; a bare reference missing from the palette is None."""
        value = self._root.get(FOREGROUND_KEY)
        if isinstance(value, str) and not isinstance(self._palette.get(value), str):
            logger.debug("Unresolved %s color %r, using default", FOREGROUND_KEY, value)
            return None
        return self.entry(FOREGROUND_KEY)

    def background(self) -> Style | None:
        value = self._root.get(BACKGROUND_KEY)
        if not isinstance(value, Mapping) or "bg" not in value:
            return None
        return Style(self.color(value["bg"], BACKGROUND_KEY, "bg"))


def resolve_theme(document: str) -> Theme:
    """Resolve a TOML theme document. Alias of Theme.from_helix()."""
    return Theme.from_helix(document)


__all__ = [
    "DEFAULT_BACKGROUND",
    "DEFAULT_FOREGROUND",
    "Style",
    "Theme",
    "resolve_theme",
]
