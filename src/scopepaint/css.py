"""Stylesheet generation for resolved themes.

Every styled scope gets one class rule named ``<prefix>-<scope name>``. Scope
names keep their dots, so ``function.method`` becomes the single class
``tsc-function.method``; the selector escapes the dot to match it.

Output is deterministic: the same Theme and prefix always produce the same
text, so callers can cache it per theme.
"""

from __future__ import annotations

from scopepaint.config import DEFAULT_CLASS_PREFIX
from scopepaint.scopes import SCOPE_NAMES
from scopepaint.theme import Style, Theme


def class_name(index: int, prefix: str = DEFAULT_CLASS_PREFIX) -> str:
    """Return the CSS class for a scope index, e.g. ``tsc-keyword``."""
    return f"{prefix}-{SCOPE_NAMES[index]}"


def class_selector(name: str) -> str:
    """Return a selector matching the single class ``name``."""
    return "." + name.replace(".", "\\.")


def css_classes(theme: Theme, prefix: str = DEFAULT_CLASS_PREFIX) -> dict[int, str]:
    """Precompute ``class="..."`` attributes for every styled scope of ``theme``.

    Scopes without a style are absent; renderers emit bare spans for them.
    """
    return {index: f'class="{class_name(index, prefix)}"' for index in theme.style_map}


def _declarations(style: Style) -> str:
    parts = [f"color: {style.color};"]
    if style.is_bold:
        parts.append("font-weight: bold;")
    if style.is_italic:
        parts.append("font-style: italic;")
    return " ".join(parts)


def to_css(theme: Theme, prefix: str = DEFAULT_CLASS_PREFIX) -> str:
    """Generate the stylesheet for ``theme``.

    Emits, in order: a ``:root`` rule defining ``--<prefix>-main-fg-color``
    and ``--<prefix>-main-bg-color``, one class rule per styled scope in
    scope-table order, and the ``<prefix>-line`` rule that keeps line
    fragments from wrapping.

    Example:
        >>> theme = Theme.from_helix('keyword = "red"\\n[palette]\\nred = "#f00"')
        >>> print(to_css(theme))
        :root { --tsc-main-fg-color: #fff; --tsc-main-bg-color: #000; }
        .tsc-keyword { color: #f00; }
        .tsc-line { word-wrap: normal; white-space: pre; }
        <BLANKLINE>
    """
    lines = [
        f":root {{ --{prefix}-main-fg-color: {theme.foreground.color}; "
        f"--{prefix}-main-bg-color: {theme.background.color}; }}"
    ]

    for index in range(len(SCOPE_NAMES)):
        style = theme.style_map.get(index)
        if style is None:
            continue
        lines.append(f"{class_selector(class_name(index, prefix))} {{ {_declarations(style)} }}")

    lines.append(f".{prefix}-line {{ word-wrap: normal; white-space: pre; }}")
    return "\n".join(lines) + "\n"


__all__ = [
    "class_name",
    "class_selector",
    "css_classes",
    "to_css",
]
