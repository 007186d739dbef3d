"""The closed vocabulary of highlight scopes.

Indices are positions in SCOPE_NAMES. The theme resolver, the CSS mapper and
every annotation source address scopes by these indices, so the order is part
of the public contract: changing it breaks themes, stylesheets and annotation
streams at the same time.
"""

from __future__ import annotations

from collections.abc import Sequence

SCOPE_NAMES: tuple[str, ...] = (
    "attribute",
    "comment",
    "constant",
    "constant.builtin",
    "constructor",
    "escape",
    "function",
    "function.builtin",
    "function.method",
    "function.macro",
    "include",
    "keyword",
    "label",
    "namespace",
    "number",
    "operator",
    "property",
    "punctuation",
    "punctuation.bracket",
    "punctuation.delimiter",
    "repeat",
    "string",
    "type",
    "type.builtin",
    "variable",
    "variable.builtin",
    "variable.parameter",
)

SCOPE_COUNT: int = len(SCOPE_NAMES)

_INDEX_BY_NAME: dict[str, int] = {name: index for index, name in enumerate(SCOPE_NAMES)}


def scope_index(name: str) -> int | None:
    """Return the index of an exact scope name, or None if it is not in the table."""
    return _INDEX_BY_NAME.get(name)


def scope_name(index: int) -> str:
    """Return the scope name at ``index``.

    Raises:
        IndexError: If index is outside the table
    """
    if index < 0:
        raise IndexError(index)
    return SCOPE_NAMES[index]


def match_capture(capture: str, names: Sequence[str] = SCOPE_NAMES) -> int | None:
    """Map an arbitrary dotted capture name onto the best recognized scope.

    A recognized name matches when every one of its dot components appears
    among the capture's components. The match with the most components wins;
    ties go to the earlier entry of ``names``.

    Examples:
        >>> SCOPE_NAMES[match_capture("function.method.call")]
        'function.method'
        >>> SCOPE_NAMES[match_capture("keyword.control.import")]
        'keyword'
        >>> match_capture("markup.heading") is None
        True
    """
    parts = set(capture.split("."))
    best: int | None = None
    best_len = 0
    for index, name in enumerate(names):
        name_parts = name.split(".")
        if len(name_parts) > best_len and all(part in parts for part in name_parts):
            best = index
            best_len = len(name_parts)
    return best


__all__ = [
    "SCOPE_COUNT",
    "SCOPE_NAMES",
    "match_capture",
    "scope_index",
    "scope_name",
]
