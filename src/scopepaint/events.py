"""Highlight events exchanged between annotation sources and the renderer.

An annotation stream is an ordered sequence of events covering a source
buffer. Scopes open with EnterScope, close with ExitScope, and Text carries a
byte range of the buffer that is styled by every currently open scope.

    EnterScope(11), Text(0, 2), ExitScope(), Text(2, 3)

Events are immutable. Producers guarantee balanced nesting; consumers do not
re-validate it beyond detecting an unbalanced stack.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class EnterScope:
    """Open the scope at ``index`` of the scope table."""

    index: int


@dataclass(frozen=True, slots=True)
class ExitScope:
    """Close the most recently opened scope."""


@dataclass(frozen=True, slots=True)
class Text:
    """Byte range ``[start, end)`` of the source buffer."""

    start: int
    end: int


HighlightEvent: TypeAlias = EnterScope | ExitScope | Text


__all__ = [
    "EnterScope",
    "ExitScope",
    "HighlightEvent",
    "Text",
]
