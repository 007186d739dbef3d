"""Per-renderer cache of compiled grammars.

Compiling a grammar loads the lexer and builds its token-to-scope table.
Renderers keep one cache each, keyed by language name, so repeated renders of
the same language reuse the compiled grammar.

Thread Safety:
    DictGrammarCache is not thread-safe. It belongs to a single Renderer;
    use one Renderer per thread, or lock around render calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from scopepaint.annotate import CompiledGrammar


class GrammarCache(Protocol):
    """Protocol for compiled grammar caches keyed by language name."""

    def get(self, language: str) -> CompiledGrammar | None:
        """Return the cached grammar if present, else None."""
        ...

    def put(self, language: str, grammar: CompiledGrammar) -> None:
        """Store a compiled grammar."""
        ...


class DictGrammarCache:
    """In-memory grammar cache using a dict."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[str, CompiledGrammar] = {}

    def get(self, language: str) -> CompiledGrammar | None:
        """Return the cached grammar if present, else None."""
        return self._data.get(language)

    def put(self, language: str, grammar: CompiledGrammar) -> None:
        """Store a compiled grammar."""
        self._data[language] = grammar

    def clear(self) -> None:
        """Drop every cached grammar."""
        self._data.clear()

    def __contains__(self, language: str) -> bool:
        return language in self._data

    def __len__(self) -> int:
        return len(self._data)


__all__ = [
    "DictGrammarCache",
    "GrammarCache",
]
