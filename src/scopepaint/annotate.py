"""Annotation sources: turn source buffers into highlight event streams.

The renderer consumes any object implementing the AnnotationSource protocol.
The built-in implementation, CompiledGrammar, drives a Pygments lexer and
translates its token types into scope indices.

Token types are first named with dotted capture names (``Token.Name.Function``
becomes ``function``), then matched against the scope table with
match_capture(), so a capture such as ``keyword.operator`` lands on the most
specific scope the table knows.

Thread Safety:
    A CompiledGrammar memoizes token-type lookups and must not be used by two
    threads at once. Renderers keep one per language per instance.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Protocol

from pygments.token import (
    Comment,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    Token,
    _TokenType,
)

from scopepaint.errors import HighlightingError
from scopepaint.events import EnterScope, ExitScope, HighlightEvent, Text
from scopepaint.scopes import SCOPE_NAMES, match_capture
from scopepaint.utils.logger import get_logger

if TYPE_CHECKING:
    from pygments.lexer import Lexer

    from scopepaint.languages import LanguageSpec

logger = get_logger(__name__)

SOURCE_ENCODING = "utf-8"
# Round-trips undecodable bytes so token lengths match the buffer exactly.
SOURCE_ERRORS = "surrogateescape"

CAPTURE_NAMES: Mapping[_TokenType, str] = {
    Comment: "comment",
    Comment.Preproc: "include",
    Comment.PreprocFile: "string",
    Keyword: "keyword",
    Keyword.Constant: "constant.builtin",
    Keyword.Namespace: "include",
    Keyword.Type: "type.builtin",
    Name: "variable",
    Name.Attribute: "property",
    Name.Builtin: "function.builtin",
    Name.Builtin.Pseudo: "variable.builtin",
    Name.Class: "type",
    Name.Constant: "constant",
    Name.Decorator: "attribute",
    Name.Entity: "constant",
    Name.Exception: "type",
    Name.Function: "function",
    Name.Function.Magic: "function.macro",
    Name.Label: "label",
    Name.Namespace: "namespace",
    Name.Property: "property",
    Name.Variable.Magic: "variable.builtin",
    Number: "number",
    Operator: "operator",
    Operator.Word: "keyword.operator",
    Punctuation: "punctuation.delimiter",
    String: "string",
    String.Escape: "escape",
    String.Interpol: "punctuation.special",
}

_BRACKETS = frozenset("()[]{}")


class AnnotationSource(Protocol):
    """Protocol for producers of highlight event streams.

    Contract:
        - Events cover the whole buffer in order, without overlaps
        - EnterScope/ExitScope are balanced
        - Scope indices address the scope table the source was built for
    """

    def highlight(self, source: bytes) -> Iterable[HighlightEvent]:
        """Annotate ``source`` with highlight events."""
        ...


class CompiledGrammar:
    """Pygments lexer configured against a list of recognized scope names."""

    __slots__ = ("language", "_lexer", "_names", "_captures", "_scopes", "_bracket", "_delimiter")

    def __init__(
        self,
        language: str,
        lexer: Lexer,
        names: Sequence[str] = SCOPE_NAMES,
        captures: Mapping[_TokenType, str] | None = None,
    ) -> None:
        self.language = language
        self._lexer = lexer
        self._names = tuple(names)
        self._captures = {**CAPTURE_NAMES, **(captures or {})}
        self._scopes: dict[_TokenType, int | None] = {}
        self._bracket = match_capture("punctuation.bracket", self._names)
        self._delimiter = match_capture("punctuation.delimiter", self._names)

    def scope_for(self, token_type: _TokenType) -> int | None:
        """Return the scope index of a token type, walking up its parents."""
        try:
            return self._scopes[token_type]
        except KeyError:
            pass

        scope: int | None = None
        current: _TokenType | None = token_type
        while current is not None and current is not Token:
            capture = self._captures.get(current)
            if capture is not None:
                scope = match_capture(capture, self._names)
                break
            current = current.parent

        self._scopes[token_type] = scope
        return scope

    def _scope_for_token(self, token_type: _TokenType, value: str) -> int | None:
        scope = self.scope_for(token_type)
        if scope is not None and scope == self._delimiter and token_type in Punctuation:
            stripped = value.strip()
            if stripped and all(c in _BRACKETS for c in stripped):
                return self._bracket
        return scope

    def highlight(self, source: bytes) -> Iterator[HighlightEvent]:
        """Annotate ``source``, yielding one flat level of scopes.

        Consecutive tokens with the same scope are merged into one range.
        """
        text = source.decode(SOURCE_ENCODING, SOURCE_ERRORS)

        current: int | None = None
        start = 0
        byte_pos = 0
        char_pos = 0

        def encoded_len(value: str) -> int:
            return len(value.encode(SOURCE_ENCODING, SOURCE_ERRORS))

        for index, token_type, value in self._lexer.get_tokens_unprocessed(text):
            if not value:
                continue

            if index > char_pos:
                # Characters the lexer skipped stay unstyled.
                if current is not None:
                    if byte_pos > start:
                        yield Text(start, byte_pos)
                    yield ExitScope()
                    current = None
                    start = byte_pos
                byte_pos += encoded_len(text[char_pos:index])
                char_pos = index

            scope = self._scope_for_token(token_type, value)
            if scope != current:
                if byte_pos > start:
                    yield Text(start, byte_pos)
                if current is not None:
                    yield ExitScope()
                if scope is not None:
                    yield EnterScope(scope)
                current = scope
                start = byte_pos

            byte_pos += encoded_len(value)
            char_pos = index + len(value)

        if char_pos < len(text):
            if current is not None:
                if byte_pos > start:
                    yield Text(start, byte_pos)
                yield ExitScope()
                current = None
                start = byte_pos
            byte_pos += encoded_len(text[char_pos:])

        if byte_pos > start:
            yield Text(start, byte_pos)
        if current is not None:
            yield ExitScope()


def compile_grammar(language: LanguageSpec, names: Sequence[str] = SCOPE_NAMES) -> CompiledGrammar:
    """Load the lexer of ``language`` and configure it for ``names``.

    Raises:
        HighlightingError: If the grammar cannot be loaded
    """
    try:
        lexer = language.load()
    except Exception as e:
        raise HighlightingError(str(e), language.name) from e

    logger.debug("Compiled grammar for %s (%s)", language.name, type(lexer).__name__)
    return CompiledGrammar(language.name, lexer, names, dict(language.captures))


__all__ = [
    "CAPTURE_NAMES",
    "AnnotationSource",
    "CompiledGrammar",
    "compile_grammar",
]
