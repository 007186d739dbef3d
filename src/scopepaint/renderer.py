"""HTML renderer for highlight event streams.

Turns an annotation stream over a source buffer into one HTML fragment per
source line. Every fragment is self-contained: spans still open at a line
break are closed before it and reopened on the next line, so callers can
wrap each line in its own element (e.g. a table row) without styles
bleeding across lines.

Thread Safety:
    Per-call state lives in a RenderSession created for each render. The
    grammar cache is per Renderer instance and unsynchronized: use one
    Renderer per thread, or lock around render calls. Themes are immutable
    and may be shared by any number of renderers.

Example:
    >>> theme = Theme.from_helix('keyword = "red"\\n[palette]\\nred = "#f00"')
    >>> renderer = Renderer(theme)
    >>> list(renderer.render("rust", b"fn main() {}"))[0][:32]
    '<span class="tsc-keyword">fn</sp'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from scopepaint.annotate import CompiledGrammar, compile_grammar
from scopepaint.cache import DictGrammarCache, GrammarCache
from scopepaint.config import RenderConfig, get_render_config
from scopepaint.css import css_classes, to_css
from scopepaint.errors import (
    HighlightingError,
    ScopePaintError,
    SpanStackError,
    UnknownLanguageError,
)
from scopepaint.events import EnterScope, ExitScope, HighlightEvent, Text
from scopepaint.languages import LanguageSpec, create_default_registry
from scopepaint.scopes import SCOPE_NAMES
from scopepaint.utils.logger import get_logger
from scopepaint.utils.text import escape_html

if TYPE_CHECKING:
    from scopepaint.languages import LanguageRegistry
    from scopepaint.theme import Theme

logger = get_logger(__name__)

_BARE_SPAN = "<span>"
_CLOSE_SPAN = "</span>"


@dataclass(slots=True)
class RenderSession:
    """Per-render mutable state.

    Created fresh for each render call and discarded afterwards.

    Attributes:
        stack: Scope indices of the currently open spans, innermost last
        parts: Pieces of the line being built
        has_text: Whether the current line holds any source text yet
    """

    stack: list[int] = field(default_factory=list)
    parts: list[str] = field(default_factory=list)
    has_text: bool = False


class Renderer:
    """Renders source buffers to per-line HTML with a fixed theme.

    Args:
        theme: Resolved theme; read-only for the renderer's lifetime
        config: Render configuration (the context's active config if None)
        cache: Grammar cache owned by this renderer (a new dict cache if None)
    """

    __slots__ = ("theme", "config", "_registry", "_css_classes", "_open_tags", "_grammars")

    def __init__(
        self,
        theme: Theme,
        *,
        config: RenderConfig | None = None,
        cache: GrammarCache | None = None,
    ) -> None:
        self.theme = theme
        self.config = config or get_render_config()
        self._registry: LanguageRegistry = self.config.registry or create_default_registry()
        self._css_classes = css_classes(theme, self.config.class_prefix)
        self._open_tags = {
            index: f"<span {attribute}>" for index, attribute in self._css_classes.items()
        }
        self._grammars: GrammarCache = cache if cache is not None else DictGrammarCache()

    @property
    def class_prefix(self) -> str:
        return self.config.class_prefix

    def css(self) -> str:
        """Generate the stylesheet for this renderer's theme and prefix."""
        return to_css(self.theme, self.config.class_prefix)

    def class_attribute(self, index: int) -> str | None:
        """Return the cached ``class="..."`` attribute of a scope, if styled."""
        return self._css_classes.get(index)

    def language(self, language: str | LanguageSpec) -> LanguageSpec:
        """Resolve a language name through the configured registry.

        Raises:
            UnknownLanguageError: If the name is not registered
        """
        if isinstance(language, LanguageSpec):
            return language
        spec = self._registry.get(language)
        if spec is None:
            raise UnknownLanguageError(language)
        return spec

    def grammar(self, language: str | LanguageSpec) -> CompiledGrammar:
        """Return the compiled grammar of ``language``, compiling it on first use.

        Raises:
            UnknownLanguageError: If the name is not registered
            HighlightingError: If the grammar cannot be loaded
        """
        spec = self.language(language)
        grammar = self._grammars.get(spec.name)
        if grammar is None:
            grammar = compile_grammar(spec, SCOPE_NAMES)
            self._grammars.put(spec.name, grammar)
        else:
            logger.debug("Grammar cache hit for %s", spec.name)
        return grammar

    def render(self, language: str | LanguageSpec, source: bytes | str) -> Iterator[str]:
        """Render ``source`` to HTML lines.

        The grammar is resolved and the annotation stream requested before
        this method returns; lines are produced lazily as the returned
        iterator is consumed.

        Args:
            language: Registered language name or LanguageSpec
            source: Source buffer (str is encoded as UTF-8)

        Returns:
            Iterator over one HTML fragment per source line, without line
            terminators

        Raises:
            UnknownLanguageError: If the language is not registered
            HighlightingError: If the annotation source fails, here or while
                iterating
            SpanStackError: If the annotation stream is unbalanced
        """
        if isinstance(source, str):
            source = source.encode("utf-8")

        grammar = self.grammar(language)
        try:
            events = grammar.highlight(source)
        except ScopePaintError:
            raise
        except Exception as e:
            raise HighlightingError(str(e), grammar.language) from e

        return self.render_events(events, source, language=grammar.language)

    def render_events(
        self,
        events: Iterable[HighlightEvent],
        source: bytes,
        *,
        language: str | None = None,
    ) -> Iterator[str]:
        """Render an annotation stream produced elsewhere.

        Exceptions raised while iterating ``events`` surface as
        HighlightingError.
        """
        session = RenderSession()
        iterator: Iterator[HighlightEvent] | None = None

        while True:
            try:
                if iterator is None:
                    iterator = iter(events)
                event = next(iterator)
            except StopIteration:
                break
            except ScopePaintError:
                raise
            except Exception as e:
                raise HighlightingError(str(e), language) from e

            match event:
                case EnterScope(index=index):
                    session.stack.append(index)
                    session.parts.append(self._open_tags.get(index, _BARE_SPAN))
                case ExitScope():
                    if not session.stack:
                        raise SpanStackError("scope closed while no span is open")
                    session.stack.pop()
                    session.parts.append(_CLOSE_SPAN)
                case Text(start=start, end=end):
                    chunk = source[start:end].decode("utf-8", "replace")
                    yield from self._add_text(session, chunk)
                case _:
                    msg = f"unexpected highlight event {event!r}"
                    raise TypeError(msg)

        if session.stack:
            raise SpanStackError(
                f"annotation stream ended with {len(session.stack)} open scope(s)",
                tuple(session.stack),
            )

        if session.has_text:
            yield "".join(session.parts)

    def _add_text(self, session: RenderSession, chunk: str) -> Iterator[str]:
        pieces = chunk.split("\n")
        for piece in pieces[:-1]:
            if piece.endswith("\r"):
                piece = piece[:-1]
            if piece:
                session.parts.append(escape_html(piece))
            yield self._end_line(session)

        last = pieces[-1]
        if last:
            session.parts.append(escape_html(last))
            session.has_text = True

    def _end_line(self, session: RenderSession) -> str:
        """Close open spans, return the finished line, and reopen them."""
        session.parts.append(_CLOSE_SPAN * len(session.stack))
        line = "".join(session.parts)
        session.parts = [self._open_tags.get(index, _BARE_SPAN) for index in session.stack]
        session.has_text = False
        return line


def render_html(theme: Theme, language: str | LanguageSpec, source: bytes | str) -> list[str]:
    """Render ``source`` with a throwaway Renderer and collect the lines."""
    return list(Renderer(theme).render(language, source))


__all__ = [
    "RenderSession",
    "Renderer",
    "render_html",
]
