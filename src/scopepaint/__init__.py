"""
scopepaint: themed HTML rendering of highlighted source code

Resolves Helix-style TOML themes into per-scope styles and renders highlight
annotation streams into one self-contained HTML fragment per source line,
plus the CSS that colors them.

Quick Start:
    >>> from scopepaint import Renderer, Theme
    >>> theme = Theme.from_helix(open("onedark.toml").read())
    >>> renderer = Renderer(theme)
    >>> css = renderer.css()
    >>> for line in renderer.render("rust", b"fn main() {}\\n"):
    ...     print(f"<tr><td class='tsc-line'>{line}</td></tr>")

Custom Annotation Streams:
    >>> from scopepaint import EnterScope, ExitScope, Text, scope_index
    >>> events = [EnterScope(scope_index("keyword")), Text(0, 2), ExitScope()]
    >>> list(renderer.render_events(events, b"if"))
    ['<span class="tsc-keyword">if</span>']
"""

from scopepaint.annotate import AnnotationSource, CompiledGrammar, compile_grammar
from scopepaint.cache import DictGrammarCache, GrammarCache
from scopepaint.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from scopepaint.css import class_name, css_classes, to_css
from scopepaint.errors import (
    ColorReferenceError,
    HighlightingError,
    InvalidThemeError,
    MalformedThemeError,
    ScopePaintError,
    SpanStackError,
    ThemeError,
    UnknownLanguageError,
)
from scopepaint.events import EnterScope, ExitScope, HighlightEvent, Text
from scopepaint.languages import (
    LanguageRegistry,
    LanguageRegistryBuilder,
    LanguageSpec,
    create_default_registry,
    language_for_path,
)
from scopepaint.renderer import Renderer, RenderSession, render_html
from scopepaint.scopes import SCOPE_COUNT, SCOPE_NAMES, match_capture, scope_index
from scopepaint.theme import Style, Theme, resolve_theme

__version__ = "0.1.0"

__all__ = [
    "SCOPE_COUNT",
    "SCOPE_NAMES",
    "AnnotationSource",
    "ColorReferenceError",
    "CompiledGrammar",
    "DictGrammarCache",
    "EnterScope",
    "ExitScope",
    "GrammarCache",
    "HighlightEvent",
    "HighlightingError",
    "InvalidThemeError",
    "LanguageRegistry",
    "LanguageRegistryBuilder",
    "LanguageSpec",
    "MalformedThemeError",
    "RenderConfig",
    "RenderSession",
    "Renderer",
    "ScopePaintError",
    "SpanStackError",
    "Style",
    "Text",
    "Theme",
    "ThemeError",
    "UnknownLanguageError",
    "__version__",
    "class_name",
    "compile_grammar",
    "create_default_registry",
    "css_classes",
    "get_render_config",
    "language_for_path",
    "match_capture",
    "render_config_context",
    "render_html",
    "reset_render_config",
    "resolve_theme",
    "scope_index",
    "set_render_config",
    "to_css",
]
