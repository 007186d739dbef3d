"""Language registry: identifiers, file extensions and grammar loaders.

Each supported language is described by a LanguageSpec. The registry maps
names and file extensions to specs and is immutable once built.

Thread Safety:
    LanguageRegistry is immutable after creation. Safe to share.
    Use LanguageRegistryBuilder for mutable construction.

Example:
    >>> registry = create_default_registry()
    >>> registry.for_path("src/main.rs").name
    'rust'
    >>> registry.for_path("notes.txt") is None
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import TYPE_CHECKING

from pygments.token import Name, _TokenType

if TYPE_CHECKING:
    from pygments.lexer import Lexer


@dataclass(frozen=True, slots=True)
class LanguageSpec:
    """Capability descriptor of one language.

    Attributes:
        name: Registry identifier (e.g. "rust")
        extensions: File extensions without the leading dot
        lexer_alias: Pygments lexer alias that provides the grammar
        captures: Per-language (token type, capture name) overrides applied
            on top of scopepaint.annotate.CAPTURE_NAMES
    """

    name: str
    extensions: tuple[str, ...]
    lexer_alias: str
    captures: tuple[tuple[_TokenType, str], ...] = ()

    def load(self) -> Lexer:
        """Create a fresh lexer for this language.

        Leading and trailing newlines are kept so token offsets line up with
        the source buffer.

        Raises:
            pygments.util.ClassNotFound: If Pygments has no such lexer
        """
        from pygments.lexers import get_lexer_by_name

        return get_lexer_by_name(self.lexer_alias, stripnl=False, ensurenl=False)


class LanguageRegistry:
    """Immutable registry of languages.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_specs", "_by_name", "_by_extension")

    def __init__(
        self,
        specs: tuple[LanguageSpec, ...],
        by_name: dict[str, LanguageSpec],
        by_extension: dict[str, LanguageSpec],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use LanguageRegistryBuilder to create instances.
        """
        self._specs = specs
        self._by_name = by_name
        self._by_extension = by_extension

    def get(self, name: str) -> LanguageSpec | None:
        """Get the language registered under ``name``."""
        return self._by_name.get(name)

    def for_extension(self, extension: str) -> LanguageSpec | None:
        """Get the language for a file extension, with or without the leading dot."""
        return self._by_extension.get(extension.lstrip(".").lower())

    def for_path(self, path: str | PurePath) -> LanguageSpec | None:
        """Guess the language of a file from its extension."""
        suffix = PurePath(path).suffix
        if not suffix:
            return None
        return self.for_extension(suffix)

    @property
    def names(self) -> frozenset[str]:
        """Get all registered language names."""
        return frozenset(self._by_name)

    @property
    def specs(self) -> tuple[LanguageSpec, ...]:
        """Get all registered languages in registration order."""
        return self._specs

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)


class LanguageRegistryBuilder:
    """Mutable builder for LanguageRegistry.

    Example:
        >>> builder = LanguageRegistryBuilder()
        >>> registry = builder.register(LanguageSpec("go", ("go",), "go")).build()
        >>> "go" in registry
        True
    """

    __slots__ = ("_specs", "_by_name", "_by_extension")

    def __init__(self) -> None:
        self._specs: list[LanguageSpec] = []
        self._by_name: dict[str, LanguageSpec] = {}
        self._by_extension: dict[str, LanguageSpec] = {}

    def register(self, spec: LanguageSpec) -> LanguageRegistryBuilder:
        """Register a language.

        Returns:
            Self for chaining

        Raises:
            ValueError: If the name or one of the extensions is already taken
        """
        if spec.name in self._by_name:
            msg = f"Language '{spec.name}' already registered"
            raise ValueError(msg)

        extensions = [ext.lstrip(".").lower() for ext in spec.extensions]
        for ext in extensions:
            if ext in self._by_extension:
                existing = self._by_extension[ext]
                msg = f"Extension '.{ext}' already registered by '{existing.name}'"
                raise ValueError(msg)

        self._specs.append(spec)
        self._by_name[spec.name] = spec
        for ext in extensions:
            self._by_extension[ext] = spec
        return self

    def build(self) -> LanguageRegistry:
        """Build the immutable registry."""
        return LanguageRegistry(
            specs=tuple(self._specs),
            by_name=dict(self._by_name),
            by_extension=dict(self._by_extension),
        )


BUILTIN_LANGUAGES: tuple[LanguageSpec, ...] = (
    LanguageSpec("c", ("c", "h"), "c"),
    LanguageSpec("cpp", ("cpp", "cc", "cxx", "hpp", "hh"), "cpp"),
    LanguageSpec("javascript", ("js", "mjs", "cjs"), "javascript"),
    LanguageSpec("rust", ("rs",), "rust"),
    LanguageSpec(
        "python",
        ("py", "pyi"),
        "python",
        captures=((Name.Function.Magic, "function.builtin"),),
    ),
)

_default_registry: LanguageRegistry | None = None


def create_default_registry() -> LanguageRegistry:
    """Return the registry of built-in languages.

    Built once and reused; the registry is immutable.
    """
    global _default_registry
    if _default_registry is None:
        builder = LanguageRegistryBuilder()
        for spec in BUILTIN_LANGUAGES:
            builder.register(spec)
        _default_registry = builder.build()
    return _default_registry


def language_for_path(path: str | PurePath) -> LanguageSpec | None:
    """Guess a built-in language from a file path, or None."""
    return create_default_registry().for_path(path)


__all__ = [
    "BUILTIN_LANGUAGES",
    "LanguageRegistry",
    "LanguageRegistryBuilder",
    "LanguageSpec",
    "create_default_registry",
    "language_for_path",
]
