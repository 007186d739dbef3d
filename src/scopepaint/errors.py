"""Exception classes for scopepaint.

Recoverable failures derive from ScopePaintError. SpanStackError signals a
broken annotation stream and deliberately sits outside that hierarchy.
"""

from __future__ import annotations


class ScopePaintError(Exception):
    """Base exception for all recoverable scopepaint errors."""

    pass


class ThemeError(ScopePaintError):
    """Base exception for theme resolution failures."""

    pass


class MalformedThemeError(ThemeError):
    """Theme document is not valid TOML or lacks a palette.

    When raised for a TOML syntax error, the original
    ``tomllib.TOMLDecodeError`` is available as ``__cause__``.
    """

    pass


class InvalidThemeError(ThemeError):
    """Theme document parses but its top level is not a table."""

    def __init__(self, message: str = "document does not contain a valid theme") -> None:
        super().__init__(message)


class ColorReferenceError(ThemeError):
    """A theme entry references a color missing from the palette.

    Attributes:
        scope: Theme entry that holds the reference (e.g. "keyword", "ui.text")
        field: Table field holding the reference ("fg", "bg"), or None for
            the bare-reference form
        reference: The palette name that failed to resolve, or None when the
            field itself is missing
    """

    def __init__(
        self,
        scope: str,
        *,
        field: str | None = None,
        reference: str | None = None,
    ) -> None:
        self.scope = scope
        self.field = field
        self.reference = reference

        target = f"{scope}.{field}" if field else scope
        if reference is None:
            message = f"color reference for '{target}' is missing"
        else:
            message = f"color '{reference}' referenced by '{target}' not found in palette"
        super().__init__(message)


class HighlightingError(ScopePaintError):
    """The annotation source failed to produce highlight events.

    The collaborator's exception is chained as ``__cause__``; its message is
    kept in the error text.
    """

    def __init__(self, message: str, language: str | None = None) -> None:
        self.language = language
        prefix = f"highlighting {language} failed" if language else "highlighting failed"
        super().__init__(f"{prefix}: {message}")


class UnknownLanguageError(ScopePaintError):
    """No registered language matches an identifier or file path."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"cannot determine language for '{name}'")


class SpanStackError(RuntimeError):
    """Open-span stack is unbalanced.

    Raised when an annotation stream ends with scopes still open or closes a
    scope that was never opened. This is a contract breach by the annotation
    source, not a recoverable condition.
    """

    def __init__(self, message: str, open_scopes: tuple[int, ...] = ()) -> None:
        self.open_scopes = open_scopes
        super().__init__(message)
