"""ContextVar-based render configuration for scopepaint.

A Renderer snapshots the active RenderConfig when it is created, so changing
the context afterwards does not affect existing renderers.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent
    storage, so no locks are needed.

Usage:
    from scopepaint.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(class_prefix="hl")):
        renderer = Renderer(theme)  # classes are "hl-keyword", ...
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from scopepaint.languages import LanguageRegistry

DEFAULT_CLASS_PREFIX = "tsc"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        class_prefix: Prefix of generated CSS classes and custom properties
        registry: Language registry used to resolve language names
            (the default registry when None)
    """

    class_prefix: str = DEFAULT_CLASS_PREFIX
    registry: LanguageRegistry | None = None

    def __post_init__(self) -> None:
        if not self.class_prefix:
            raise ValueError("class_prefix must not be empty")

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> RenderConfig:
        """Create RenderConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> RenderConfig.from_dict({"class_prefix": "hl", "other": 1}).class_prefix
            'hl'
        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration of the current context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset the current context to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Use ``config`` within a block, restoring the previous one afterwards.

    The previous configuration is restored even if the block raises.
    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "DEFAULT_CLASS_PREFIX",
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
