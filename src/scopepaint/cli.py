"""Command-line entry point: render a source file to a standalone HTML page.

Usage:
    scopepaint --theme themes/onedark.toml --source src/main.rs > main.html
    python -m scopepaint --theme onedark.toml --source app.js --language javascript
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from html import escape
from pathlib import Path
from typing import TextIO

from scopepaint.config import DEFAULT_CLASS_PREFIX, RenderConfig
from scopepaint.errors import MalformedThemeError, ScopePaintError, UnknownLanguageError
from scopepaint.languages import create_default_registry
from scopepaint.renderer import Renderer
from scopepaint.theme import Theme
from scopepaint.utils.logger import get_logger

logger = get_logger(__name__)

PAGE_HEAD = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <style>
{css}
    body {{ color: var(--{prefix}-main-fg-color); background-color: var(--{prefix}-main-bg-color); }}
  </style>
</head>
<body>
  <pre>
    <table>
      <tbody>
"""

PAGE_TAIL = """      </tbody>
    </table>
  </pre>
</body>
</html>
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scopepaint",
        description="Render a source file to themed HTML.",
    )
    parser.add_argument("--theme", type=Path, required=True, help="Path to a Helix theme (TOML)")
    parser.add_argument("--source", type=Path, required=True, help="Path to a source file")
    parser.add_argument(
        "--language",
        help="Language name (guessed from the file extension if omitted)",
    )
    parser.add_argument(
        "--prefix",
        default=DEFAULT_CLASS_PREFIX,
        help=f"CSS class prefix (default: {DEFAULT_CLASS_PREFIX})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def write_page(
    out: TextIO,
    renderer: Renderer,
    lines: Iterable[str],
    title: str,
) -> None:
    """Write a complete HTML page with one table row per rendered line."""
    prefix = renderer.class_prefix
    out.write(PAGE_HEAD.format(title=escape(title), css=renderer.css(), prefix=prefix))
    for line in lines:
        out.write(f'<tr><td class="{prefix}-line">{line}</td></tr>\n')
    out.write(PAGE_TAIL)


def run(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Run the command line, returning the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.prefix:
        parser.error("--prefix must not be empty")
    out = out or sys.stdout

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    registry = create_default_registry()
    try:
        if args.language:
            language = registry.get(args.language)
            if language is None:
                raise UnknownLanguageError(args.language)
        else:
            language = registry.for_path(args.source)
            if language is None:
                raise UnknownLanguageError(str(args.source))

        source = args.source.read_bytes()
        try:
            document = args.theme.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise MalformedThemeError(f"theme {args.theme} is not valid UTF-8: {e}") from e
        theme = Theme.from_helix(document)
        renderer = Renderer(theme, config=RenderConfig(class_prefix=args.prefix, registry=registry))

        # Render fully before writing so failures never leave a partial page.
        lines = list(renderer.render(language, source))
        write_page(out, renderer, lines, title=args.source.name)
    except (ScopePaintError, OSError) as e:
        logger.debug("Rendering %s failed", args.source, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


def main() -> None:
    sys.exit(run())
