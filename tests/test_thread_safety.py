"""Thread safety tests.

Themes are immutable and shared; each thread owns its Renderer. Concurrent
renders must produce exactly the single-threaded output.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from scopepaint import Renderer, Theme

SOURCES = {
    "rust": b'fn main() {\n    let s = "x";\n}\n',
    "python": b"def f():\n    return 'x' < 'y'\n",
    "javascript": b"const a = [1, 2];\n// done\n",
    "c": b"#include <stdio.h>\nint main(void) { return 0; }\n",
}


class TestConcurrentRenders:
    """Independent renderers on a shared theme."""

    def test_renderer_per_thread(self, theme: Theme) -> None:
        expected = {lang: list(Renderer(theme).render(lang, src)) for lang, src in SOURCES.items()}

        def work(lang: str) -> tuple[str, list[str]]:
            renderer = Renderer(theme)
            return lang, list(renderer.render(lang, SOURCES[lang]))

        jobs = [lang for lang in SOURCES for _ in range(8)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(work, jobs))

        for lang, lines in results:
            assert lines == expected[lang]

    def test_shared_theme_css_stable(self, theme: Theme) -> None:
        def css(_: int) -> str:
            return Renderer(theme).css()

        with ThreadPoolExecutor(max_workers=4) as pool:
            outputs = set(pool.map(css, range(16)))
        assert len(outputs) == 1
