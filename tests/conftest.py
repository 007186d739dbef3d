"""Shared fixtures for scopepaint tests."""

from __future__ import annotations

import pytest

THEME_DOCUMENT = """
keyword = "red"
comment = { fg = "grey", modifiers = ["italic"] }
string = { fg = "green", modifiers = ["bold", "italic"] }
"function.method" = "blue"
"ui.text" = "white"
"ui.background" = { bg = "black" }

[palette]
red = "#ff0000"
green = "#00ff00"
blue = "#0000ff"
grey = "#888888"
white = "#eeeeee"
black = "#111111"
"""


@pytest.fixture
def theme_document() -> str:
    return THEME_DOCUMENT


@pytest.fixture
def theme():
    from scopepaint.theme import Theme

    return Theme.from_helix(THEME_DOCUMENT)


@pytest.fixture
def renderer(theme):
    from scopepaint.renderer import Renderer

    return Renderer(theme)
