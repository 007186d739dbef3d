"""Text processing utilities for scopepaint."""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape the five markup-significant characters.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Line terminators and all other characters pass through unchanged.

    Examples:
        >>> escape_html("if a < b && c > 'd'")
        'if a &lt; b &amp;&amp; c &gt; &#x27;d&#x27;'
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)
