"""Utility modules for scopepaint.

Provides:
- text: escape_html for span content
- logger: get_logger for logging
"""

from scopepaint.utils.logger import get_logger
from scopepaint.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
