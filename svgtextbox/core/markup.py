# svgtextbox/core/markup.py
"""
Markup sanitizer: strip, reject empty / NUL / over-long input,
escape isolated ampersands, then trial-parse with the shaping backend.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from svgtextbox.core.config import MAX_MARKUP_LENGTH
from svgtextbox.core.error_codes import MarkupError

logger = logging.getLogger(__name__)

MarkupChecker = Callable[[str], None]

# '&' followed by whitespace can only be a literal ampersand.
_ISOLATED_AMPERSAND = re.compile(r"&(\s+)")
_FORBIDDEN_CHARS = ("\0",)


def escape_isolated_ampersands(s: str) -> str:
    """'Trouble & Strife' -> 'Trouble &amp; Strife'. Ambiguous entities are left alone."""
    if "&" not in s:
        return s
    return _ISOLATED_AMPERSAND.sub(r"&amp;\1", s)


def sanitize(
    raw: str,
    check: MarkupChecker | None = None,
    max_length: int = MAX_MARKUP_LENGTH,
) -> str:
    """
    Return cleaned markup or raise MarkupError (Empty, BadChar, TooLong, MalformedMarkup).
    check is the trial parser; defaults to the Pango markup parser.
    """
    if raw is None or not raw.strip():
        raise MarkupError("Empty")
    if any(c in raw for c in _FORBIDDEN_CHARS):
        raise MarkupError("BadChar")
    cleaned = raw.strip()
    size = len(cleaned.encode("utf-8"))
    if size > max_length:
        raise MarkupError("TooLong", f"Markup is {size} bytes; limit is {max_length}.")
    escaped = escape_isolated_ampersands(cleaned)
    if escaped != cleaned:
        logger.debug("Escaped isolated ampersands in markup")
    if check is None:
        from svgtextbox.core.oracle import check_markup
        check = check_markup
    check(escaped)
    return escaped
