# tests/test_markup.py
"""
Markup sanitizer: rejection codes, ampersand escaping, trial-parse hook.
Pango-backed parsing is covered when PyGObject and the Pango typelibs are present.
"""

from __future__ import annotations

import pytest

from svgtextbox.core.error_codes import MARKUP_EMPTY, MarkupError
from svgtextbox.core.markup import escape_isolated_ampersands, sanitize
from tests.fake_layout import no_check


def _require_pango() -> None:
    gi = pytest.importorskip("gi")
    try:
        gi.require_version("Pango", "1.0")
        gi.require_version("PangoCairo", "1.0")
        from gi.repository import Pango, PangoCairo  # noqa: F401
    except (ImportError, ValueError):
        pytest.skip("Pango typelibs not installed")


def test_strips_surrounding_whitespace() -> None:
    assert sanitize("  Hello World \n", check=no_check) == "Hello World"


@pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
def test_empty_and_whitespace_rejected(raw: str) -> None:
    with pytest.raises(MarkupError) as exc:
        sanitize(raw, check=no_check)
    assert exc.value.code == "Empty"
    assert exc.value.error_key == MARKUP_EMPTY


def test_nul_rejected() -> None:
    with pytest.raises(MarkupError) as exc:
        sanitize("Hello\0World", check=no_check)
    assert exc.value.code == "BadChar"


def test_length_limit() -> None:
    assert sanitize("a" * 1000, check=no_check) == "a" * 1000
    with pytest.raises(MarkupError) as exc:
        sanitize("a" * 1001, check=no_check)
    assert exc.value.code == "TooLong"


def test_length_limit_counts_utf8_bytes() -> None:
    assert sanitize("é" * 500, check=no_check) == "é" * 500
    with pytest.raises(MarkupError) as exc:
        sanitize("é" * 501, check=no_check)
    assert exc.value.code == "TooLong"


def test_isolated_ampersand_escaped() -> None:
    assert sanitize("Trouble & Strife", check=no_check) == "Trouble &amp; Strife"
    assert escape_isolated_ampersands("A &\tB") == "A &amp;\tB"


def test_ambiguous_ampersand_left_for_parser() -> None:
    assert escape_isolated_ampersands("Trouble &amp Strife") == "Trouble &amp Strife"
    assert escape_isolated_ampersands("Fish &amp; Chips") == "Fish &amp; Chips"


def test_checker_receives_escaped_markup() -> None:
    seen: list[str] = []
    sanitize("Salt & Pepper", check=seen.append)
    assert seen == ["Salt &amp; Pepper"]


def test_checker_error_propagates() -> None:
    def reject(markup: str) -> None:
        raise MarkupError("MalformedMarkup")

    with pytest.raises(MarkupError) as exc:
        sanitize("<b>bold", check=reject)
    assert exc.value.code == "MalformedMarkup"


def test_pango_accepts_escaped_ampersand() -> None:
    _require_pango()
    assert sanitize("Trouble & Strife") == "Trouble &amp; Strife"
    assert sanitize("Hello <b>World</b>") == "Hello <b>World</b>"


@pytest.mark.parametrize("raw", ["Trouble &amp Strife", "<span>unclosed", "1 < 2"])
def test_pango_rejects_malformed(raw: str) -> None:
    _require_pango()
    with pytest.raises(MarkupError) as exc:
        sanitize(raw)
    assert exc.value.code == "MalformedMarkup"
