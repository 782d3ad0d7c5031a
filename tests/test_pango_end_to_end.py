# tests/test_pango_end_to_end.py
"""
End-to-end fitting with the real Pango/cairo backend. Skipped when PyGObject,
pycairo or the Pango typelibs are missing. Assertions avoid font-specific sizes.
"""

from __future__ import annotations

import pytest

from svgtextbox.core.dimensions import RangeDimension, SetDimension, StaticDimension
from svgtextbox.core.error_codes import NoFitError
from svgtextbox.core.fit_predicate import fits
from svgtextbox.core.fonts import FontDescriptor
from svgtextbox.core.oracle import create_layout
from svgtextbox.core.resolver import resolve_fit, resolve_padded
from svgtextbox.core.types import FixedFontSize, MaximizeFontSize, TextBoxRequest, TextBoxSpec


@pytest.fixture(autouse=True)
def _require_pango() -> None:
    gi = pytest.importorskip("gi")
    pytest.importorskip("cairo")
    try:
        gi.require_version("Pango", "1.0")
        gi.require_version("PangoCairo", "1.0")
        from gi.repository import Pango, PangoCairo  # noqa: F401
    except (ImportError, ValueError):
        pytest.skip("Pango typelibs not installed")


def _spec(width, height, sizing) -> TextBoxSpec:
    return TextBoxSpec(markup="Hello World", width=width, height=height, font_sizing=sizing)


def test_maximize_in_fixed_box() -> None:
    result = resolve_fit(_spec(StaticDimension(100), StaticDimension(100), MaximizeFontSize(RangeDimension(1, 500))))
    assert (result.width_px, result.height_px) == (100, 100)
    assert 1 < result.font_size_pt < 75
    assert b"<svg" in result.svg
    assert b'width="75pt"' in result.svg


def test_chosen_size_fits_and_next_does_not() -> None:
    spec = _spec(StaticDimension(100), StaticDimension(100), MaximizeFontSize(RangeDimension(1, 500)))
    result = resolve_fit(spec)
    layout = create_layout(spec.markup, FontDescriptor(), "center")
    layout.set_box(76800, 76800)
    layout.set_font_size(result.font_size_scaled)
    assert fits(layout)
    layout.set_font_size(result.font_size_scaled + 1024)
    assert not fits(layout)


def test_fixed_size_smallest_height_chosen() -> None:
    result = resolve_fit(_spec(StaticDimension(100), SetDimension(frozenset([100, 200])), FixedFontSize(10)))
    assert result.height_px == 100


def test_too_small_box_is_no_fit() -> None:
    with pytest.raises(NoFitError):
        resolve_fit(_spec(StaticDimension(10), StaticDimension(10), MaximizeFontSize(RangeDimension(20, 25))))


def test_padded_render_has_background() -> None:
    request = TextBoxRequest(
        spec=_spec(StaticDimension(200), StaticDimension(100), MaximizeFontSize(RangeDimension(1, 100))),
        background={"fill": "yellow"},
    )
    result = resolve_padded(request)
    assert b"<rect" in result.svg
    assert b'fill="yellow"' in result.svg


@pytest.mark.parametrize("markup", ["Café", "I ❤️"])
def test_text_ending_in_multi_codepoint_grapheme_fits(markup) -> None:
    spec = TextBoxSpec(
        markup=markup,
        width=StaticDimension(100),
        height=StaticDimension(100),
        font_sizing=MaximizeFontSize(RangeDimension(1, 500)),
    )
    result = resolve_fit(spec)
    assert result.font_size_pt > 1
    layout = create_layout(markup, FontDescriptor(), "center")
    layout.set_box(76800, 76800)
    layout.set_font_size(result.font_size_scaled)
    assert layout.last_visible_index() == layout.last_character_index()
