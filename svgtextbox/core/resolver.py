# svgtextbox/core/resolver.py
"""
Fit resolution: enumerate box dimensions in minimal-growth order and, for each,
select a font size; the first (dimension, size) pair that fits wins.
Padded resolution shrinks candidates by the padding first and adds it back after.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterator, Sequence

from svgtextbox.core.config import DEFAULT_UNITS, UnitConfig
from svgtextbox.core.dimensions import (
    DimensionSpec,
    RangeDimension,
    SetDimension,
    StaticDimension,
)
from svgtextbox.core.error_codes import (
    PADDING_EXCEEDS_BOX,
    FixedSizeNoFitError,
    InputValidationError,
    NoFitError,
)
from svgtextbox.core.fontsize import check_fixed_size, make_probe, select_max_fitting_size
from svgtextbox.core.oracle import LayoutFactory, LayoutHandle, create_layout
from svgtextbox.core.padding import PaddingSpec
from svgtextbox.core.render_svg import insert_background
from svgtextbox.core.types import (
    FitResult,
    FixedFontSize,
    PaddedResult,
    RenderResult,
    TextBoxRequest,
    TextBoxSpec,
)

logger = logging.getLogger(__name__)


def candidate_dimensions(widths: Sequence[int], heights: Sequence[int]) -> Iterator[tuple[int, int]]:
    """
    Widths ascending at the minimum height, then heights ascending at the maximum width.
    Covers fixed/fixed, fixed/flexible, flexible/fixed and flexible/flexible alike;
    (max width, min height) is yielded once.
    """
    if not widths or not heights:
        return
    for w in widths:
        yield w, heights[0]
    for h in heights[1:]:
        yield widths[-1], h


@dataclass
class Resolution:
    """Live outcome of a search: the layout is left at the chosen box and size."""
    layout: LayoutHandle
    width_px: int
    height_px: int
    font_size_scaled: int
    candidates_tried: int


def resolve_layout(
    spec: TextBoxSpec,
    factory: LayoutFactory = create_layout,
    units: UnitConfig = DEFAULT_UNITS,
) -> Resolution:
    """
    Search the box's dimension and font-size space on one fresh layout.
    Raises FixedSizeNoFitError / NoFitError when nothing fits.
    """
    layout = factory(spec.markup, spec.font, spec.alignment, units)
    probe = make_probe(layout)
    sizes = [units.pt_to_scaled(s) for s in spec.font_size_candidates()]
    fixed = isinstance(spec.font_sizing, FixedFontSize)
    tried = 0
    for width_px, height_px in candidate_dimensions(spec.width_candidates(), spec.height_candidates()):
        tried += 1
        layout.set_box(units.px_to_scaled(width_px), units.px_to_scaled(height_px))
        if fixed:
            chosen = sizes[0] if check_fixed_size(sizes[0], probe) else None
        else:
            chosen = select_max_fitting_size(sizes, probe)
        logger.debug(f"candidate {width_px}x{height_px}px -> size {chosen}")
        if chosen is not None:
            return Resolution(layout, width_px, height_px, chosen, tried)
    if fixed:
        raise FixedSizeNoFitError(
            f"Text does not fit at {spec.font_size_candidates()[0]}pt in any of {tried} box sizes",
            candidates_tried=tried,
        )
    raise NoFitError(
        f"Text does not fit in any of {tried} box sizes at any allowed font size",
        candidates_tried=tried,
    )


def resolve_fit(
    spec: TextBoxSpec,
    factory: LayoutFactory = create_layout,
    units: UnitConfig = DEFAULT_UNITS,
) -> FitResult:
    """Fit and render an undecorated text box."""
    res = resolve_layout(spec, factory, units)
    return FitResult(
        width_px=res.width_px,
        height_px=res.height_px,
        font_size_scaled=res.font_size_scaled,
        svg=res.layout.render(),
        units=units,
        candidates_tried=res.candidates_tried,
    )


def shrink_dimension(spec: DimensionSpec, amount: int) -> DimensionSpec:
    """Subtract amount from every candidate; each must stay > 0."""
    if amount == 0:
        return spec
    smallest = spec.values()[0]
    if smallest - amount <= 0:
        raise InputValidationError(
            f"Padding of {amount}px leaves no room in a {smallest}px box",
            error_key=PADDING_EXCEEDS_BOX,
        )
    if isinstance(spec, StaticDimension):
        return StaticDimension(spec.value - amount)
    if isinstance(spec, RangeDimension):
        return RangeDimension(spec.min - amount, spec.max - amount, spec.step)
    return SetDimension(frozenset(v - amount for v in spec.options))


def content_spec(spec: TextBoxSpec, padding: PaddingSpec) -> TextBoxSpec:
    """The spec for the content box inside padding."""
    return replace(
        spec,
        width=shrink_dimension(spec.width, padding.horizontal()),
        height=shrink_dimension(spec.height, padding.vertical()),
    )


def resolve_padded(
    request: TextBoxRequest,
    factory: LayoutFactory = create_layout,
    units: UnitConfig = DEFAULT_UNITS,
) -> PaddedResult:
    """
    Fit the content box inside the padding, render it offset by (left, top)
    on the outer canvas and draw the background beneath it.
    """
    padding = request.padding
    res = resolve_layout(content_spec(request.spec, padding), factory, units)
    outer_w_pt = units.px_to_pt_value(res.width_px + padding.horizontal())
    outer_h_pt = units.px_to_pt_value(res.height_px + padding.vertical())
    svg = res.layout.render(
        outer_w_pt,
        outer_h_pt,
        units.px_to_pt_value(padding.left),
        units.px_to_pt_value(padding.top),
    )
    svg = insert_background(
        svg,
        outer_w_pt,
        outer_h_pt,
        request.background,
        request.border_top,
        request.border_bottom,
    )
    return PaddedResult(
        content_width_px=res.width_px,
        content_height_px=res.height_px,
        font_size_scaled=res.font_size_scaled,
        padding=padding,
        svg=svg,
        units=units,
        candidates_tried=res.candidates_tried,
    )


def render_textbox(
    request: TextBoxRequest,
    factory: LayoutFactory = create_layout,
    units: UnitConfig = DEFAULT_UNITS,
) -> RenderResult:
    """Plain fit for undecorated requests, padded composition otherwise."""
    if request.is_decorated:
        return resolve_padded(request, factory, units)
    return resolve_fit(request.spec, factory, units)
