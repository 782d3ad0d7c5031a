# svgtextbox/core/attributes.py
"""
Build a TextBoxRequest from an attribute map (SVG <textbox> attributes or JSON keys).
Each sizing value has a primary key ('width') and min/max/step fallbacks with defaults.
Attributes not consumed here are passed on to the background rect.
"""

from __future__ import annotations

from typing import Any, Mapping

from svgtextbox.core.config import (
    DEFAULT_FONT_SIZE_STEP_PT,
    DEFAULT_HEIGHT_STEP_PX,
    DEFAULT_MAX_FONT_SIZE_PT,
    DEFAULT_MAX_HEIGHT_PX,
    DEFAULT_MAX_WIDTH_PX,
    DEFAULT_MIN_FONT_SIZE_PT,
    DEFAULT_MIN_HEIGHT_PX,
    DEFAULT_MIN_WIDTH_PX,
    DEFAULT_WIDTH_STEP_PX,
)
from svgtextbox.core.dimensions import (
    DimensionSpec,
    dimension_from_range_values,
    dimension_from_value,
)
from svgtextbox.core.error_codes import InputValidationError
from svgtextbox.core.fonts import font_descriptor_from_attributes, parse_alignment
from svgtextbox.core.markup import MarkupChecker, sanitize
from svgtextbox.core.padding import PaddingSpec, padding_from_value
from svgtextbox.core.types import TextBoxRequest, TextBoxSpec, font_sizing_from_dimension

# (primary key, ((fallback key, default), ...))
WIDTH_KEYS = ("width", (("min-width", DEFAULT_MIN_WIDTH_PX), ("max-width", DEFAULT_MAX_WIDTH_PX), ("width-step", DEFAULT_WIDTH_STEP_PX)))
HEIGHT_KEYS = ("height", (("min-height", DEFAULT_MIN_HEIGHT_PX), ("max-height", DEFAULT_MAX_HEIGHT_PX), ("height-step", DEFAULT_HEIGHT_STEP_PX)))
FONT_SIZE_KEYS = ("font-size", (("min-font-size", DEFAULT_MIN_FONT_SIZE_PT), ("max-font-size", DEFAULT_MAX_FONT_SIZE_PT), ("font-size-step", DEFAULT_FONT_SIZE_STEP_PT)))
PADDING_SIDES = ("padding-top", "padding-right", "padding-bottom", "padding-left")

FONT_KEYS = ("font-desc", "font-family", "font-style", "font-weight", "font-variant", "font-stretch")


def _int(value: Any, key: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise InputValidationError(f"Attribute {key!r} must be an integer, got {value!r}") from None


def _take_dimension(attrs: dict[str, Any], keys: tuple) -> DimensionSpec:
    """Primary key wins; otherwise min/max/step fallbacks (all consumed either way)."""
    primary, fallbacks = keys
    values = [_int(attrs.pop(k, default), k) for k, default in fallbacks]
    if primary in attrs:
        return dimension_from_value(attrs.pop(primary))
    return dimension_from_range_values(*values)


def _take_padding(attrs: dict[str, Any]) -> PaddingSpec:
    sides = [_int(attrs.pop(k, 0), k) for k in PADDING_SIDES]
    if "padding" in attrs:
        return padding_from_value(attrs.pop("padding"))
    return PaddingSpec(*sides)


def request_from_attributes(
    markup: str,
    attributes: Mapping[str, Any],
    check: MarkupChecker | None = None,
) -> TextBoxRequest:
    """
    Sanitize markup and read sizing, padding, alignment, font and placement keys.
    x and y default to 0; __id / id name the box.
    """
    attrs = dict(attributes)
    clean = sanitize(markup, check=check)
    x = _int(attrs.pop("x", 0), "x")
    y = _int(attrs.pop("y", 0), "y")
    internal_id = attrs.pop("__id", None)
    box_id = attrs.pop("id", None) or internal_id
    width = _take_dimension(attrs, WIDTH_KEYS)
    height = _take_dimension(attrs, HEIGHT_KEYS)
    font_size = _take_dimension(attrs, FONT_SIZE_KEYS)
    padding = _take_padding(attrs)
    alignment = parse_alignment(attrs.pop("alignment", None))
    font = font_descriptor_from_attributes({k: attrs.pop(k) for k in FONT_KEYS if k in attrs})
    border_top = attrs.pop("border-top", None)
    border_bottom = attrs.pop("border-bottom", None)
    spec = TextBoxSpec(
        markup=clean,
        width=width,
        height=height,
        font_sizing=font_sizing_from_dimension(font_size),
        font=font,
        alignment=alignment,
    )
    return TextBoxRequest(
        spec=spec,
        padding=padding,
        background={k: str(v) for k, v in attrs.items()},
        border_top=border_top,
        border_bottom=border_bottom,
        x=x,
        y=y,
        id=box_id,
    )
