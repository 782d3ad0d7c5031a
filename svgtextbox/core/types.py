# svgtextbox/core/types.py
"""
Dataclasses for text box requests, font sizing policies and fit results.
All of them are immutable values built once per render request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from svgtextbox.core.config import DEFAULT_UNITS, MAX_FONT_SIZE_PT, UnitConfig
from svgtextbox.core.dimensions import DimensionSpec, StaticDimension
from svgtextbox.core.error_codes import INVALID_DIMENSION, InputValidationError
from svgtextbox.core.fonts import Alignment, FontDescriptor
from svgtextbox.core.padding import PaddingSpec


def _check_font_size(size_pt: int) -> None:
    if isinstance(size_pt, bool) or not isinstance(size_pt, int) or size_pt <= 0:
        raise InputValidationError(
            f"Font size must be a positive integer, got {size_pt!r}",
            error_key=INVALID_DIMENSION,
        )
    if size_pt > MAX_FONT_SIZE_PT:
        raise InputValidationError(
            f"Font size {size_pt}pt exceeds the maximum of {MAX_FONT_SIZE_PT}pt",
            error_key=INVALID_DIMENSION,
        )


@dataclass(frozen=True)
class FixedFontSize:
    """Pin the font size (pt); a non-fit is reported, never corrected."""
    size_pt: int

    def __post_init__(self) -> None:
        _check_font_size(self.size_pt)

    def candidates(self) -> list[int]:
        return [self.size_pt]


@dataclass(frozen=True)
class MaximizeFontSize:
    """Search the candidate sizes (pt) for the largest that fits."""
    sizes: DimensionSpec

    def __post_init__(self) -> None:
        _check_font_size(self.sizes.values()[-1])

    def candidates(self) -> list[int]:
        return self.sizes.values()


FontSizingPolicy = Union[FixedFontSize, MaximizeFontSize]


def font_sizing_from_dimension(spec: DimensionSpec) -> FontSizingPolicy:
    """A static size means Fixed; anything else is searched."""
    if isinstance(spec, StaticDimension):
        return FixedFontSize(spec.value)
    return MaximizeFontSize(spec)


@dataclass(frozen=True)
class TextBoxSpec:
    """Sanitized markup plus the admissible widths, heights (px) and font sizes (pt)."""
    markup: str
    width: DimensionSpec
    height: DimensionSpec
    font_sizing: FontSizingPolicy
    font: FontDescriptor = field(default_factory=FontDescriptor)
    alignment: Alignment = "center"

    def width_candidates(self) -> list[int]:
        return self.width.values()

    def height_candidates(self) -> list[int]:
        return self.height.values()

    def font_size_candidates(self) -> list[int]:
        return self.font_sizing.candidates()


@dataclass(frozen=True)
class TextBoxRequest:
    """
    A text box with its decoration and placement, as read from attributes or config.
    background holds extra attributes for the background rect.
    """
    spec: TextBoxSpec
    padding: PaddingSpec = field(default_factory=PaddingSpec)
    background: dict[str, str] = field(default_factory=dict)
    border_top: str | None = None
    border_bottom: str | None = None
    x: int = 0
    y: int = 0
    id: str | None = None

    @property
    def is_decorated(self) -> bool:
        return (
            not self.padding.is_zero
            or bool(self.background)
            or self.border_top is not None
            or self.border_bottom is not None
        )


@dataclass(frozen=True)
class FitResult:
    """Chosen box (px) and font size for a fitted text box, plus the rendered SVG."""
    width_px: int
    height_px: int
    font_size_scaled: int
    svg: bytes
    units: UnitConfig = DEFAULT_UNITS
    candidates_tried: int = 1

    @property
    def font_size_pt(self) -> float:
        return self.units.scaled_to_pt(self.font_size_scaled)


@dataclass(frozen=True)
class PaddedResult:
    """
    Fitted content box plus padding. Outer size is content size plus padding on each axis;
    content is drawn at (padding.left, padding.top).
    """
    content_width_px: int
    content_height_px: int
    font_size_scaled: int
    padding: PaddingSpec
    svg: bytes
    units: UnitConfig = DEFAULT_UNITS
    candidates_tried: int = 1

    @property
    def width_px(self) -> int:
        return self.content_width_px + self.padding.horizontal()

    @property
    def height_px(self) -> int:
        return self.content_height_px + self.padding.vertical()

    @property
    def content_offset(self) -> tuple[int, int]:
        return (self.padding.left, self.padding.top)

    @property
    def font_size_pt(self) -> float:
        return self.units.scaled_to_pt(self.font_size_scaled)


RenderResult = Union[FitResult, PaddedResult]
