# svgtextbox/core/fonts.py
"""
Font descriptor and alignment parsing. The descriptor is a plain value;
the Pango layer turns it into a Pango.FontDescription.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping

from svgtextbox.core.config import DEFAULT_ALIGNMENT, DEFAULT_FONT_DESC
from svgtextbox.core.error_codes import InputValidationError

Alignment = Literal["left", "center", "right"]

WEIGHTS: dict[str, int] = {
    "thin": 100,
    "ultralight": 200,
    "light": 300,
    "semilight": 350,
    "book": 380,
    "normal": 400,
    "medium": 500,
    "semibold": 600,
    "bold": 700,
    "ultrabold": 800,
    "heavy": 900,
    "ultraheavy": 1000,
}
"""Pango weight names and their numeric values."""

STYLES: tuple[str, ...] = ("normal", "oblique", "italic")
VARIANTS: tuple[str, ...] = ("normal", "small_caps")
STRETCHES: tuple[str, ...] = (
    "ultra_condensed",
    "extra_condensed",
    "condensed",
    "semi_condensed",
    "normal",
    "semi_expanded",
    "expanded",
    "extra_expanded",
    "ultra_expanded",
)

_ALIGNMENTS: dict[str, Alignment] = {
    "left": "left",
    "center": "center",
    "centre": "center",
    "right": "right",
}


def _key(s: str) -> str:
    return str(s).strip().lower().replace("-", "_")


def parse_alignment(s: str | None) -> Alignment:
    """left / center / centre / right, any case."""
    if s is None or not s.strip():
        return DEFAULT_ALIGNMENT  # type: ignore[return-value]
    try:
        return _ALIGNMENTS[s.strip().lower()]
    except KeyError:
        raise InputValidationError(f"Unknown alignment: {s!r}") from None


def parse_weight(s: str | int) -> str:
    """Weight name ('bold') or number (700) -> canonical weight name."""
    if isinstance(s, int) or s.strip().isdigit():
        n = int(s)
        for name, value in WEIGHTS.items():
            if value == n:
                return name
        raise InputValidationError(f"Unknown font weight: {s!r}")
    k = _key(s).replace("_", "")
    if k not in WEIGHTS:
        raise InputValidationError(f"Unknown font weight: {s!r}")
    return k


def _pick(value: str, allowed: tuple[str, ...], what: str) -> str:
    k = _key(value)
    if k == "smallcaps":
        k = "small_caps"
    if k not in allowed:
        raise InputValidationError(f"Unknown font {what}: {value!r}")
    return k


@dataclass(frozen=True)
class FontDescriptor:
    """Pango description string plus optional overrides applied on top of it."""
    description: str = DEFAULT_FONT_DESC
    family: str | None = None
    style: str | None = None
    weight: str | None = None
    variant: str | None = None
    stretch: str | None = None


def font_descriptor_from_attributes(attrs: Mapping[str, str]) -> FontDescriptor:
    """Read font-desc, font-family, font-style, font-weight, font-variant, font-stretch."""
    style = attrs.get("font-style")
    weight = attrs.get("font-weight")
    variant = attrs.get("font-variant")
    stretch = attrs.get("font-stretch")
    return FontDescriptor(
        description=attrs.get("font-desc") or DEFAULT_FONT_DESC,
        family=attrs.get("font-family") or None,
        style=_pick(style, STYLES, "style") if style else None,
        weight=parse_weight(weight) if weight else None,
        variant=_pick(variant, VARIANTS, "variant") if variant else None,
        stretch=_pick(stretch, STRETCHES, "stretch") if stretch else None,
    )
