# svgtextbox/core/config.py
"""
Central configuration for fit-optimizing text boxes.
All tunable values live here; no magic numbers in other modules.
Unit conversions go through an explicit UnitConfig so tests can vary them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# ----- Units -----
PX_TO_PT_RATIO: float = 0.75
"""Points per pixel: Ypx * PX_TO_PT_RATIO = Ypt."""

PANGO_SCALE: int = 1024
"""Scaled units per point used by the shaping backend."""

# ----- Markup -----
MAX_MARKUP_LENGTH: int = 1000
"""Longest accepted markup, in UTF-8 bytes, after stripping."""

# ----- Default dimensions (px) -----
DEFAULT_MIN_WIDTH_PX: int = 100
DEFAULT_MAX_WIDTH_PX: int = 1000
DEFAULT_WIDTH_STEP_PX: int = 10

DEFAULT_MIN_HEIGHT_PX: int = 100
DEFAULT_MAX_HEIGHT_PX: int = 1000
DEFAULT_HEIGHT_STEP_PX: int = 10

# ----- Default font sizing (pt) -----
DEFAULT_MIN_FONT_SIZE_PT: int = 1
DEFAULT_MAX_FONT_SIZE_PT: int = 100
DEFAULT_FONT_SIZE_STEP_PT: int = 1

MAX_FONT_SIZE_PT: int = 500
"""Hard ceiling on any candidate font size."""

# ----- Typography -----
DEFAULT_FONT_DESC: str = "Sans"
"""Pango font description string used when none is given."""

DEFAULT_ALIGNMENT: str = "center"

# ----- SVG -----
SVG_NS: str = "http://www.w3.org/2000/svg"
XLINK_NS: str = "http://www.w3.org/1999/xlink"

TEXTBOX_TAG: str = "textbox"
"""Element name replaced by a rendered image in document transforms."""

MARKUP_TAG: str = "markup"

# ----- Logging / debug -----
SVGTEXTBOX_DEBUG: bool = os.environ.get("SVGTEXTBOX_DEBUG", "").lower() in ("1", "true", "yes")
"""Log every oracle probe. Set env SVGTEXTBOX_DEBUG=1 to enable."""

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING").upper()


@dataclass(frozen=True)
class UnitConfig:
    """Pixel/point ratio and backend scale, passed explicitly to every conversion."""
    px_to_pt: float = PX_TO_PT_RATIO
    scale: int = PANGO_SCALE

    def px_to_pt_value(self, px: float) -> float:
        return px * self.px_to_pt

    def px_to_scaled(self, px: float) -> int:
        """Pixels to scaled units, truncating once at the end."""
        return int(px * self.px_to_pt * self.scale)

    def pt_to_scaled(self, pt: float) -> int:
        return int(pt * self.scale)

    def scaled_to_pt(self, scaled: int) -> float:
        return scaled / self.scale


DEFAULT_UNITS: UnitConfig = UnitConfig()
