# svgtextbox/core/padding.py
"""
Padding around a text box, parsed with CSS shorthand rules:
1 value (all), 2 (top/bottom, right/left), 3 (top, right/left, bottom), 4 (top, right, bottom, left).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from svgtextbox.core.error_codes import INVALID_PADDING, InputValidationError


@dataclass(frozen=True)
class PaddingSpec:
    """Non-negative padding in px on each side."""
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __post_init__(self) -> None:
        for side in ("top", "right", "bottom", "left"):
            v = getattr(self, side)
            if isinstance(v, bool) or not isinstance(v, int) or v < 0:
                raise InputValidationError(
                    f"Padding {side} must be a non-negative integer, got {v!r}",
                    error_key=INVALID_PADDING,
                )

    def horizontal(self) -> int:
        return self.left + self.right

    def vertical(self) -> int:
        return self.top + self.bottom

    @property
    def is_zero(self) -> bool:
        return self.horizontal() == 0 and self.vertical() == 0

    def __str__(self) -> str:
        return f"{self.top} {self.right} {self.bottom} {self.left}"


def padding_from_values(values: Sequence[int]) -> PaddingSpec:
    """Expand 1 to 4 shorthand values to the four sides."""
    v = list(values)
    if len(v) == 1:
        return PaddingSpec(v[0], v[0], v[0], v[0])
    if len(v) == 2:
        return PaddingSpec(v[0], v[1], v[0], v[1])
    if len(v) == 3:
        return PaddingSpec(v[0], v[1], v[2], v[1])
    if len(v) == 4:
        return PaddingSpec(v[0], v[1], v[2], v[3])
    raise InputValidationError(
        f"Padding takes 1 to 4 values, got {len(v)}",
        error_key=INVALID_PADDING,
    )


def parse_padding(s: str) -> PaddingSpec:
    """Parse '10', '10 20', '10 20 30' or '10 20 30 40'."""
    out: list[int] = []
    for part in (s or "").split():
        try:
            out.append(int(part))
        except ValueError:
            raise InputValidationError(
                f"Padding value is not an integer: {part!r}",
                error_key=INVALID_PADDING,
            ) from None
    return padding_from_values(out)


def padding_from_value(value: Any) -> PaddingSpec:
    """Accept a PaddingSpec, an int, a shorthand string, a list, or a side mapping."""
    if value is None:
        return PaddingSpec()
    if isinstance(value, PaddingSpec):
        return value
    if isinstance(value, str):
        return parse_padding(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return padding_from_values([value])
    if isinstance(value, dict):
        return PaddingSpec(
            top=value.get("top", 0),
            right=value.get("right", 0),
            bottom=value.get("bottom", 0),
            left=value.get("left", 0),
        )
    if isinstance(value, (list, tuple)):
        return padding_from_values(value)
    raise InputValidationError(f"Unsupported padding value: {value!r}", error_key=INVALID_PADDING)
