# svgtextbox/core/dimensions.py
"""
Admissible values for one scalar (width, height or font size):
a static value, an explicit set, or a min/max/step range.
Every variant yields a sorted, deduplicated ascending candidate list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from svgtextbox.core.error_codes import INVALID_DIMENSION, InputValidationError


def _invalid(message: str) -> InputValidationError:
    return InputValidationError(message, error_key=INVALID_DIMENSION)


def _check_positive(value: Any, what: str = "value") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _invalid(f"Dimension {what} must be an integer, got {value!r}")
    if value <= 0:
        raise _invalid(f"Dimension {what} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class StaticDimension:
    """A single fixed value."""
    value: int

    def __post_init__(self) -> None:
        _check_positive(self.value)

    def values(self) -> list[int]:
        return [self.value]


@dataclass(frozen=True)
class SetDimension:
    """An explicit finite set of values."""
    options: frozenset[int]

    def __post_init__(self) -> None:
        if not self.options:
            raise _invalid("Dimension set must not be empty")
        for v in self.options:
            _check_positive(v)

    def values(self) -> list[int]:
        return sorted(self.options)


@dataclass(frozen=True)
class RangeDimension:
    """min, min+step, ... up to and including max when max is reached exactly."""
    min: int
    max: int
    step: int | None = None

    def __post_init__(self) -> None:
        _check_positive(self.min, "min")
        _check_positive(self.max, "max")
        if self.min > self.max:
            raise _invalid(f"Dimension min {self.min} exceeds max {self.max}")
        if self.step is not None:
            _check_positive(self.step, "step")

    def values(self) -> list[int]:
        return list(range(self.min, self.max + 1, self.step or 1))


DimensionSpec = Union[StaticDimension, SetDimension, RangeDimension]


def dimension_from_tokens(tokens: list[int]) -> DimensionSpec:
    """
    One token is static. Two tokens "a b" are the range a..=b when b > a,
    otherwise the two-element set {a, b}. Three or more tokens are a set.
    """
    if not tokens:
        raise _invalid("Dimension needs at least one value")
    if len(tokens) == 1:
        return StaticDimension(tokens[0])
    if len(tokens) == 2:
        a, b = tokens
        if b > a:
            return RangeDimension(a, b)
        return SetDimension(frozenset((a, b)))
    return SetDimension(frozenset(tokens))


def parse_dimension(s: str) -> DimensionSpec:
    """Parse a whitespace-separated token string, e.g. '100', '100 200', '80 90 120'."""
    tokens: list[int] = []
    for part in (s or "").split():
        try:
            tokens.append(int(part))
        except ValueError:
            raise _invalid(f"Dimension token is not an integer: {part!r}") from None
    return dimension_from_tokens(tokens)


def dimension_from_range_values(min_value: int, max_value: int, step: int | None = None) -> DimensionSpec:
    """Build from explicit bounds; equal bounds collapse to a static value."""
    if min_value == max_value:
        return StaticDimension(min_value)
    return RangeDimension(min_value, max_value, step)


def dimension_from_value(value: Any) -> DimensionSpec:
    """
    Accept the structured-config forms: an int, a token string, a list of ints,
    or a mapping with min/max and optional step.
    """
    if isinstance(value, (StaticDimension, SetDimension, RangeDimension)):
        return value
    if isinstance(value, str):
        return parse_dimension(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return StaticDimension(value)
    if isinstance(value, dict):
        try:
            lo = value["min"]
            hi = value["max"]
        except KeyError as e:
            raise _invalid(f"Dimension mapping is missing {e.args[0]!r}") from None
        return RangeDimension(lo, hi, value.get("step"))
    if isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
        for v in items:
            _check_positive(v)
        if len(items) == 1:
            return StaticDimension(items[0])
        return SetDimension(frozenset(items))
    raise _invalid(f"Unsupported dimension value: {value!r}")


def serialize_dimension(spec: DimensionSpec) -> str:
    """
    Token string that parses back to the same candidate values.
    Sets are written descending so a two-value set is not read as a range.
    """
    if isinstance(spec, StaticDimension):
        return str(spec.value)
    if isinstance(spec, RangeDimension) and (spec.step or 1) == 1 and spec.max > spec.min:
        return f"{spec.min} {spec.max}"
    return " ".join(str(v) for v in reversed(spec.values()))
