# tests/test_padding.py
"""
PaddingSpec: CSS shorthand expansion, totals per axis, input forms and errors.
"""

from __future__ import annotations

import pytest

from svgtextbox.core.error_codes import INVALID_PADDING, InputValidationError
from svgtextbox.core.padding import PaddingSpec, padding_from_value, parse_padding


def test_one_value_all_sides() -> None:
    assert parse_padding("5") == PaddingSpec(5, 5, 5, 5)


def test_two_values_vertical_then_horizontal() -> None:
    assert parse_padding("5 10") == PaddingSpec(top=5, right=10, bottom=5, left=10)


def test_three_values_top_sides_bottom() -> None:
    assert parse_padding("1 2 3") == PaddingSpec(top=1, right=2, bottom=3, left=2)


def test_four_values_clockwise() -> None:
    p = parse_padding("1 2 3 4")
    assert (p.top, p.right, p.bottom, p.left) == (1, 2, 3, 4)
    assert p.horizontal() == 6
    assert p.vertical() == 4
    assert str(p) == "1 2 3 4"


def test_zero_padding() -> None:
    assert PaddingSpec().is_zero
    assert not parse_padding("0 1").is_zero


@pytest.mark.parametrize("s", ["", "1 2 3 4 5", "a", "-1"])
def test_invalid_padding(s: str) -> None:
    with pytest.raises(InputValidationError) as exc:
        parse_padding(s)
    assert exc.value.error_key == INVALID_PADDING


def test_padding_from_value_forms() -> None:
    assert padding_from_value(None) == PaddingSpec()
    assert padding_from_value(3) == PaddingSpec(3, 3, 3, 3)
    assert padding_from_value([1, 2]) == PaddingSpec(1, 2, 1, 2)
    assert padding_from_value({"top": 4, "left": 2}) == PaddingSpec(top=4, left=2)
    assert padding_from_value("7") == PaddingSpec(7, 7, 7, 7)
