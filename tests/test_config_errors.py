# tests/test_config_errors.py
"""
Unit conversions and error taxonomy.
"""

from __future__ import annotations

import pytest

from svgtextbox.core.config import DEFAULT_UNITS, UnitConfig
from svgtextbox.core.error_codes import (
    FIXED_SIZE_NO_FIT,
    NO_FIT,
    FixedSizeNoFitError,
    InputValidationError,
    MarkupError,
    NoFitError,
    OracleError,
    user_message,
)


def test_default_unit_conversions() -> None:
    assert DEFAULT_UNITS.px_to_pt_value(100) == 75.0
    assert DEFAULT_UNITS.px_to_scaled(100) == 76800
    assert DEFAULT_UNITS.px_to_scaled(10) == 7680
    assert DEFAULT_UNITS.pt_to_scaled(22) == 22528
    assert DEFAULT_UNITS.scaled_to_pt(22528) == 22.0


def test_px_to_scaled_truncates_once() -> None:
    # 3px = 2.25pt -> 2304 scaled; truncating points first would give 2048.
    assert DEFAULT_UNITS.px_to_scaled(3) == 2304


def test_custom_units() -> None:
    units = UnitConfig(px_to_pt=1.0, scale=64)
    assert units.px_to_scaled(10) == 640
    assert units.scaled_to_pt(640) == 10.0


def test_error_hierarchy() -> None:
    assert issubclass(FixedSizeNoFitError, NoFitError)
    assert issubclass(MarkupError, InputValidationError)
    assert issubclass(InputValidationError, ValueError)
    assert issubclass(OracleError, RuntimeError)
    assert not issubclass(NoFitError, InputValidationError)


def test_error_keys_and_messages() -> None:
    assert NoFitError().error_key == NO_FIT
    assert FixedSizeNoFitError().error_key == FIXED_SIZE_NO_FIT
    assert str(NoFitError()) == user_message(NO_FIT)
    assert user_message(None) == "Something went wrong."
    assert user_message("unknown", fallback="x") == "x"


def test_markup_error_codes() -> None:
    assert MarkupError("TooLong").error_key == "markup_too_long"
    with pytest.raises(ValueError):
        MarkupError("Nope")
