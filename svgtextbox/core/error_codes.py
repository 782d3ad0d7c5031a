"""
Structured error codes and exceptions for text box fitting.
Use the keys for user-facing messages; raise the exceptions from library code.
"""

from __future__ import annotations

# Known error keys
INVALID_DIMENSION = "invalid_dimension"
INVALID_PADDING = "invalid_padding"
INVALID_ATTRIBUTE = "invalid_attribute"
PADDING_EXCEEDS_BOX = "padding_exceeds_box"
MARKUP_TOO_LONG = "markup_too_long"
MARKUP_EMPTY = "markup_empty"
MARKUP_BAD_CHAR = "markup_bad_char"
MARKUP_MALFORMED = "markup_malformed"
NO_FIT = "no_fit"
FIXED_SIZE_NO_FIT = "fixed_size_no_fit"
ORACLE_FAILED = "oracle_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    INVALID_DIMENSION: "Invalid width, height or font size. Use positive integers; min must not exceed max.",
    INVALID_PADDING: "Invalid padding. Give 1 to 4 non-negative integers.",
    INVALID_ATTRIBUTE: "Invalid text box attribute value.",
    PADDING_EXCEEDS_BOX: "Padding leaves no room for text. Reduce padding or enlarge the box.",
    MARKUP_TOO_LONG: "Text is too long. Shorten it to 1000 characters or fewer.",
    MARKUP_EMPTY: "Text is empty.",
    MARKUP_BAD_CHAR: "Text contains a forbidden character.",
    MARKUP_MALFORMED: "Markup could not be parsed. Check tags and escape '&' as '&amp;'.",
    NO_FIT: "Text does not fit at any allowed size. Allow larger boxes or smaller fonts.",
    FIXED_SIZE_NO_FIT: "Text does not fit at the requested font size.",
    ORACLE_FAILED: "Text rendering failed.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)


class SvgTextBoxError(Exception):
    """Base error; carries an error key from this module."""

    error_key: str | None = None

    def __init__(self, message: str | None = None, error_key: str | None = None) -> None:
        if error_key is not None:
            self.error_key = error_key
        super().__init__(message or user_message(self.error_key))


class InputValidationError(SvgTextBoxError, ValueError):
    error_key = INVALID_ATTRIBUTE


class MarkupError(InputValidationError):
    """Rejected markup. code is one of TooLong, Empty, BadChar, MalformedMarkup."""

    _KEYS = {
        "TooLong": MARKUP_TOO_LONG,
        "Empty": MARKUP_EMPTY,
        "BadChar": MARKUP_BAD_CHAR,
        "MalformedMarkup": MARKUP_MALFORMED,
    }

    def __init__(self, code: str, message: str | None = None) -> None:
        if code not in self._KEYS:
            raise ValueError(f"Unknown markup error code: {code!r}")
        self.code = code
        super().__init__(message, error_key=self._KEYS[code])


class NoFitError(SvgTextBoxError):
    error_key = NO_FIT

    def __init__(self, message: str | None = None, candidates_tried: int = 0) -> None:
        self.candidates_tried = candidates_tried
        super().__init__(message)


class FixedSizeNoFitError(NoFitError):
    error_key = FIXED_SIZE_NO_FIT


class OracleError(SvgTextBoxError, RuntimeError):
    error_key = ORACLE_FAILED
