# topmark:header:start
#
#   project      : NumStrKit
#   file         : errors.py
#   file_relpath : src/numstrkit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error taxonomy for parsing, rounding and formatting number strings.

All errors derive from `NumStrError`, itself a `ValueError`, so callers that
only care about "bad input" can catch `ValueError`. They are input-validation
failures: raised synchronously, never retried. A failed parse produces no
value; a failed rounding leaves its input untouched.

Hierarchy:
    NumStrError
    ├── EmptyInputError
    ├── MalformedNumberStringError
    │   └── InvalidSeparatorError
    ├── NoNumericContentError
    ├── InvalidRoundingTargetError
    ├── InvalidRoundingModeError
    ├── FormatSpecError
    └── UnknownCultureError
"""

from __future__ import annotations


class NumStrError(ValueError):
    """Base class for all NumStrKit input errors."""


class EmptyInputError(NumStrError):
    """The input number string is empty."""

    def __init__(self, what: str = "number string") -> None:
        super().__init__(f"Empty input: the {what} has a length of zero")


class MalformedNumberStringError(NumStrError):
    """The input is not a well-formed native number string ``[-]digits[.digits]``."""


class InvalidSeparatorError(MalformedNumberStringError):
    """A decimal or integer separator contains characters it may not contain."""


class NoNumericContentError(NumStrError):
    """A dirty number string contains no digits at all."""

    def __init__(self, text: str) -> None:
        super().__init__(f"No numeric digits (0-9) found in {text!r}")
        self.text: str = text


class InvalidRoundingTargetError(NumStrError):
    """The requested number of fractional digits is negative (or not an integer)."""

    def __init__(self, target: object) -> None:
        super().__init__(
            f"Invalid rounding target {target!r}: fractional digits must be an integer >= 0"
        )
        self.target: object = target


class InvalidRoundingModeError(NumStrError):
    """The rounding mode is unknown or unsupported."""

    def __init__(self, mode: object, allowed: tuple[str, ...] = ()) -> None:
        msg = f"Invalid rounding mode {mode!r}"
        if allowed:
            msg += f" (allowed: {', '.join(allowed)})"
        super().__init__(msg)
        self.mode: object = mode


class FormatSpecError(NumStrError):
    """A number format specification is internally inconsistent."""


class UnknownCultureError(NumStrError):
    """No country culture preset matches the requested name or code."""

    def __init__(self, token: str, known: tuple[str, ...] = ()) -> None:
        msg = f"Unknown country culture {token!r}"
        if known:
            msg += f" (known: {', '.join(known)})"
        super().__init__(msg)
        self.token: str = token
