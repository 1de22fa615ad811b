# topmark:header:start
#
#   project      : NumStrKit
#   file         : rounding.py
#   file_relpath : src/numstrkit/core/rounding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rounding engine for `DecimalValue` instances.

`round_value` brings the fractional part of a value to an exact length ``L``:

- when the value has ``L`` or fewer fractional digits, it is right-padded with
  ``0`` (no rounding decision is needed);
- otherwise the discarded digits are compared with half a unit at the cutoff
  (*below*, *tie* or *above*) and the `RoundingMode` decides whether the
  magnitude of the retained digits is incremented. A carry may grow the integer
  part (``9.95`` -> ``10.0``).

Rounding never mutates its input and is idempotent: rounding a result again to
the same length is a no-op, whatever the mode.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from numstrkit.config.logging import get_logger
from numstrkit.core.enum_mixins import KeyedStrEnum
from numstrkit.core.errors import InvalidRoundingModeError, InvalidRoundingTargetError
from numstrkit.core.kernel import DecimalValue, format_native, parse_native

if TYPE_CHECKING:
    from numstrkit.config.logging import NumstrLogger

logger: NumstrLogger = get_logger(__name__)


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in ``[0.0, 1.0)``."""

    def random(self) -> float:
        """Return the next random float."""
        ...


class RoundingMode(KeyedStrEnum):
    """Supported rounding strategies.

    Keys are snake_case; the CamelCase names are accepted as aliases so that
    ``RoundingMode.parse("HalfToEven")`` works.
    """

    NO_ROUNDING = ("no_rounding", "No rounding (truncate)", ("NoRounding", "none"))
    TRUNCATE = ("truncate", "Truncate toward zero", ("Truncate", "trunc"))
    HALF_UP_WITH_NEG_NUMS = (
        "half_up_with_neg_nums",
        "Half up (ties toward +infinity)",
        ("HalfUpWithNegNums", "half_up"),
    )
    HALF_DOWN_WITH_NEG_NUMS = (
        "half_down_with_neg_nums",
        "Half down (ties toward -infinity)",
        ("HalfDownWithNegNums", "half_down"),
    )
    HALF_AWAY_FROM_ZERO = (
        "half_away_from_zero",
        "Half away from zero",
        ("HalfAwayFromZero", "round_half_up"),
    )
    HALF_TOWARDS_ZERO = (
        "half_towards_zero",
        "Half towards zero",
        ("HalfTowardsZero", "half_toward_zero", "round_half_down"),
    )
    HALF_TO_EVEN = ("half_to_even", "Half to even (banker's rounding)", ("HalfToEven", "bankers"))
    HALF_TO_ODD = ("half_to_odd", "Half to odd", ("HalfToOdd",))
    RANDOMLY = ("randomly", "Random tie-break", ("Randomly", "random"))
    FLOOR = ("floor", "Toward -infinity", ("Floor",))
    CEILING = ("ceiling", "Toward +infinity", ("Ceiling", "ceil"))

    @classmethod
    def coerce(cls, mode: RoundingMode | str) -> RoundingMode:
        """Return ``mode`` as a `RoundingMode`, parsing tokens as needed.

        Raises:
            InvalidRoundingModeError: If ``mode`` is neither a member nor a known token.
        """
        if isinstance(mode, RoundingMode):
            return mode
        parsed: RoundingMode | None = cls.parse(mode) if isinstance(mode, str) else None
        if parsed is None:
            raise InvalidRoundingModeError(mode, cls.keys())
        return parsed


class _Remainder(Enum):
    """Discarded digits compared with half a unit at the cutoff."""

    EXACT = "exact"
    BELOW = "below"
    TIE = "tie"
    ABOVE = "above"


def _classify(discarded: str) -> _Remainder:
    significant: str = discarded.rstrip("0")
    if not significant:
        return _Remainder.EXACT
    if significant == "5":
        return _Remainder.TIE
    return _Remainder.ABOVE if significant[0] >= "5" else _Remainder.BELOW


def _increment_digits(digits: str) -> str:
    """Add one unit to a digit string, carrying through trailing nines.

    Works on the characters directly, so the length of ``digits`` is unbounded.
    The result has the same width as ``digits`` unless the carry runs out of
    the leftmost digit (``"999"`` -> ``"1000"``).
    """
    head: str = digits.rstrip("9")
    nines: int = len(digits) - len(head)
    if not head:
        return "1" + "0" * nines
    return head[:-1] + str(int(head[-1]) + 1) + "0" * nines


def _should_increment(
    mode: RoundingMode,
    remainder: _Remainder,
    *,
    negative: bool,
    last_digit: int,
    rng: RandomSource,
) -> bool:
    """Decide whether the magnitude of the retained digits grows by one unit."""
    if remainder is _Remainder.EXACT:
        return False
    above: bool = remainder is _Remainder.ABOVE
    tie: bool = remainder is _Remainder.TIE

    if mode in (RoundingMode.NO_ROUNDING, RoundingMode.TRUNCATE):
        return False
    if mode is RoundingMode.HALF_AWAY_FROM_ZERO:
        return above or tie
    if mode is RoundingMode.HALF_TOWARDS_ZERO:
        return above
    if mode is RoundingMode.HALF_UP_WITH_NEG_NUMS:
        return above or (tie and not negative)
    if mode is RoundingMode.HALF_DOWN_WITH_NEG_NUMS:
        return above or (tie and negative)
    if mode is RoundingMode.HALF_TO_EVEN:
        return above or (tie and last_digit % 2 == 1)
    if mode is RoundingMode.HALF_TO_ODD:
        return above or (tie and last_digit % 2 == 0)
    if mode is RoundingMode.RANDOMLY:
        return above or (tie and rng.random() < 0.5)
    if mode is RoundingMode.FLOOR:
        return negative
    if mode is RoundingMode.CEILING:
        return not negative
    raise InvalidRoundingModeError(mode, RoundingMode.keys())


def _validate_target(target: object) -> int:
    # bool is an int subclass but never a meaningful digit count
    if isinstance(target, bool) or not isinstance(target, int) or target < 0:
        raise InvalidRoundingTargetError(target)
    return target


def round_value(
    value: DecimalValue,
    mode: RoundingMode | str,
    target_fractional_digits: int,
    *,
    rng: RandomSource | None = None,
) -> DecimalValue:
    """Round ``value`` to exactly ``target_fractional_digits`` fractional digits.

    Args:
        value (DecimalValue): The value to round. It is not modified.
        mode (RoundingMode | str): Rounding mode, as a member or a token accepted
            by `RoundingMode.parse`.
        target_fractional_digits (int): Fractional digit count of the result (>= 0).
        rng (RandomSource | None): Coin source for `RoundingMode.RANDOMLY` ties;
            defaults to the process-wide `random` module.

    Returns:
        DecimalValue: A new value with exactly ``target_fractional_digits``
        fractional digits. A result whose digits are all zero is non-negative.

    Raises:
        InvalidRoundingTargetError: If ``target_fractional_digits`` is negative or
            not an integer.
        InvalidRoundingModeError: If ``mode`` is unknown.
    """
    target: int = _validate_target(target_fractional_digits)
    rounding_mode: RoundingMode = RoundingMode.coerce(mode)

    frac: str = value.fractional_digits
    if target >= len(frac):
        return DecimalValue.from_digits(
            value.integer_digits,
            frac.ljust(target, "0"),
            negative=value.is_negative,
        )

    kept: str = frac[:target]
    discarded: str = frac[target:]
    retained: str = value.integer_digits + kept
    remainder: _Remainder = _classify(discarded)

    increment: bool = _should_increment(
        rounding_mode,
        remainder,
        negative=value.is_negative,
        last_digit=int(retained[-1]),
        rng=rng if rng is not None else random,
    )
    if increment:
        # a carry-out only lengthens the integer part
        retained = _increment_digits(retained)

    split: int = len(retained) - target
    result = DecimalValue.from_digits(
        retained[:split],
        retained[split:],
        negative=value.is_negative,
    )
    logger.trace(
        "round_value(%s, %s, %d): remainder=%s increment=%s -> %s",
        value,
        rounding_mode.key,
        target,
        remainder.value,
        increment,
        result,
    )
    return result


@dataclass(frozen=True, slots=True)
class RoundingRequest:
    """A rounding mode paired with a target fractional digit count.

    Validated on creation: an unknown mode raises `InvalidRoundingModeError`,
    a negative target raises `InvalidRoundingTargetError`. Mode tokens are
    coerced to `RoundingMode` members.
    """

    mode: RoundingMode
    target_fractional_digits: int

    def __post_init__(self) -> None:
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "mode", RoundingMode.coerce(self.mode))
        _validate_target(self.target_fractional_digits)

    def apply(self, value: DecimalValue, *, rng: RandomSource | None = None) -> DecimalValue:
        """Round ``value`` according to this request."""
        return round_value(value, self.mode, self.target_fractional_digits, rng=rng)


def round_native(
    text: str,
    mode: RoundingMode | str,
    target_fractional_digits: int,
    *,
    rng: RandomSource | None = None,
) -> str:
    """Round a native number string and return the native result (``"9.95"`` -> ``"10.0"``)."""
    return format_native(
        round_value(parse_native(text), mode, target_fractional_digits, rng=rng)
    )
