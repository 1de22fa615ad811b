# topmark:header:start
#
#   project      : NumStrKit
#   file         : test_rounding.py
#   file_relpath : tests/core/test_rounding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the rounding engine (`numstrkit.core.rounding`)."""

from __future__ import annotations

import random

import pytest

from numstrkit.core.errors import InvalidRoundingModeError, InvalidRoundingTargetError
from numstrkit.core.kernel import DecimalValue, format_native, parse_native
from numstrkit.core.rounding import RoundingMode, RoundingRequest, round_native, round_value
from tests.conftest import parametrize


class FixedCoin:
    """Deterministic `RandomSource` returning the same float every time."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


M = RoundingMode


@parametrize(
    "text, mode, digits, expected",
    [
        # ties at the cutoff
        ("7.5", M.HALF_UP_WITH_NEG_NUMS, 0, "8"),
        ("-7.5", M.HALF_UP_WITH_NEG_NUMS, 0, "-7"),
        ("7.5", M.HALF_DOWN_WITH_NEG_NUMS, 0, "7"),
        ("-7.5", M.HALF_DOWN_WITH_NEG_NUMS, 0, "-8"),
        ("7.5", M.HALF_AWAY_FROM_ZERO, 0, "8"),
        ("-7.5", M.HALF_AWAY_FROM_ZERO, 0, "-8"),
        ("7.5", M.HALF_TOWARDS_ZERO, 0, "7"),
        ("-7.5", M.HALF_TOWARDS_ZERO, 0, "-7"),
        ("6.5", M.HALF_TO_EVEN, 0, "6"),
        ("-6.5", M.HALF_TO_EVEN, 0, "-6"),
        ("7.5", M.HALF_TO_EVEN, 0, "8"),
        ("6.5", M.HALF_TO_ODD, 0, "7"),
        ("7.5", M.HALF_TO_ODD, 0, "7"),
        ("-7.5", M.HALF_TO_ODD, 0, "-7"),
        # directed modes
        ("2.9", M.FLOOR, 0, "2"),
        ("-2.1", M.FLOOR, 0, "-3"),
        ("2.1", M.CEILING, 0, "3"),
        ("-2.9", M.CEILING, 0, "-2"),
        ("-2.95", M.FLOOR, 1, "-3.0"),
        # truncation
        ("2.99", M.TRUNCATE, 1, "2.9"),
        ("-2.99", M.TRUNCATE, 1, "-2.9"),
        ("2.99", M.NO_ROUNDING, 0, "2"),
        # not a tie: the full remainder is compared with one half
        ("2.5000001", M.HALF_TOWARDS_ZERO, 0, "3"),
        ("2.4999999", M.HALF_AWAY_FROM_ZERO, 0, "2"),
        ("2.50000", M.HALF_TOWARDS_ZERO, 0, "2"),
        ("1.2251", M.HALF_TO_EVEN, 2, "1.23"),
        # carries
        ("9.95", M.HALF_AWAY_FROM_ZERO, 1, "10.0"),
        ("-999.5", M.HALF_AWAY_FROM_ZERO, 0, "-1000"),
        ("0.999", M.CEILING, 2, "1.00"),
        # padding
        ("1.5", M.HALF_TO_EVEN, 3, "1.500"),
        ("-3", M.FLOOR, 2, "-3.00"),
        # results that are zero are non-negative
        ("-0.4", M.HALF_AWAY_FROM_ZERO, 0, "0"),
        ("-0.04", M.TRUNCATE, 1, "0.0"),
        ("-0.5", M.HALF_UP_WITH_NEG_NUMS, 0, "0"),
        ("-0.001", M.CEILING, 2, "0.00"),
    ],
)
def test_round_native(text: str, mode: RoundingMode, digits: int, expected: str) -> None:
    assert round_native(text, mode, digits) == expected


@parametrize("mode", list(RoundingMode))
def test_exact_values_are_unchanged_by_every_mode(mode: RoundingMode) -> None:
    """A value whose discarded digits are zeros is never incremented."""
    assert round_native("-12.3400", mode, 2) == "-12.34"
    assert round_native("12.3400", mode, 2) == "12.34"


@parametrize("mode", list(RoundingMode))
def test_result_has_exact_fractional_digit_count(mode: RoundingMode) -> None:
    for target in range(5):
        value: DecimalValue = round_value(parse_native("-123.4567"), mode, target)
        assert value.fractional_digit_count == target


def test_randomly_uses_coin_on_ties_only() -> None:
    """RANDOMLY consults the coin for a tie, and only for a tie."""
    heads = FixedCoin(0.1)
    tails = FixedCoin(0.9)
    assert round_native("2.5", M.RANDOMLY, 0, rng=heads) == "3"
    assert round_native("2.5", M.RANDOMLY, 0, rng=tails) == "2"
    assert round_native("-2.5", M.RANDOMLY, 0, rng=heads) == "-3"

    coin = FixedCoin(0.0)
    assert round_native("2.6", M.RANDOMLY, 0, rng=coin) == "3"
    assert round_native("2.4", M.RANDOMLY, 0, rng=coin) == "2"
    assert coin.calls == 0


def test_randomly_with_seeded_rng_yields_neighbours() -> None:
    rng = random.Random(1234)
    outcomes: set[str] = {round_native("4.5", M.RANDOMLY, 0, rng=rng) for _ in range(64)}
    assert outcomes == {"4", "5"}


def test_round_value_does_not_mutate_input() -> None:
    value: DecimalValue = parse_native("1.25")
    rounded: DecimalValue = round_value(value, M.HALF_AWAY_FROM_ZERO, 1)
    assert format_native(value) == "1.25"
    assert format_native(rounded) == "1.3"


def test_carry_through_very_long_digit_strings() -> None:
    """Values far longer than the int/str conversion limit round without error."""
    assert round_native("9" * 5000 + ".95", M.HALF_AWAY_FROM_ZERO, 1) == "1" + "0" * 5000 + ".0"
    assert round_native("1" * 4400 + ".5", M.HALF_TO_EVEN, 0) == "1" * 4399 + "2"
    assert round_native("-" + "9" * 5000 + ".1", M.FLOOR, 0) == "-1" + "0" * 5000


@parametrize(
    "text, digits, expected",
    [
        ("0.95", 1, "1.0"),
        ("0.095", 2, "0.10"),
        ("9.5", 0, "10"),
        ("199.95", 1, "200.0"),
        ("0.05", 1, "0.1"),
    ],
)
def test_carry_keeps_fractional_width(text: str, digits: int, expected: str) -> None:
    assert round_native(text, M.HALF_AWAY_FROM_ZERO, digits) == expected


@parametrize(
    "token, expected",
    [
        ("HalfToEven", M.HALF_TO_EVEN),
        ("half-to-even", M.HALF_TO_EVEN),
        ("bankers", M.HALF_TO_EVEN),
        ("NoRounding", M.NO_ROUNDING),
        ("HalfUpWithNegNums", M.HALF_UP_WITH_NEG_NUMS),
        ("CEIL", M.CEILING),
    ],
)
def test_mode_tokens(token: str, expected: RoundingMode) -> None:
    assert RoundingMode.coerce(token) is expected
    assert round_value(parse_native("1"), token, 0) == DecimalValue("1")


def test_unknown_mode_raises() -> None:
    with pytest.raises(InvalidRoundingModeError) as excinfo:
        round_native("1.5", "sideways", 0)
    assert "half_to_even" in str(excinfo.value)


@parametrize("target", [-1, True, 1.5, "2"])
def test_invalid_target_raises(target: object) -> None:
    with pytest.raises(InvalidRoundingTargetError):
        round_value(parse_native("1.5"), M.FLOOR, target)  # type: ignore[arg-type]


def test_rounding_request() -> None:
    """A request coerces its mode token and validates its target."""
    request = RoundingRequest("half_to_even", 1)  # type: ignore[arg-type]
    assert request.mode is M.HALF_TO_EVEN
    assert format_native(request.apply(parse_native("0.25"))) == "0.2"
    with pytest.raises(InvalidRoundingTargetError):
        RoundingRequest(M.FLOOR, -2)
    with pytest.raises(InvalidRoundingModeError):
        RoundingRequest("nope", 2)  # type: ignore[arg-type]
