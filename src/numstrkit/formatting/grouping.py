# topmark:header:start
#
#   project      : NumStrKit
#   file         : grouping.py
#   file_relpath : src/numstrkit/formatting/grouping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Integer digit grouping.

Groups are counted from the least significant digit:

- ``THOUSANDS``: 3-3-3 (``1,234,567``);
- ``INDIA``: a first group of 3, then groups of 2 (``6,78,90,00,000``);
- ``CHINA``: groups of 4 (``12,3456,7890``).
"""

from __future__ import annotations

from typing import Final

from numstrkit.core.enum_mixins import KeyedStrEnum


class IntegerGrouping(KeyedStrEnum):
    """How the integer digits of a number are split into groups."""

    NONE = ("none", "No grouping", ("off",))
    THOUSANDS = ("thousands", "Thousands (3-3-3)", ("Thousands",))
    INDIA = ("india", "India numbering (3-2-2)", ("IndiaNumbering", "indian", "lakh"))
    CHINA = ("china", "Chinese numbering (4-4-4)", ("ChineseNumbering", "chinese"))


# (first group, subsequent groups), counted from the right
_GROUP_SIZES: Final[dict[IntegerGrouping, tuple[int, int]]] = {
    IntegerGrouping.THOUSANDS: (3, 3),
    IntegerGrouping.INDIA: (3, 2),
    IntegerGrouping.CHINA: (4, 4),
}


def group_integer_digits(digits: str, grouping: IntegerGrouping, separator: str) -> str:
    """Insert ``separator`` between the digit groups of ``digits``.

    Args:
        digits (str): Integer digits, most significant first, without sign.
        grouping (IntegerGrouping): The grouping scheme.
        separator (str): Text inserted between groups; an empty separator
            disables grouping.

    Returns:
        str: The grouped digits, e.g. ``"1,234,567"``.
    """
    if grouping is IntegerGrouping.NONE or not separator:
        return digits

    first, rest = _GROUP_SIZES[grouping]
    if len(digits) <= first:
        return digits

    groups: list[str] = [digits[-first:]]
    head: str = digits[:-first]
    while len(head) > rest:
        groups.append(head[-rest:])
        head = head[:-rest]
    groups.append(head)
    return separator.join(reversed(groups))
