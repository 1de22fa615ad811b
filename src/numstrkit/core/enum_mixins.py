# topmark:header:start
#
#   project      : NumStrKit
#   file         : enum_mixins.py
#   file_relpath : src/numstrkit/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyed string enums for NumStrKit (typing-friendly, UI-agnostic).

Every closed vocabulary in NumStrKit (rounding modes, grouping styles, sign
styles, justification) is a `KeyedStrEnum`: the ``.value`` is a stable,
snake_case machine key used in TOML config and on the CLI, while a human label
and optional aliases live on attributes.

Parsing is tolerant: case, ``-``, ``_`` and spaces are ignored, so
``"HalfToEven"``, ``"half-to-even"`` and ``"half_to_even"`` all name the same
member.

Example:
    ```python
    class Mode(KeyedStrEnum):
        FAST = ("fast", "Fast mode", ("quick",))
        SLOW = ("slow", "Slow mode")

    assert Mode.parse("QUICK") is Mode.FAST
    assert Mode.keys() == ("fast", "slow")
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def norm_token(s: str) -> str:
    """Normalize an identifier-like token for case- and separator-insensitive matching."""
    return "".join(ch for ch in s.strip().lower() if ch not in "-_ ")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        """Return the machine keys of all members, in declaration order."""
        return tuple(m.key for m in cls)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against the stable key (`.value`), the member name (`.name`)
        and any configured aliases, ignoring case and ``-``/``_``/space.

        Returns:
            _KS | None: The matching member, or ``None`` if ``raw`` matches nothing.
        """
        if raw is None:
            return None
        token: str = norm_token(raw)
        if not token:
            return None

        for m in cls:
            candidates = (m.value, m.name, *m.aliases)
            if any(token == norm_token(c) for c in candidates):
                return m
        return None
