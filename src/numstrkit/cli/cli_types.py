# topmark:header:start
#
#   project      : NumStrKit
#   file         : cli_types.py
#   file_relpath : src/numstrkit/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the NumStrKit CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar

import click

from numstrkit.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=KeyedStrEnum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a token to a member of a `KeyedStrEnum`.

    Matching is tolerant (case, ``-``, ``_`` and aliases), so ``--mode HalfToEven``
    and ``--mode half-to-even`` are equivalent.
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = list(self.enum_cls.keys())

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Show the machine keys in help output."""
        return "[" + "|".join(self.choices) + "]"

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a token to a member of the enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        member: E | None = self.enum_cls.parse(str(value))
        if member is not None:
            return member

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click (machine keys only)."""
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [RuntimeCompletionItem(key) for key in self.choices if key.startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
