# topmark:header:start
#
#   project      : NumStrKit
#   file         : model.py
#   file_relpath : src/numstrkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot consumed by the API and CLI.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (lowest to highest precedence):
    1) runtime defaults (`load_defaults_dict`);
    2) the discovered config file (nearest ``numstrkit.toml`` or
       ``pyproject.toml`` with ``[tool.numstrkit]``);
    3) explicit ``--config`` files, in the order given;
    4) CLI / API overrides (`MutableConfig.apply_cli_args`).

Every field is tri-state (``None`` = inherit). A layer that sets
``[format].culture`` resets the ``[format]`` keys inherited from lower layers:
the culture preset becomes the base and only keys set in the same or a later
layer override it.

Shape problems in TOML are recorded as warnings in the builder's
`DiagnosticLog`. Settings that cannot produce a valid number format raise
`ConfigError` at `MutableConfig.freeze`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, TypeVar

from numstrkit.config.io import (
    discover_config_file,
    extract_tool_table,
    get_enum_value_checked,
    get_int_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    render_toml,
    warn_unknown_keys,
)
from numstrkit.config.keys import Toml
from numstrkit.config.logging import get_logger
from numstrkit.core.diagnostics import Diagnostic, DiagnosticLog
from numstrkit.core.enum_mixins import KeyedStrEnum
from numstrkit.core.errors import NumStrError, UnknownCultureError
from numstrkit.core.kernel import validate_decimal_separator
from numstrkit.core.rounding import RoundingMode, RoundingRequest
from numstrkit.formatting.cultures import get_culture
from numstrkit.formatting.grouping import IntegerGrouping
from numstrkit.formatting.spec import (
    CurrencyPosition,
    Justification,
    NegativeStyle,
    NumberFormatSpec,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from numstrkit.config.io import TomlTable
    from numstrkit.config.logging import NumstrLogger

# ArgsLike: generic mapping accepted by `apply_cli_args` (CLI kwargs or API dicts).
ArgsLike = Mapping[str, Any]

logger: NumstrLogger = get_logger(__name__)

_KE = TypeVar("_KE", bound=KeyedStrEnum)

# [format] fields that a culture preset replaces
FORMAT_FIELDS: Final[tuple[str, ...]] = (
    "decimal_separator",
    "integer_separator",
    "grouping",
    "negative_style",
    "positive_sign",
    "currency_symbol",
    "currency_position",
    "field_length",
    "justification",
)


class ConfigError(ValueError):
    """The merged configuration cannot produce valid parse or format settings."""


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Produced by `MutableConfig.freeze`. Format fields left at ``None`` fall back
    to the culture preset (when ``culture`` is set) or to ``NumberFormatSpec()``.

    Attributes:
        parse_decimal_separator (str): Decimal separator for dirty parsing.
        culture (str | None): Country-culture preset token (e.g. ``"de"``).
        decimal_separator (str | None): Display decimal separator.
        integer_separator (str | None): Display integer group separator.
        grouping (IntegerGrouping | None): Integer grouping scheme.
        negative_style (NegativeStyle | None): Marking of negative values.
        positive_sign (str | None): Prefix for positive values.
        currency_symbol (str | None): Currency symbol (with any spacing).
        currency_position (CurrencyPosition | None): Placement of the currency symbol.
        field_length (int | None): Number field width (``-1`` = no field).
        justification (Justification | None): Alignment inside the number field.
        rounding_mode (RoundingMode): Mode used when ``rounding_digits`` is set.
        rounding_digits (int | None): Fractional digits to round to; ``None`` = no rounding.
        config_files (tuple[str, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading.
    """

    parse_decimal_separator: str = "."
    culture: str | None = None
    decimal_separator: str | None = None
    integer_separator: str | None = None
    grouping: IntegerGrouping | None = None
    negative_style: NegativeStyle | None = None
    positive_sign: str | None = None
    currency_symbol: str | None = None
    currency_position: CurrencyPosition | None = None
    field_length: int | None = None
    justification: Justification | None = None
    rounding_mode: RoundingMode = RoundingMode.HALF_AWAY_FROM_ZERO
    rounding_digits: int | None = None
    config_files: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def rounding_request(self) -> RoundingRequest | None:
        """Return the configured rounding, or ``None`` when no digit count is set."""
        if self.rounding_digits is None:
            return None
        return RoundingRequest(self.rounding_mode, self.rounding_digits)

    def format_spec(self, *, currency: bool = False) -> NumberFormatSpec:
        """Build the `NumberFormatSpec` described by this configuration.

        Args:
            currency (bool): Start from the culture's currency spec instead of its
                number spec (only relevant when ``culture`` is set).

        Raises:
            UnknownCultureError: If ``culture`` names no preset.
            FormatSpecError: If the resulting spec is inconsistent.
        """
        base: NumberFormatSpec = (
            get_culture(self.culture).spec(currency=currency)
            if self.culture is not None
            else NumberFormatSpec()
        )
        changes: dict[str, Any] = {
            name: getattr(self, name) for name in FORMAT_FIELDS if getattr(self, name) is not None
        }
        rounding: RoundingRequest | None = self.rounding_request()
        if rounding is not None:
            changes["rounding"] = rounding
        return base.evolve(**changes) if changes else base

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen configuration."""
        return MutableConfig(
            parse_decimal_separator=self.parse_decimal_separator,
            culture=self.culture,
            decimal_separator=self.decimal_separator,
            integer_separator=self.integer_separator,
            grouping=self.grouping,
            negative_style=self.negative_style,
            positive_sign=self.positive_sign,
            currency_symbol=self.currency_symbol,
            currency_position=self.currency_position,
            field_length=self.field_length,
            justification=self.justification,
            rounding_mode=self.rounding_mode,
            rounding_digits=self.rounding_digits,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration in TOML shape; unset values are ``None``."""

        def _key(v: KeyedStrEnum | None) -> str | None:
            return v.key if v is not None else None

        return {
            Toml.SECTION_PARSE: {
                Toml.KEY_DECIMAL_SEPARATOR: self.parse_decimal_separator,
            },
            Toml.SECTION_FORMAT: {
                Toml.KEY_CULTURE: self.culture,
                Toml.KEY_DECIMAL_SEPARATOR: self.decimal_separator,
                Toml.KEY_INTEGER_SEPARATOR: self.integer_separator,
                Toml.KEY_GROUPING: _key(self.grouping),
                Toml.KEY_NEGATIVE_STYLE: _key(self.negative_style),
                Toml.KEY_POSITIVE_SIGN: self.positive_sign,
                Toml.KEY_CURRENCY_SYMBOL: self.currency_symbol,
                Toml.KEY_CURRENCY_POSITION: _key(self.currency_position),
                Toml.KEY_FIELD_LENGTH: self.field_length,
                Toml.KEY_JUSTIFICATION: _key(self.justification),
            },
            Toml.SECTION_ROUNDING: {
                Toml.KEY_MODE: self.rounding_mode.key,
                Toml.KEY_DIGITS: self.rounding_digits,
            },
        }

    def to_toml(self, *, for_pyproject: bool = False) -> str:
        """Render this configuration as TOML text."""
        return render_toml(self.to_toml_dict(), for_pyproject=for_pyproject)


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Fields mirror `Config`; every field is optional so that merging can tell
    "not set in this layer" from an explicit value.
    """

    parse_decimal_separator: str | None = None
    culture: str | None = None
    decimal_separator: str | None = None
    integer_separator: str | None = None
    grouping: IntegerGrouping | None = None
    negative_style: NegativeStyle | None = None
    positive_sign: str | None = None
    currency_symbol: str | None = None
    currency_position: CurrencyPosition | None = None
    field_length: int | None = None
    justification: Justification | None = None
    rounding_mode: RoundingMode | None = None
    rounding_digits: int | None = None

    config_files: list[str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Raises:
            ConfigError: If the parse separator, culture, rounding or format
                settings are invalid.
        """
        parse_sep: str = (
            self.parse_decimal_separator if self.parse_decimal_separator is not None else "."
        )
        config = Config(
            parse_decimal_separator=parse_sep,
            culture=self.culture,
            decimal_separator=self.decimal_separator,
            integer_separator=self.integer_separator,
            grouping=self.grouping,
            negative_style=self.negative_style,
            positive_sign=self.positive_sign,
            currency_symbol=self.currency_symbol,
            currency_position=self.currency_position,
            field_length=self.field_length,
            justification=self.justification,
            rounding_mode=self.rounding_mode or RoundingMode.HALF_AWAY_FROM_ZERO,
            rounding_digits=self.rounding_digits,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )
        try:
            validate_decimal_separator(config.parse_decimal_separator)
            config.format_spec()
            config.format_spec(currency=True)
        except NumStrError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
        return config

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, source: str | Path | None = None) -> MutableConfig:
        """Create a builder from a table in TOML shape.

        Unknown sections or keys, wrong value types and unknown enum tokens are
        recorded as warnings on the returned builder's ``diagnostics``.

        Args:
            data (TomlTable): Parsed TOML (``[parse]``, ``[format]``, ``[rounding]``).
            source (str | Path | None): Where ``data`` came from, recorded in
                ``config_files`` and used in warning locations.

        Returns:
            MutableConfig: The resulting builder.
        """
        draft = cls()
        diags: DiagnosticLog = draft.diagnostics
        prefix: str = f"{source}: " if source is not None else ""
        known: dict[str, frozenset[str]] = Toml.known_keys()

        warn_unknown_keys(data, known, where=f"{prefix}<root>", diagnostics=diags)

        parse_tbl: TomlTable = get_table_value(data, Toml.SECTION_PARSE)
        format_tbl: TomlTable = get_table_value(data, Toml.SECTION_FORMAT)
        rounding_tbl: TomlTable = get_table_value(data, Toml.SECTION_ROUNDING)
        logger.trace("TOML [parse]: %s", parse_tbl)
        logger.trace("TOML [format]: %s", format_tbl)
        logger.trace("TOML [rounding]: %s", rounding_tbl)

        for section, tbl in (
            (Toml.SECTION_PARSE, parse_tbl),
            (Toml.SECTION_FORMAT, format_tbl),
            (Toml.SECTION_ROUNDING, rounding_tbl),
        ):
            warn_unknown_keys(tbl, known[section], where=f"{prefix}[{section}]", diagnostics=diags)

        where_parse: str = f"{prefix}[{Toml.SECTION_PARSE}]"
        where_format: str = f"{prefix}[{Toml.SECTION_FORMAT}]"
        where_rounding: str = f"{prefix}[{Toml.SECTION_ROUNDING}]"

        def _str(tbl: TomlTable, key: str, where: str) -> str | None:
            return get_string_value_or_none_checked(tbl, key, where=where, diagnostics=diags)

        def _enum(key: str, enum_cls: type[_KE]) -> _KE | None:
            return get_enum_value_checked(
                format_tbl, key, enum_cls, where=where_format, diagnostics=diags
            )

        # ----- [parse] -----
        draft.parse_decimal_separator = _str(parse_tbl, Toml.KEY_DECIMAL_SEPARATOR, where_parse)

        # ----- [format] -----
        culture: str | None = _str(format_tbl, Toml.KEY_CULTURE, where_format)
        if culture is not None:
            try:
                get_culture(culture)
            except UnknownCultureError as e:
                logger.warning("%s.%s: %s", where_format, Toml.KEY_CULTURE, e)
                diags.add_warning(f"{where_format}.{Toml.KEY_CULTURE}: {e}")
                culture = None
        draft.culture = culture
        draft.decimal_separator = _str(format_tbl, Toml.KEY_DECIMAL_SEPARATOR, where_format)
        draft.integer_separator = _str(format_tbl, Toml.KEY_INTEGER_SEPARATOR, where_format)
        draft.grouping = _enum(Toml.KEY_GROUPING, IntegerGrouping)
        draft.negative_style = _enum(Toml.KEY_NEGATIVE_STYLE, NegativeStyle)
        draft.positive_sign = _str(format_tbl, Toml.KEY_POSITIVE_SIGN, where_format)
        draft.currency_symbol = _str(format_tbl, Toml.KEY_CURRENCY_SYMBOL, where_format)
        draft.currency_position = _enum(Toml.KEY_CURRENCY_POSITION, CurrencyPosition)
        draft.field_length = get_int_value_or_none_checked(
            format_tbl, Toml.KEY_FIELD_LENGTH, where=where_format, diagnostics=diags
        )
        draft.justification = _enum(Toml.KEY_JUSTIFICATION, Justification)

        # ----- [rounding] -----
        draft.rounding_mode = get_enum_value_checked(
            rounding_tbl, Toml.KEY_MODE, RoundingMode, where=where_rounding, diagnostics=diags
        )
        draft.rounding_digits = get_int_value_or_none_checked(
            rounding_tbl, Toml.KEY_DIGITS, where=where_rounding, diagnostics=diags
        )

        if source is not None:
            draft.config_files = [str(source)]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> MutableConfig | None:
        """Load a builder from ``numstrkit.toml`` or ``[tool.numstrkit]`` in ``pyproject.toml``.

        Returns:
            MutableConfig | None: The builder, or ``None`` when a ``pyproject.toml``
            has no ``[tool.numstrkit]`` table.

        Raises:
            ConfigFileError: If ``strict`` and the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable | None = extract_tool_table(load_toml_dict(path, strict=strict), path)
        if data is None:
            logger.warning("[tool.numstrkit] section missing or malformed in %s", path)
            return None
        return cls.from_toml_dict(data, source=path)

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a builder.

        Args:
            start (Path | None): Discovery anchor; defaults to the working directory.
            extra_config_files (Iterable[Path] | None): Files merged after discovery,
                in the given order. They are read strictly.
            no_config (bool): Skip discovery (explicit files are still merged).

        Returns:
            MutableConfig: The merged builder (CLI overrides not yet applied).

        Raises:
            ConfigFileError: If an explicit config file cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            discovered: Path | None = discover_config_file(start or Path.cwd())
            if discovered is not None:
                mc: MutableConfig | None = cls.from_toml_file(discovered)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            extra_mc: MutableConfig | None = cls.from_toml_file(Path(extra), strict=True)
            if extra_mc is not None:
                draft = draft.merge_with(extra_mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one.

        When ``other`` sets ``culture``, this builder's ``[format]`` fields are
        not inherited.
        """
        format_base: MutableConfig = self if other.culture is None else MutableConfig()
        merged = MutableConfig(
            config_files=self.config_files + other.config_files,
            diagnostics=DiagnosticLog.from_iterable([*self.diagnostics, *other.diagnostics]),
        )
        for f in fields(self):
            name: str = f.name
            if name in ("config_files", "diagnostics"):
                continue
            fallback: MutableConfig = format_base if name in FORMAT_FIELDS else self
            value: Any = getattr(other, name)
            setattr(merged, name, value if value is not None else getattr(fallback, name))
        return merged

    def merge_table(self, table: TomlTable, source: str | Path | None = None) -> MutableConfig:
        """Return a new builder with ``table`` (TOML shape) layered on top."""
        return self.merge_with(MutableConfig.from_toml_dict(table, source=source))

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Return a new builder with CLI or API overrides layered on top.

        ``args`` uses builder field names (``culture``, ``rounding_digits``, ...).
        ``None`` values mean "not given". Enum fields accept members or tokens.

        Raises:
            ConfigError: If an enum token or the culture is unknown.
        """
        overrides = MutableConfig()
        enum_fields: dict[str, type[KeyedStrEnum]] = {
            "grouping": IntegerGrouping,
            "negative_style": NegativeStyle,
            "currency_position": CurrencyPosition,
            "justification": Justification,
            "rounding_mode": RoundingMode,
        }
        names: set[str] = {f.name for f in fields(self)} - {"config_files", "diagnostics"}
        for name, value in args.items():
            if name not in names or value is None:
                continue
            if name in enum_fields and not isinstance(value, enum_fields[name]):
                parsed: KeyedStrEnum | None = enum_fields[name].parse(str(value))
                if parsed is None:
                    allowed: str = ", ".join(enum_fields[name].keys())
                    raise ConfigError(f"Invalid value for {name}: {value!r} (allowed: {allowed})")
                value = parsed
            if name == "culture":
                try:
                    get_culture(value)
                except UnknownCultureError as e:
                    raise ConfigError(str(e)) from e
            setattr(overrides, name, value)
        logger.debug("CLI overrides: %s", overrides)
        return self.merge_with(overrides)
