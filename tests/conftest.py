# topmark:header:start
#
#   project      : NumStrKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the NumStrKit test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `numstrkit.config.model.MutableConfig` (mutable),
      then `freeze()` into a `numstrkit.config.model.Config` for **public
      API** calls (``numstrkit.api.format_number_string``).
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from numstrkit.config import logging
from numstrkit.config.model import MutableConfig
from numstrkit.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

    from numstrkit.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_numstrkit_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure NumStrKit's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    NUMSTRKIT_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty project directory.

    Config discovery walks up from the working directory; running from a fresh
    ``tmp_path`` keeps the repository's own ``pyproject.toml`` out of the way
    (it has no ``[tool.numstrkit]`` table, so it is ignored either way).

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Field overrides, as accepted by `MutableConfig.apply_cli_args`.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    return make_mutable_config(**overrides).freeze()


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a mutable builder (defaults plus overrides) for merge tests."""
    return MutableConfig.from_defaults().apply_cli_args(overrides)
