# topmark:header:start
#
#   project      : EnumExtender
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the EnumExtender test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    Tests should not depend on the process default registry. Build an isolated
    `EnumRegistry` with `make_registry(...)` (explicit flags and a small,
    deterministic standard provider) instead. The default registry is reset
    around every test.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import IntEnum
from typing import Any, TypeVar, cast

import pytest

from enumextender.config import EnumFlags, logging
from enumextender.registry import EnumRegistry, IntEnumProvider, reset_registry

F = TypeVar("F", bound=Callable[..., object])

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
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


class Color(IntEnum):
    """Standard enumeration used by the test provider."""

    RED = 0
    GREEN = 1
    BLUE = 2


class Temperature(IntEnum):
    """Standard enumeration with a negative member (skipped on adaptation)."""

    BELOW_ZERO = -1
    FREEZING = 0
    BOILING = 100


def make_provider() -> IntEnumProvider:
    """Return a small, deterministic standard provider (``Color``, ``Temperature``)."""
    return IntEnumProvider([Color, Temperature])


def make_registry(**flags: bool) -> EnumRegistry:
    """Return an isolated registry with the given flag values over the defaults.

    Args:
        **flags (bool): Keyword overrides for `EnumFlags` fields.

    Returns:
        EnumRegistry: A fresh registry backed by `make_provider()`.
    """
    return EnumRegistry(EnumFlags(**flags), provider=make_provider())


@pytest.fixture
def registry() -> EnumRegistry:
    """A fresh registry with default flags."""
    return make_registry()


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear the log level environment variable and reset the default registry.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    reset_registry()
    yield
    reset_registry()


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
