# topmark:header:start
#
#   project      : EnumExtender
#   file         : options.py
#   file_relpath : src/enumextender/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and parsing helpers for the EnumExtender CLI.

Flag options are tri-state (``--x/--no-x`` with ``default=None``) so an unset
option inherits from the configuration files instead of overriding them.

``--define`` syntax::

    NAME=ITEM[,ITEM...]      items are valued 0, 1, 2, ...
    NAME=ITEM:VALUE,ITEM     explicit values; later items continue from VALUE + 1
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import click

if TYPE_CHECKING:
    from collections.abc import Callable

F = TypeVar("F", bound="Callable[..., object]")


def parse_definition(raw: str) -> tuple[str, dict[int, str]]:
    """Parse one ``--define`` value into ``(name, {value: item})``.

    Only the syntax is checked here; names and items are validated by the registry.

    Args:
        raw (str): The option value.

    Returns:
        tuple[str, dict[int, str]]: Enumerator name and its items.

    Raises:
        click.BadParameter: On malformed input or a repeated value.
    """
    name, sep, body = raw.partition("=")
    name = name.strip()
    if not sep or not name:
        raise click.BadParameter(
            f"expected NAME=ITEM[,ITEM...], got {raw!r}", param_hint="--define"
        )

    items: dict[int, str] = {}
    next_value = 0
    for token in (t.strip() for t in body.split(",")):
        if not token:
            continue
        item, colon, raw_value = token.partition(":")
        if colon:
            try:
                value = int(raw_value.strip())
            except ValueError:
                raise click.BadParameter(
                    f"invalid value {raw_value!r} for item {item.strip()!r}", param_hint="--define"
                ) from None
        else:
            value = next_value
        if value in items:
            raise click.BadParameter(
                f"value {value} used twice in {name!r}", param_hint="--define"
            )
        items[value] = item.strip()
        next_value = value + 1
    return name, items


def registry_options(func: F) -> F:
    """Attach config, definition and flag override options to a command or group."""
    decorators: list[Callable[[F], F]] = [
        click.option(
            "--config",
            "config_paths",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            multiple=True,
            help="TOML config file (repeatable, last wins). "
            "Defaults to pyproject.toml / enumextender.toml in the current directory.",
        ),
        click.option(
            "-D",
            "--define",
            "definitions",
            multiple=True,
            metavar="NAME=ITEM[,ITEM...]",
            help="Define a user enumerator before running the command (repeatable).",
        ),
        click.option(
            "--allow-user-overwrite/--no-allow-user-overwrite",
            default=None,
            help="Permit redefining a user enumerator.",
        ),
        click.option(
            "--allow-standard-overwrite/--no-allow-standard-overwrite",
            default=None,
            help="Permit shadowing a standard enumeration.",
        ),
        click.option(
            "--allow-empty/--no-allow-empty",
            default=None,
            help="Permit enumerators without items.",
        ),
        click.option(
            "--enforce-naming/--no-enforce-naming",
            "enforce_identifier_naming",
            default=None,
            help="Require identifier-style item names.",
        ),
        click.option(
            "--warnings/--no-warnings",
            "warnings_enabled",
            default=None,
            help="Log warnings for overwrites and empty enumerators.",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func
