# topmark:header:start
#
#   project      : EnumExtender
#   file         : from_value.py
#   file_relpath : src/enumextender/cli/commands/from_value.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnumExtender `from-value` command: reverse lookup of an item by value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enumextender.cli.cmd_common import get_context_registry
from enumextender.cli.errors import EnumExtenderNotFoundError, EnumExtenderUsageError
from enumextender.core.errors import InvalidArgumentType, InvalidIdentifierError, NoSuchMemberError

if TYPE_CHECKING:
    from enumextender.core.model import EnumItem


@click.command(name="from-value", help="Print the item of NAME whose value is VALUE.")
@click.argument("name")
@click.argument("value", type=int)
def from_value_command(*, name: str, value: int) -> None:
    """Resolve ``value`` to an item of enumerator ``name`` and print it."""
    registry = get_context_registry()
    try:
        item: EnumItem | None = registry.from_value(name, value)
    except (InvalidArgumentType, InvalidIdentifierError) as exc:
        raise EnumExtenderUsageError(str(exc)) from exc
    except NoSuchMemberError as exc:
        raise EnumExtenderNotFoundError(str(exc)) from exc
    if item is None:
        raise EnumExtenderNotFoundError(f"{name} has no item with value {value}")
    click.echo(str(item))
