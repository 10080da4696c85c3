# topmark:header:start
#
#   project      : EnumExtender
#   file         : show.py
#   file_relpath : src/enumextender/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnumExtender `show` command: print one enumerator's items in value order."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from enumextender.cli.cmd_common import get_context_registry, source_of
from enumextender.cli.errors import EnumExtenderNotFoundError

if TYPE_CHECKING:
    from enumextender.core.model import Enum


@click.command(name="show", help="Show the items of an enumerator.")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of text.")
def show_command(*, name: str, as_json: bool = False) -> None:
    """Show the items of enumerator ``name``, ascending by value."""
    registry = get_context_registry()
    enum: Enum | None = registry.find(name)
    if enum is None:
        raise EnumExtenderNotFoundError(f"Unknown enumerator: {name}")

    items = enum.get_enum_items()
    if as_json:
        payload = {
            "name": enum.name,
            "source": source_of(registry, enum.name),
            "items": [{"name": i.name, "value": i.value} for i in items],
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"{enum} ({source_of(registry, enum.name)})")
    width: int = max((len(str(i.value)) for i in items), default=0)
    for item in items:
        click.echo(f"  {item.value:>{width}}  {item.name}")
