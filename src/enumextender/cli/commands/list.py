# topmark:header:start
#
#   project      : EnumExtender
#   file         : list.py
#   file_relpath : src/enumextender/cli/commands/list.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnumExtender `list` command.

Lists every resolvable enumerator name together with its source (``user`` or
``standard``) and item count.
"""

from __future__ import annotations

import json
from typing import Any

import click

from enumextender.cli.cmd_common import emit_diagnostics, get_context_registry, source_of


@click.command(
    name="list",
    help="List enumerator names.",
    epilog="""
User-defined enumerators shadow standard enumerations of the same name.
""",
)
@click.option("--user-only", is_flag=True, help="Only list user-defined enumerators.")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of text.")
@click.option(
    "--diagnostics",
    "show_diagnostics",
    is_flag=True,
    help="Print warnings recorded while defining enumerators.",
)
def list_command(
    *,
    user_only: bool = False,
    as_json: bool = False,
    show_diagnostics: bool = False,
) -> None:
    """List enumerators.

    Args:
        user_only (bool): If True, skip standard enumerations.
        as_json (bool): If True, emit a JSON array of ``{name, source, items}``.
        show_diagnostics (bool): If True, print recorded diagnostics to stderr.
    """
    registry = get_context_registry()
    names: tuple[str, ...] = registry.user_names() if user_only else registry.names()

    rows: list[dict[str, Any]] = [
        {"name": n, "source": source_of(registry, n), "items": len(registry.get(n))}
        for n in names
    ]

    if as_json:
        click.echo(json.dumps(rows, indent=2))
    else:
        width: int = max((len(n) for n in names), default=0)
        for row in rows:
            click.echo(f"{row['name']:<{width}}  {row['source']:<8}  {row['items']}")

    if show_diagnostics:
        emit_diagnostics(registry)
