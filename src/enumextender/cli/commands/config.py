# topmark:header:start
#
#   project      : EnumExtender
#   file         : config.py
#   file_relpath : src/enumextender/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnumExtender `config` command: dump the effective flags as TOML."""

from __future__ import annotations

import click

from enumextender.config.loaders import render_flags_toml


@click.command(name="config", help="Print the effective flags as TOML.")
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    help="Nest the output under [tool.enumextender].",
)
def config_command(*, for_pyproject: bool = False) -> None:
    """Dump the flags resolved from config files and command-line overrides."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    click.echo(render_flags_toml(ctx.obj["flags"], for_pyproject=for_pyproject), nl=False)
