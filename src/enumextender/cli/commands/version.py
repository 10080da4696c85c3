# topmark:header:start
#
#   project      : EnumExtender
#   file         : version.py
#   file_relpath : src/enumextender/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnumExtender `version` command."""

from __future__ import annotations

import click

from enumextender.constants import ENUMEXTENDER_VERSION


@click.command(name="version", help="Show the installed EnumExtender version.")
def version_command() -> None:
    """Print the package version."""
    click.echo(f"enumextender {ENUMEXTENDER_VERSION}")
