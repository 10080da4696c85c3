# topmark:header:start
#
#   project      : EnumExtender
#   file         : main.py
#   file_relpath : src/enumextender/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnumExtender CLI entry point.

Group-level options are resolved once: flags are loaded from TOML and CLI
overrides, an [`EnumRegistry`][enumextender.registry.EnumRegistry] is built,
``--define`` enumerators are created in it, and the registry is placed into
``ctx.obj`` for the subcommands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enumextender.cli.commands.config import config_command
from enumextender.cli.commands.from_value import from_value_command
from enumextender.cli.commands.list import list_command
from enumextender.cli.commands.show import show_command
from enumextender.cli.commands.version import version_command
from enumextender.cli.errors import EnumExtenderUsageError
from enumextender.cli.options import parse_definition, registry_options
from enumextender.config.flags import MutableEnumFlags
from enumextender.config.loaders import load_flags
from enumextender.config.logging import get_logger, resolve_env_log_level, setup_logging
from enumextender.core.errors import EnumExtenderError
from enumextender.registry import EnumRegistry

if TYPE_CHECKING:
    from pathlib import Path

    from enumextender.config.flags import EnumFlags

logger = get_logger(__name__)


def init_registry(
    ctx: click.Context,
    *,
    config_paths: tuple[Path, ...],
    definitions: tuple[str, ...],
    overrides: MutableEnumFlags,
) -> EnumRegistry:
    """Build the registry for this invocation and store it on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` receives ``flags`` and ``registry``.
        config_paths (tuple[Path, ...]): Explicit config files; empty means discover.
        definitions (tuple[str, ...]): Raw ``--define`` values.
        overrides (MutableEnumFlags): Flag overrides from the command line.

    Returns:
        EnumRegistry: The populated registry.

    Raises:
        EnumExtenderUsageError: If a definition is rejected by the registry.
    """
    ctx.ensure_object(dict)
    flags: EnumFlags = load_flags(config_paths or None, overrides=overrides)
    registry = EnumRegistry(flags)
    for raw in definitions:
        name, items = parse_definition(raw)
        try:
            registry.create(name, items)
        except EnumExtenderError as exc:
            raise EnumExtenderUsageError(f"--define {raw!r}: {exc}") from exc
    ctx.obj["flags"] = flags
    ctx.obj["registry"] = registry
    logger.debug("Registry ready: %r", registry)
    return registry


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Inspect standard and user-defined enumerations.",
)
@registry_options
@click.pass_context
def cli(
    ctx: click.Context,
    config_paths: tuple[Path, ...],
    definitions: tuple[str, ...],
    allow_user_overwrite: bool | None,
    allow_standard_overwrite: bool | None,
    allow_empty: bool | None,
    enforce_identifier_naming: bool | None,
    warnings_enabled: bool | None,
) -> None:
    """Entry point for the EnumExtender CLI."""
    setup_logging(level=resolve_env_log_level())
    init_registry(
        ctx,
        config_paths=config_paths,
        definitions=definitions,
        overrides=MutableEnumFlags(
            allow_user_overwrite=allow_user_overwrite,
            allow_standard_overwrite=allow_standard_overwrite,
            allow_empty=allow_empty,
            enforce_identifier_naming=enforce_identifier_naming,
            warnings_enabled=warnings_enabled,
        ),
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(list_command)

cli.add_command(show_command)

cli.add_command(from_value_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
