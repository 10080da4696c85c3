# topmark:header:start
#
#   project      : EnumExtender
#   file         : cmd_common.py
#   file_relpath : src/enumextender/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by EnumExtender CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enumextender.core.diagnostics import compute_diagnostic_stats

if TYPE_CHECKING:
    from enumextender.core.diagnostics import DiagnosticStats
    from enumextender.registry import EnumRegistry


def get_context_registry(ctx: click.Context | None = None) -> EnumRegistry:
    """Return the registry built by the group callback.

    Args:
        ctx (click.Context | None): Click context; defaults to the current one.

    Returns:
        EnumRegistry: The registry stored in ``ctx.obj``.
    """
    ctx = ctx or click.get_current_context()
    ctx.ensure_object(dict)
    return ctx.obj["registry"]


def source_of(registry: EnumRegistry, name: str) -> str:
    """Return ``"user"`` or ``"standard"`` for an enumerator name."""
    return "user" if registry.is_user_defined(name) else "standard"


def emit_diagnostics(registry: EnumRegistry) -> None:
    """Print recorded registry diagnostics (colored) and a summary to stderr."""
    diags = registry.diagnostics
    if not diags:
        return
    for d in diags:
        click.echo(d.level.color(f"{d.level.value}: {d.message}"), err=True)
    stats: DiagnosticStats = compute_diagnostic_stats(diags)
    click.echo(
        f"{stats.total} diagnostic(s): {stats.n_error} error(s), "
        f"{stats.n_warning} warning(s), {stats.n_info} info",
        err=True,
    )
