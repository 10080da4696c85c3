# topmark:header:start
#
#   project      : EnumExtender
#   file         : errors.py
#   file_relpath : src/enumextender/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the EnumExtender CLI.

Raise these in commands to report errors with standardized messages and exit
codes. Library errors ([`EnumExtenderError`][enumextender.core.errors.EnumExtenderError])
are translated at the command boundary.
"""

from __future__ import annotations

import click

from enumextender.cli.exit_codes import ExitCode


class EnumExtenderCliError(click.ClickException):
    """Base class for all EnumExtender CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))


class EnumExtenderUsageError(EnumExtenderCliError):
    """Error for invalid flags, arguments or ``--define`` definitions."""

    exit_code = ExitCode.USAGE_ERROR


class EnumExtenderNotFoundError(EnumExtenderCliError):
    """Error for unknown enumerators or values."""

    exit_code = ExitCode.NOT_FOUND
