# topmark:header:start
#
#   project      : EnumExtender
#   file         : exit_codes.py
#   file_relpath : src/enumextender/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the EnumExtender CLI, aligned with BSD `sysexits` where practical."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the EnumExtender CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Invalid flags/arguments, including rejected ``--define``
            definitions. Mirrors BSD ``EX_USAGE (64)``.
        NOT_FOUND: Unknown enumerator or value. Mirrors BSD ``EX_NOINPUT (66)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    NOT_FOUND = 66  # EX_NOINPUT
