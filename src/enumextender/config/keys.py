# topmark:header:start
#
#   project      : EnumExtender
#   file         : keys.py
#   file_relpath : src/enumextender/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML file, section and key names for EnumExtender configuration.

Keys defined here are the *external configuration API*; renaming or removing
one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML names used by EnumExtender configuration.

    The flags live at the root of ``enumextender.toml`` or under
    ``[tool.enumextender]`` in ``pyproject.toml``.
    """

    CONFIG_FILENAME: Final[str] = "enumextender.toml"
    PYPROJECT_FILENAME: Final[str] = "pyproject.toml"

    SECTION_TOOL: Final[str] = "tool"
    SECTION_PYPROJECT: Final[str] = "enumextender"

    KEY_ALLOW_USER_OVERWRITE: Final[str] = "allow_user_overwrite"
    KEY_ALLOW_STANDARD_OVERWRITE: Final[str] = "allow_standard_overwrite"
    KEY_ALLOW_EMPTY: Final[str] = "allow_empty"
    KEY_ENFORCE_IDENTIFIER_NAMING: Final[str] = "enforce_identifier_naming"
    KEY_WARNINGS_ENABLED: Final[str] = "warnings_enabled"
