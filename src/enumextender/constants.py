# topmark:header:start
#
#   project      : EnumExtender
#   file         : constants.py
#   file_relpath : src/enumextender/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnumExtender Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

ENUMEXTENDER_VERSION: str = get_version("enumextender")
