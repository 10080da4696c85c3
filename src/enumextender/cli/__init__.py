# topmark:header:start
#
#   project      : EnumExtender
#   file         : __init__.py
#   file_relpath : src/enumextender/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for inspecting enumerations.

The entry point is [`enumextender.cli.main.cli`][enumextender.cli.main.cli].
"""

from __future__ import annotations
