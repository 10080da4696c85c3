# topmark:header:start
#
#   project      : EnumExtender
#   file         : __init__.py
#   file_relpath : src/enumextender/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for EnumExtender.

Exposes the frozen/mutable flag pair, TOML loaders, and the logging helpers.
"""

from __future__ import annotations

from enumextender.config import logging
from enumextender.config.flags import EnumFlags, MutableEnumFlags
from enumextender.config.loaders import load_flags, load_toml_dict, render_flags_toml

__all__ = [
    "EnumFlags",
    "MutableEnumFlags",
    "load_flags",
    "load_toml_dict",
    "logging",
    "render_flags_toml",
]
