# topmark:header:start
#
#   project      : EnumExtender
#   file         : __init__.py
#   file_relpath : src/enumextender/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnumExtender package.

EnumExtender lets applications define immutable, integer-valued enumerators at
runtime and resolve them through one namespace together with a read-only set of
standard enumerations.
"""

from __future__ import annotations

from enumextender.config.flags import EnumFlags, MutableEnumFlags
from enumextender.core.errors import (
    DuplicateDefinitionError,
    EmptyDefinitionError,
    EnumExtenderError,
    ImmutableWriteError,
    InvalidArgumentType,
    InvalidIdentifierError,
    NoSuchMemberError,
    ReservedItemNameError,
    ReservedNameError,
)
from enumextender.core.model import Enum, EnumItem
from enumextender.registry import EnumRegistry, configure_registry, get_registry

__all__ = [
    "DuplicateDefinitionError",
    "EmptyDefinitionError",
    "Enum",
    "EnumExtenderError",
    "EnumFlags",
    "EnumItem",
    "EnumRegistry",
    "ImmutableWriteError",
    "InvalidArgumentType",
    "InvalidIdentifierError",
    "MutableEnumFlags",
    "NoSuchMemberError",
    "ReservedItemNameError",
    "ReservedNameError",
    "configure_registry",
    "get_registry",
]
