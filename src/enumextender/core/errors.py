# topmark:header:start
#
#   project      : EnumExtender
#   file         : errors.py
#   file_relpath : src/enumextender/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the enumeration registry.

Every error derives from [`EnumExtenderError`][enumextender.core.errors.EnumExtenderError]
and additionally from the closest built-in exception, so callers can catch either
the precise kind or the familiar Python category:

* ``InvalidArgumentType``     – ``TypeError`` (wrong type/shape, negative value)
* ``InvalidIdentifierError``  – ``ValueError`` (naming convention violated)
* ``ReservedNameError``       – subtype of ``InvalidIdentifierError``
* ``DuplicateDefinitionError`` – ``ValueError`` (name/key/value collision)
* ``EmptyDefinitionError``    – ``ValueError`` (zero items where disallowed)
* ``NoSuchMemberError``       – ``KeyError`` (strict lookup miss)
* ``ImmutableWriteError``     – ``AttributeError`` (post-construction mutation)
"""

from __future__ import annotations

from enum import Enum


class DuplicateKind(str, Enum):
    """What collided when a [`DuplicateDefinitionError`][] was raised."""

    NAME = "duplicate-name"
    STANDARD_NAME = "duplicate-standard-name"
    KEY = "duplicate-key"
    VALUE = "duplicate-value"


class EnumExtenderError(Exception):
    """Base class for all enumeration registry errors."""


class InvalidArgumentType(EnumExtenderError, TypeError):
    """An argument has the wrong type or shape (e.g. name not a string)."""


class InvalidIdentifierError(EnumExtenderError, ValueError):
    """A name does not satisfy the naming convention."""


class ReservedNameError(InvalidIdentifierError):
    """A name collides with a reserved registry operation name."""


class ReservedItemNameError(ReservedNameError):
    """An item name collides with the reserved item-enumeration method name."""


class DuplicateDefinitionError(EnumExtenderError, ValueError):
    """A name, key or value collides where overwriting is not allowed.

    Attributes:
        kind (DuplicateKind): Which collision triggered the error.
    """

    def __init__(self, message: str, *, kind: DuplicateKind) -> None:
        super().__init__(message)
        self.kind: DuplicateKind = kind


class EmptyDefinitionError(EnumExtenderError, ValueError):
    """An enumerator without items was requested while empty enums are disabled."""


class NoSuchMemberError(EnumExtenderError, KeyError):
    """Strict lookup of a missing Enum or EnumItem."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message and add quotes.
        return str(self.args[0]) if self.args else ""


class ImmutableWriteError(EnumExtenderError, AttributeError):
    """Attempted mutation of an Enum, EnumItem or the registry."""
