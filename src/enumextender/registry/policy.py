# topmark:header:start
#
#   project      : EnumExtender
#   file         : policy.py
#   file_relpath : src/enumextender/registry/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validation rules applied when an enumerator is defined.

[`ValidationPolicy.validate`][enumextender.registry.policy.ValidationPolicy.validate]
runs the checks below in a fixed order so error messages are deterministic:

1. The name is a non-empty string and not a reserved registry name.
2. Unless ``allow_user_overwrite``, the name is not already user-defined.
3. Unless ``allow_standard_overwrite``, the name is not a standard enumeration.
4. The items are a mapping of non-negative ``int`` keys to ``str`` names
   (a list/tuple of names is accepted as ``{index: name}``); an empty mapping
   requires ``allow_empty``.
5. Per item: unique key, unique name, not the reserved item-enumeration name,
   and identifier syntax when ``enforce_identifier_naming`` is set.

The policy is pure: it raises on the first failure and otherwise returns a
[`Definition`][enumextender.registry.policy.Definition] listing the warnings the
registry should emit. It never touches registry state.

Reserved names are compared after removing underscores and case-folding, so
``from_value``, ``fromValue`` and ``FromValue`` are all reserved.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, cast

from enumextender.config.logging import get_logger
from enumextender.core.errors import (
    DuplicateDefinitionError,
    DuplicateKind,
    EmptyDefinitionError,
    InvalidArgumentType,
    InvalidIdentifierError,
    ReservedItemNameError,
    ReservedNameError,
)
from enumextender.registry.standard import probe

if TYPE_CHECKING:
    from enumextender.config.flags import EnumFlags
    from enumextender.config.logging import EnumExtenderLogger
    from enumextender.core.model import Enum
    from enumextender.registry.standard import StandardEnumProvider

logger: EnumExtenderLogger = get_logger(__name__)

# Registry operation names; never usable as enumerator names.
RESERVED_ENUM_NAMES: Final[frozenset[str]] = frozenset(
    {
        "new",
        "create",
        "find",
        "get",
        "get_standard_enums",
        "from_value",
        "get_enum_items",
    }
)

RESERVED_ITEM_NAME: Final[str] = "get_enum_items"

IDENTIFIER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*\Z")


def _fold(name: str) -> str:
    return name.replace("_", "").casefold()


_RESERVED_ENUM_FOLDED: Final[frozenset[str]] = frozenset(_fold(n) for n in RESERVED_ENUM_NAMES)
_RESERVED_ITEM_FOLDED: Final[str] = _fold(RESERVED_ITEM_NAME)


def is_reserved_name(name: str) -> bool:
    """Return True if ``name`` collides with a registry operation name."""
    return _fold(name) in _RESERVED_ENUM_FOLDED


def is_reserved_item_name(name: str) -> bool:
    """Return True if ``name`` collides with the item-enumeration method name."""
    return _fold(name) == _RESERVED_ITEM_FOLDED


def is_identifier(name: str) -> bool:
    """Return True if ``name`` is letters/digits/underscores, not starting with a digit."""
    return IDENTIFIER_PATTERN.match(name) is not None


@dataclass(frozen=True)
class Definition:
    """Outcome of a successful validation.

    Attributes:
        name (str): The enumerator name.
        items (Mapping[int, str]): Normalized value -> item name mapping.
        overwrites_user (bool): An existing user-defined enumerator will be replaced.
        shadows_standard (bool): A standard enumeration of the same name exists.
        warnings (tuple[str, ...]): Messages for permitted but suspicious conditions.
            Empty when warnings are disabled.
    """

    name: str
    items: Mapping[int, str]
    overwrites_user: bool = False
    shadows_standard: bool = False
    warnings: tuple[str, ...] = ()


class ValidationPolicy:
    """Gate every enumerator definition through the configured checks.

    Args:
        flags (EnumFlags): Frozen configuration flags.
    """

    def __init__(self, flags: EnumFlags) -> None:
        self.flags: EnumFlags = flags

    def check_name(self, name: object, *, operation: str) -> str:
        """Validate an enumerator name argument.

        Args:
            name (object): Candidate name.
            operation (str): Calling operation, used in error messages.

        Returns:
            str: The validated name.

        Raises:
            InvalidArgumentType: If ``name`` is not a string.
            InvalidIdentifierError: If ``name`` is empty.
            ReservedNameError: If ``name`` is a reserved registry operation name.
        """
        if not isinstance(name, str):
            raise InvalidArgumentType(
                f"{operation}(): enumerator name must be a str, got {type(name).__name__}"
            )
        if not name:
            raise InvalidIdentifierError(f"{operation}(): enumerator name must not be empty")
        if is_reserved_name(name):
            raise ReservedNameError(f"{operation}(): enumerator name '{name}' is reserved")
        return name

    @staticmethod
    def check_value(value: object, *, operation: str) -> int:
        """Validate an item value argument (a non-negative ``int``, not ``bool``).

        Raises:
            InvalidArgumentType: If ``value`` is not a non-negative integer.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentType(
                f"{operation}(): value must be an int, got {type(value).__name__}"
            )
        if value < 0:
            raise InvalidArgumentType(f"{operation}(): value must not be negative, got {value}")
        return value

    def validate(
        self,
        name: object,
        items: object,
        *,
        user_enums: Mapping[str, Enum],
        provider: StandardEnumProvider,
    ) -> Definition:
        """Run all checks for a new enumerator definition.

        Args:
            name (object): Requested enumerator name.
            items (object): Mapping of value -> item name, or a list/tuple of names.
            user_enums (Mapping[str, Enum]): Currently registered user enumerators.
            provider (StandardEnumProvider): Standard provider to probe for collisions.

        Returns:
            Definition: Normalized definition plus warnings to emit.

        Raises:
            InvalidArgumentType: Wrong name or item collection type/shape.
            InvalidIdentifierError: Empty name, or item name fails identifier syntax.
            ReservedNameError: Reserved enumerator or item name.
            DuplicateDefinitionError: Name, key or value collision.
            EmptyDefinitionError: No items while ``allow_empty`` is off.
        """
        flags: EnumFlags = self.flags
        checked_name: str = self.check_name(name, operation="create")

        overwrites_user: bool = checked_name in user_enums
        if overwrites_user and not flags.allow_user_overwrite:
            raise DuplicateDefinitionError(
                f"create(): user-made enumerator '{checked_name}' already exists",
                kind=DuplicateKind.NAME,
            )

        shadows_standard: bool = probe(provider, checked_name)
        if shadows_standard and not flags.allow_standard_overwrite:
            raise DuplicateDefinitionError(
                f"create(): standard enumerator '{checked_name}' already exists",
                kind=DuplicateKind.STANDARD_NAME,
            )

        entries: list[tuple[int, str]] = self._typed_entries(items)
        if not entries and not flags.allow_empty:
            raise EmptyDefinitionError(f"create(): enumerator '{checked_name}' has no items")

        normalized: dict[int, str] = {}
        seen_names: set[str] = set()
        for key, value in entries:
            if key in normalized:
                raise DuplicateDefinitionError(
                    f"create(): item keys must be unique, got {key} twice",
                    kind=DuplicateKind.KEY,
                )
            if value in seen_names:
                raise DuplicateDefinitionError(
                    f"create(): item names must be unique, got '{value}' twice",
                    kind=DuplicateKind.VALUE,
                )
            if is_reserved_item_name(value):
                raise ReservedItemNameError(f"create(): item name '{value}' is reserved")
            if not value or (flags.enforce_identifier_naming and not is_identifier(value)):
                raise InvalidIdentifierError(f"create(): illegal item name '{value}'")
            normalized[key] = value
            seen_names.add(value)

        warnings: list[str] = []
        if flags.warnings_enabled:
            if overwrites_user:
                warnings.append(f"user-made enumerator '{checked_name}' is being overwritten")
            if shadows_standard:
                warnings.append(f"standard enumerator '{checked_name}' is being overwritten")
            if not normalized:
                warnings.append(f"enumerator '{checked_name}' has no elements")

        logger.trace("Validated enumerator %s with %d item(s)", checked_name, len(normalized))
        return Definition(
            name=checked_name,
            items=MappingProxyType(normalized),
            overwrites_user=overwrites_user,
            shadows_standard=shadows_standard,
            warnings=tuple(warnings),
        )

    @staticmethod
    def _typed_entries(items: object) -> list[tuple[int, str]]:
        """Return ``(value, name)`` pairs, checking key and name types.

        Accepts a mapping or a list/tuple of names (indexed from 0).

        Raises:
            InvalidArgumentType: On a non-collection, a non-int or negative key,
                or a non-str name.
        """
        raw: list[tuple[object, object]]
        if isinstance(items, Mapping):
            raw = list(cast("Mapping[object, object]", items).items())
        elif isinstance(items, (list, tuple)):
            raw = list(enumerate(cast("Sequence[object]", items)))
        else:
            raise InvalidArgumentType(
                f"create(): items must be a mapping, got {type(items).__name__}"
            )

        out: list[tuple[int, str]] = []
        for key, value in raw:
            if isinstance(key, bool) or not isinstance(key, int):
                raise InvalidArgumentType(f"create(): item keys must be int, got {key!r}")
            if key < 0:
                raise InvalidArgumentType(f"create(): item keys must not be negative, got {key}")
            if not isinstance(value, str):
                raise InvalidArgumentType(f"create(): item names must be str, got {value!r}")
            out.append((key, value))
        return out
