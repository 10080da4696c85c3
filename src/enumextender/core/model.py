# topmark:header:start
#
#   project      : EnumExtender
#   file         : model.py
#   file_relpath : src/enumextender/core/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable ``Enum`` and ``EnumItem`` objects.

An [`Enum`][enumextender.core.model.Enum] is a named, ordered collection of
[`EnumItem`][enumextender.core.model.EnumItem] values. Both types are frozen after
construction: attribute assignment, attribute deletion and item assignment raise
[`ImmutableWriteError`][enumextender.core.errors.ImmutableWriteError].

String conversions match the standard enumerations so user-defined and standard
items are indistinguishable in logs:

    ```python
    str(difficulty)          # "Difficulty"
    str(difficulty["Easy"])  # "Difficulty.Easy"
    ```

Notes:
    * Construction trusts its input. User-facing creation goes through
      [`EnumRegistry.create`][enumextender.registry.EnumRegistry.create], which
      validates names and items first.
    * Item order is ascending by ``value``, never insertion order.
"""

from __future__ import annotations

from operator import attrgetter
from types import MappingProxyType
from typing import TYPE_CHECKING, NoReturn

from enumextender.core.errors import ImmutableWriteError, NoSuchMemberError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping


class EnumItem:
    """A single ``(name, value)`` member of an Enum.

    Attributes:
        name (str): Item name, unique within its Enum.
        value (int): Non-negative integer value, unique within its Enum.
        enum_name (str): Registry key of the owning Enum.
    """

    __slots__ = ("_enum_name", "_name", "_value")

    _enum_name: str
    _name: str
    _value: int

    def __init__(self, enum_name: str, name: str, value: int) -> None:
        object.__setattr__(self, "_enum_name", enum_name)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_value", value)

    @property
    def name(self) -> str:
        """Item name."""
        return self._name

    @property
    def value(self) -> int:
        """Item value."""
        return self._value

    @property
    def enum_name(self) -> str:
        """Name of the Enum this item belongs to."""
        return self._enum_name

    def __setattr__(self, key: str, value: object) -> NoReturn:
        raise ImmutableWriteError("EnumItem cannot be modified")

    def __delattr__(self, key: str) -> NoReturn:
        raise ImmutableWriteError("EnumItem cannot be modified")

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return f"{self._enum_name}.{self._name}"

    def __repr__(self) -> str:
        return f"<EnumItem {self._enum_name}.{self._name}: {self._value}>"


class Enum:
    """Immutable, named collection of EnumItems ordered by ascending value.

    Args:
        name (str): Registry key of the enumerator.
        items (Mapping[int, str]): Mapping of value -> item name. Assumed valid
            (unique names, non-negative integer keys).
    """

    __slots__ = ("_by_name", "_items", "_name")

    _name: str
    _items: tuple[EnumItem, ...]
    _by_name: Mapping[str, EnumItem]

    def __init__(self, name: str, items: Mapping[int, str]) -> None:
        built: list[EnumItem] = [
            EnumItem(name, item_name, value) for value, item_name in items.items()
        ]
        built.sort(key=attrgetter("value"))
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_items", tuple(built))
        object.__setattr__(self, "_by_name", MappingProxyType({i.name: i for i in built}))

    @property
    def name(self) -> str:
        """Registry key of this enumerator."""
        return self._name

    def get_enum_items(self) -> list[EnumItem]:
        """Return all items sorted ascending by value.

        A fresh list is returned on every call; mutating it does not affect the Enum.

        Returns:
            list[EnumItem]: The items of this enumerator.
        """
        return list(self._items)

    def get_item(self, name: str) -> EnumItem:
        """Return the item called ``name``.

        Args:
            name (str): Item name.

        Returns:
            EnumItem: The matching item.

        Raises:
            NoSuchMemberError: If the Enum has no such item.
        """
        try:
            return self._by_name[name]
        except (KeyError, TypeError):
            raise NoSuchMemberError(f"{name} is not a valid member of {self._name}") from None

    def find_item(self, name: str) -> EnumItem | None:
        """Return the item called ``name``, or ``None`` if absent."""
        return self._by_name.get(name) if isinstance(name, str) else None

    def names(self) -> tuple[str, ...]:
        """Item names in ascending value order."""
        return tuple(i.name for i in self._items)

    def values(self) -> tuple[int, ...]:
        """Item values in ascending order."""
        return tuple(i.value for i in self._items)

    def __getitem__(self, name: str) -> EnumItem:
        return self.get_item(name)

    def __setitem__(self, key: str, value: object) -> NoReturn:
        raise ImmutableWriteError("Enum cannot be modified")

    def __delitem__(self, key: str) -> NoReturn:
        raise ImmutableWriteError("Enum cannot be modified")

    def __setattr__(self, key: str, value: object) -> NoReturn:
        raise ImmutableWriteError("Enum cannot be modified")

    def __delattr__(self, key: str) -> NoReturn:
        raise ImmutableWriteError("Enum cannot be modified")

    def __contains__(self, item: object) -> bool:
        if isinstance(item, EnumItem):
            return self._by_name.get(item.name) is item
        return isinstance(item, str) and item in self._by_name

    def __iter__(self) -> Iterator[EnumItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<Enum {self._name} ({len(self._items)} items)>"
