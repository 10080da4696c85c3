# topmark:header:start
#
#   project      : EnumExtender
#   file         : standard.py
#   file_relpath : src/enumextender/registry/standard.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standard (pre-existing, read-only) enumeration providers.

The registry coexists with a *standard enumeration provider*: an external,
read-only source of enumerations it falls back to when no user-defined
enumerator of the requested name exists. Any object implementing
[`StandardEnumProvider`][enumextender.registry.standard.StandardEnumProvider]
can play that role.

[`IntEnumProvider`][enumextender.registry.standard.IntEnumProvider] adapts Python
``IntEnum`` classes. The default provider returned by
[`get_standard_provider`][enumextender.registry.standard.get_standard_provider]
is built lazily on first access and cached thereafter from:

* a fixed set of standard-library ``IntEnum`` classes, and
* ``IntEnum`` classes contributed by plugins via the
  ``enumextender.standard_enums`` entry point group.

Notes:
    * Adapted enumerations are regular [`Enum`][enumextender.core.model.Enum]
      objects, so standard and user-defined items print identically.
    * Members with negative values cannot be represented and are skipped.
"""

from __future__ import annotations

from collections.abc import Iterable as IterABC
from enum import IntEnum
from functools import lru_cache
from http import HTTPStatus
from importlib.metadata import EntryPoints, entry_points
from signal import Signals
from socket import AddressFamily, SocketKind
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, Protocol, cast, runtime_checkable

from enumextender.config.logging import EnumExtenderLogger, get_logger
from enumextender.core.errors import NoSuchMemberError
from enumextender.core.model import Enum

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from enumextender.core.model import EnumItem

logger: EnumExtenderLogger = get_logger(__name__)

BUILTIN_STANDARD_ENUMS: Final[tuple[type[IntEnum], ...]] = (
    HTTPStatus,
    Signals,
    AddressFamily,
    SocketKind,
)

ENTRYPOINT_GROUP: Final[str] = "enumextender.standard_enums"


@runtime_checkable
class StandardEnumProvider(Protocol):
    """Read-only source of pre-existing enumerations."""

    def has(self, name: str) -> bool:
        """Return True if an enumeration called ``name`` exists. Must not raise."""
        ...

    def get(self, name: str) -> Enum:
        """Return the enumeration called ``name``; raise `NoSuchMemberError` if absent."""
        ...

    def get_item(self, enum_name: str, item_name: str) -> EnumItem:
        """Return one item of one enumeration; raise `NoSuchMemberError` if absent."""
        ...

    def names(self) -> tuple[str, ...]:
        """Return all enumeration names (sorted)."""
        ...


def probe(provider: StandardEnumProvider, name: str) -> bool:
    """Non-throwing existence check against a provider.

    Any exception raised by the provider is logged and treated as "not found".
    """
    try:
        return bool(provider.has(name))
    except Exception as exc:
        logger.debug("Standard provider probe for %r failed: %s", name, exc)
        return False


def adapt_int_enum(enum_cls: type[IntEnum]) -> Enum:
    """Convert an ``IntEnum`` class into an immutable `Enum`.

    Aliases are dropped (iteration only yields canonical members) and members
    with negative values are skipped.

    Args:
        enum_cls (type[IntEnum]): The class to adapt.

    Returns:
        Enum: An Enum named after the class.
    """
    items: dict[int, str] = {}
    for member in enum_cls:
        value = int(member)
        if value < 0:
            logger.debug("Skipping negative member %s.%s=%d", enum_cls.__name__, member.name, value)
            continue
        items[value] = member.name
    return Enum(enum_cls.__name__, items)


class IntEnumProvider:
    """Standard enumeration provider backed by ``IntEnum`` classes.

    Enumerations are keyed by class name. When two classes share a name, the
    first one wins and a warning is logged.

    Args:
        enums (Iterable[type[IntEnum]]): Classes to expose.
    """

    def __init__(self, enums: Iterable[type[IntEnum]]) -> None:
        table: dict[str, Enum] = {}
        for enum_cls in enums:
            name: str = enum_cls.__name__
            if name in table:
                logger.warning(
                    "Duplicate standard enumeration name detected: %s (keeping first)", name
                )
                continue
            table[name] = adapt_int_enum(enum_cls)
        self._enums: Mapping[str, Enum] = MappingProxyType(table)

    def has(self, name: str) -> bool:
        return name in self._enums

    def get(self, name: str) -> Enum:
        try:
            return self._enums[name]
        except KeyError:
            raise NoSuchMemberError(f"{name} is not a valid standard enumeration") from None

    def get_item(self, enum_name: str, item_name: str) -> EnumItem:
        return self.get(enum_name).get_item(item_name)

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._enums))

    def as_mapping(self) -> Mapping[str, Enum]:
        """Return a read-only mapping of name -> Enum."""
        return self._enums

    def __iter__(self) -> Iterator[Enum]:
        return iter(self._enums.values())

    def __len__(self) -> int:
        return len(self._enums)

    def __repr__(self) -> str:
        return f"<IntEnumProvider ({len(self._enums)} enumerations)>"


def _iter_plugin_enums() -> Iterable[type[IntEnum]]:
    """Yield ``IntEnum`` classes provided by external plugins (entry points)."""
    try:
        eps = entry_points()
    except Exception:
        logger.exception("Failed to read entry points")
        return

    candidates: EntryPoints = eps.select(group=ENTRYPOINT_GROUP)

    for ep in candidates:
        try:
            provider: Any = ep.load()
            if isinstance(provider, type) and issubclass(provider, IntEnum):
                yield provider
                continue
            provided: Any = provider() if callable(provider) else provider
            if not isinstance(provided, IterABC):
                logger.warning(
                    "Entry point %s did not return an iterable of IntEnum classes: %r",
                    ep.name,
                    provided,
                )
                continue
            for obj in cast("IterABC[object]", provided):
                if isinstance(obj, type) and issubclass(obj, IntEnum):
                    yield obj
                else:
                    logger.warning("Entry point %s provided non-IntEnum: %r", ep.name, obj)
        except Exception:
            logger.exception("Failed loading standard enumerations from entry point %s", ep.name)


@lru_cache(maxsize=1)
def get_standard_provider() -> IntEnumProvider:
    """Return the default standard provider (built-ins plus plugins), built once."""
    enums: list[type[IntEnum]] = list(BUILTIN_STANDARD_ENUMS)
    enums.extend(_iter_plugin_enums())
    provider = IntEnumProvider(enums)
    logger.debug("Standard provider ready with %d enumerations", len(provider))
    return provider
