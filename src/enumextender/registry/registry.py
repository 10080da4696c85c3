# topmark:header:start
#
#   project      : EnumExtender
#   file         : registry.py
#   file_relpath : src/enumextender/registry/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enumeration registry: user-defined enumerators layered over a standard provider.

The [`EnumRegistry`][enumextender.registry.registry.EnumRegistry] is the public
facade. It creates enumerators through the
[`ValidationPolicy`][enumextender.registry.policy.ValidationPolicy], stores them,
and resolves lookups against user-defined enumerators first and the standard
provider second.

Typical usage:
    ```python
    from enumextender.registry import get_registry

    registry = get_registry()
    registry.create("Difficulty", {0: "Easy", 1: "Normal", 2: "Hard"})

    registry.find("Difficulty")           # Enum, or None when absent
    registry["Difficulty"]["Hard"]        # strict: raises NoSuchMemberError
    registry.from_value("Difficulty", 1)  # <EnumItem Difficulty.Normal: 1>
    registry.find("HTTPStatus")           # falls back to the standard provider
    ```

Notes:
    * Overlays never mutate the standard provider; it stays reachable, unshadowed,
      through [`get_standard_enums`][enumextender.registry.registry.EnumRegistry.get_standard_enums].
    * Writes are serialized by an ``RLock``. The user table is replaced
      copy-on-write and published as a ``MappingProxyType``, so reads work on a
      consistent snapshot without taking the lock.
    * The process-wide default instance is created on first use by
      [`get_registry`][enumextender.registry.registry.get_registry]; call
      [`configure_registry`][enumextender.registry.registry.configure_registry]
      before that to inject flags.
"""

from __future__ import annotations

from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, NoReturn

from enumextender.config.flags import EnumFlags
from enumextender.config.logging import get_logger
from enumextender.core.diagnostics import Diagnostic, DiagnosticLevel
from enumextender.core.errors import ImmutableWriteError, InvalidArgumentType, NoSuchMemberError
from enumextender.core.model import Enum
from enumextender.registry.policy import ValidationPolicy, is_reserved_name
from enumextender.registry.standard import get_standard_provider, probe

if TYPE_CHECKING:
    from collections.abc import Mapping

    from enumextender.config.logging import EnumExtenderLogger
    from enumextender.core.model import EnumItem
    from enumextender.registry.policy import Definition
    from enumextender.registry.standard import StandardEnumProvider

logger: EnumExtenderLogger = get_logger(__name__)


class EnumRegistry:
    """Create, store and resolve enumerators alongside a standard provider.

    Args:
        flags (EnumFlags | None): Frozen configuration; defaults to ``EnumFlags()``.
        provider (StandardEnumProvider | None): Standard provider to coexist with;
            defaults to [`get_standard_provider`][enumextender.registry.standard.get_standard_provider].

    Notes:
        Instances are frozen: assigning or deleting attributes, or assigning
        items, raises `ImmutableWriteError`. Only `create` changes the registry.
    """

    __slots__ = ("_diagnostics", "_enums", "_flags", "_lock", "_policy", "_provider")

    _flags: EnumFlags
    _provider: StandardEnumProvider
    _policy: ValidationPolicy
    _lock: RLock
    _enums: Mapping[str, Enum]
    _diagnostics: tuple[Diagnostic, ...]

    def __init__(
        self,
        flags: EnumFlags | None = None,
        *,
        provider: StandardEnumProvider | None = None,
    ) -> None:
        resolved: EnumFlags = flags if flags is not None else EnumFlags()
        object.__setattr__(self, "_flags", resolved)
        object.__setattr__(
            self, "_provider", provider if provider is not None else get_standard_provider()
        )
        object.__setattr__(self, "_policy", ValidationPolicy(resolved))
        object.__setattr__(self, "_lock", RLock())
        object.__setattr__(self, "_enums", MappingProxyType({}))
        object.__setattr__(self, "_diagnostics", ())

    # --- flags (read-only) ---

    @property
    def flags(self) -> EnumFlags:
        """The frozen flags this registry was created with."""
        return self._flags

    @property
    def allow_user_overwrite(self) -> bool:
        return self._flags.allow_user_overwrite

    @property
    def allow_standard_overwrite(self) -> bool:
        return self._flags.allow_standard_overwrite

    @property
    def allow_empty(self) -> bool:
        return self._flags.allow_empty

    @property
    def enforce_identifier_naming(self) -> bool:
        return self._flags.enforce_identifier_naming

    @property
    def warnings_enabled(self) -> bool:
        return self._flags.warnings_enabled

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Warnings recorded by `create`, oldest first."""
        return self._diagnostics

    # --- mutation ---

    def create(self, name: str, items: Mapping[int, str] | list[str] | tuple[str, ...]) -> None:
        """Define a new enumerator.

        Validation runs to completion before anything is stored; on failure the
        registry is left untouched.

        Args:
            name (str): Enumerator name (registry key).
            items (Mapping[int, str] | list[str] | tuple[str, ...]): Mapping of
                value -> item name, or a list/tuple of names valued from 0.

        Raises:
            InvalidArgumentType: Wrong argument type or shape.
            ReservedNameError: Reserved enumerator or item name.
            DuplicateDefinitionError: Name already in use (and overwriting is off),
                or duplicate item keys/names.
            EmptyDefinitionError: No items while empty enumerators are disabled.
            InvalidIdentifierError: An item name fails the naming convention.
        """
        with self._lock:
            definition: Definition = self._policy.validate(
                name, items, user_enums=self._enums, provider=self._provider
            )
            recorded: list[Diagnostic] = []
            for message in definition.warnings:
                logger.warning(message)
                recorded.append(
                    Diagnostic(DiagnosticLevel.WARNING, message, enum_name=definition.name)
                )

            enum = Enum(definition.name, definition.items)
            updated: dict[str, Enum] = dict(self._enums)
            updated[definition.name] = enum
            object.__setattr__(self, "_enums", MappingProxyType(updated))
            if recorded:
                object.__setattr__(self, "_diagnostics", self._diagnostics + tuple(recorded))

        logger.debug("Created enumerator %s with %d item(s)", definition.name, len(enum))

    new = create

    # --- lookup ---

    def find(self, name: str) -> Enum | None:
        """Return the enumerator called ``name``, or ``None``.

        User-defined enumerators take precedence; otherwise the standard provider
        is probed. Reserved names always yield ``None``.

        Args:
            name (str): Enumerator name.

        Returns:
            Enum | None: The enumerator, or ``None`` if it does not exist.

        Raises:
            InvalidArgumentType: If ``name`` is not a string.
        """
        if not isinstance(name, str):
            raise InvalidArgumentType(
                f"find(): enumerator name must be a str, got {type(name).__name__}"
            )
        if not name or is_reserved_name(name):
            return None
        enum: Enum | None = self._enums.get(name)
        if enum is not None:
            return enum
        if not probe(self._provider, name):
            return None
        try:
            return self._provider.get(name)
        except Exception as exc:
            logger.debug("Standard provider lookup for %r failed: %s", name, exc)
            return None

    def get(self, name: str) -> Enum:
        """Strict variant of `find`.

        Raises:
            NoSuchMemberError: If no such enumerator exists.
        """
        enum: Enum | None = self.find(name)
        if enum is None:
            raise NoSuchMemberError(f"{name} is not a valid enumerator")
        return enum

    def get_standard_enums(self) -> StandardEnumProvider:
        """Return the standard provider itself, bypassing user-defined shadowing."""
        return self._provider

    def from_value(self, name: str, value: int) -> EnumItem | None:
        """Return the item of enumerator ``name`` whose value is ``value``.

        Args:
            name (str): Name of an existing enumerator (user-defined or standard).
            value (int): Non-negative item value.

        Returns:
            EnumItem | None: The matching item, or ``None`` if no item has that value.

        Raises:
            InvalidArgumentType: If ``name`` is not a string or ``value`` is not a
                non-negative integer.
            ReservedNameError: If ``name`` is reserved.
            NoSuchMemberError: If the enumerator does not exist.
        """
        checked_name: str = self._policy.check_name(name, operation="from_value")
        checked_value: int = self._policy.check_value(value, operation="from_value")
        for item in self.get(checked_name).get_enum_items():
            if item.value == checked_value:
                return item
        return None

    # --- introspection ---

    def user_names(self) -> tuple[str, ...]:
        """Return user-defined enumerator names (sorted)."""
        return tuple(sorted(self._enums))

    def names(self) -> tuple[str, ...]:
        """Return all resolvable enumerator names, user-defined and standard (sorted)."""
        return tuple(sorted(set(self._enums) | set(self._provider.names())))

    def is_user_defined(self, name: str) -> bool:
        return name in self._enums

    def as_mapping(self) -> Mapping[str, Enum]:
        """Return a read-only snapshot of the user-defined enumerators."""
        return self._enums

    def __getitem__(self, name: str) -> Enum:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __setitem__(self, key: str, value: object) -> NoReturn:
        raise ImmutableWriteError("EnumRegistry cannot be modified; use create()")

    def __delitem__(self, key: str) -> NoReturn:
        raise ImmutableWriteError("EnumRegistry cannot be modified")

    def __setattr__(self, key: str, value: object) -> NoReturn:
        raise ImmutableWriteError("EnumRegistry cannot be modified; use create()")

    def __delattr__(self, key: str) -> NoReturn:
        raise ImmutableWriteError("EnumRegistry cannot be modified")

    def __repr__(self) -> str:
        return f"<EnumRegistry ({len(self._enums)} user-defined enumerators)>"


# --- process default instance ---

_default_lock = RLock()
_default_registry: EnumRegistry | None = None


def configure_registry(
    flags: EnumFlags, *, provider: StandardEnumProvider | None = None
) -> EnumRegistry:
    """Create the process default registry with explicit flags.

    Must be called before the first `get_registry()`.

    Raises:
        ImmutableWriteError: If the default registry already exists.
    """
    global _default_registry
    with _default_lock:
        if _default_registry is not None:
            raise ImmutableWriteError("The default EnumRegistry is already initialized")
        _default_registry = EnumRegistry(flags, provider=provider)
        logger.debug("Default registry configured with %r", flags)
        return _default_registry


def get_registry() -> EnumRegistry:
    """Return the process default registry, creating it on first use.

    When not configured explicitly, flags are loaded from ``pyproject.toml`` /
    ``enumextender.toml`` in the current working directory.
    """
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            from enumextender.config.loaders import load_flags

            _default_registry = EnumRegistry(load_flags())
            logger.debug("Default registry created with %r", _default_registry.flags)
        return _default_registry


def reset_registry() -> None:
    """Drop the process default registry (test scaffolding only)."""
    global _default_registry
    with _default_lock:
        _default_registry = None
