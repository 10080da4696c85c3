# topmark:header:start
#
#   project      : EnumExtender
#   file         : flags.py
#   file_relpath : src/enumextender/config/flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration flags governing enumerator definition.

Design:
    * ``MutableEnumFlags`` uses tri-state options (``bool | None``) to represent
      explicit True/False vs. *unset*. This enables non-destructive merges when
      composing multiple sources (defaults → pyproject → enumextender.toml → CLI).
    * ``EnumFlags`` is the fully-resolved, immutable runtime view with plain
      booleans. It is injected into [`EnumRegistry`][enumextender.registry.EnumRegistry]
      at construction time and never changes afterwards.
    * ``MutableEnumFlags.resolve(base)`` fills unset fields from ``base``.

TOML mapping:

    [tool.enumextender]
    allow_user_overwrite = false
    allow_standard_overwrite = false
    allow_empty = false
    enforce_identifier_naming = true
    warnings_enabled = true
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from enumextender.config.keys import Toml

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class EnumFlags:
    """Immutable flags read by the validation policy and the registry.

    Attributes:
        allow_user_overwrite (bool): Permit re-registering an existing user-defined name.
        allow_standard_overwrite (bool): Permit registering a name that shadows a
            standard enumeration.
        allow_empty (bool): Permit creating enumerators without items.
        enforce_identifier_naming (bool): Require item names to look like identifiers
            (letters/digits/underscores, not starting with a digit).
        warnings_enabled (bool): Log and record a warning when a permitted but
            suspicious definition (overwrite, empty enumerator) is made.
    """

    allow_user_overwrite: bool = False
    allow_standard_overwrite: bool = False
    allow_empty: bool = False
    enforce_identifier_naming: bool = True
    warnings_enabled: bool = True

    def thaw(self) -> MutableEnumFlags:
        """Return a mutable builder initialized from these frozen flags.

        Returns:
            MutableEnumFlags: A tri-state mutable builder.
        """
        return MutableEnumFlags(
            allow_user_overwrite=self.allow_user_overwrite,
            allow_standard_overwrite=self.allow_standard_overwrite,
            allow_empty=self.allow_empty,
            enforce_identifier_naming=self.enforce_identifier_naming,
            warnings_enabled=self.warnings_enabled,
        )

    def to_toml_table(self) -> dict[str, Any]:
        """Serialize all flags to a TOML-friendly dict."""
        return self.thaw().to_toml_table()


@dataclass
class MutableEnumFlags:
    """Mutable builder for `EnumFlags`, suitable for config loading/merging.

    Layers are merged in a **last-wins** manner. ``None`` means "inherit".
    """

    allow_user_overwrite: bool | None = None
    allow_standard_overwrite: bool | None = None
    allow_empty: bool | None = None
    enforce_identifier_naming: bool | None = None
    warnings_enabled: bool | None = None

    def merge_with(self, other: MutableEnumFlags) -> MutableEnumFlags:
        """Return a new builder by applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.

        Args:
            other (MutableEnumFlags): The flags whose values override current ones.

        Returns:
            MutableEnumFlags: Merged flags.
        """

        def pick(*, current: bool | None, override: bool | None) -> bool | None:
            return override if override is not None else current

        return MutableEnumFlags(
            allow_user_overwrite=pick(
                override=other.allow_user_overwrite, current=self.allow_user_overwrite
            ),
            allow_standard_overwrite=pick(
                override=other.allow_standard_overwrite, current=self.allow_standard_overwrite
            ),
            allow_empty=pick(override=other.allow_empty, current=self.allow_empty),
            enforce_identifier_naming=pick(
                override=other.enforce_identifier_naming, current=self.enforce_identifier_naming
            ),
            warnings_enabled=pick(override=other.warnings_enabled, current=self.warnings_enabled),
        )

    def resolve(self, base: EnumFlags) -> EnumFlags:
        """Resolve tri-state fields against a base frozen instance.

        Args:
            base (EnumFlags): Provides values for unset fields.

        Returns:
            EnumFlags: Fully-resolved immutable flags.
        """
        return EnumFlags(
            allow_user_overwrite=(
                base.allow_user_overwrite
                if self.allow_user_overwrite is None
                else self.allow_user_overwrite
            ),
            allow_standard_overwrite=(
                base.allow_standard_overwrite
                if self.allow_standard_overwrite is None
                else self.allow_standard_overwrite
            ),
            allow_empty=base.allow_empty if self.allow_empty is None else self.allow_empty,
            enforce_identifier_naming=(
                base.enforce_identifier_naming
                if self.enforce_identifier_naming is None
                else self.enforce_identifier_naming
            ),
            warnings_enabled=(
                base.warnings_enabled if self.warnings_enabled is None else self.warnings_enabled
            ),
        )

    def freeze(self) -> EnumFlags:
        """Freeze to concrete `EnumFlags`, using the defaults for unset fields."""
        return self.resolve(EnumFlags())

    @classmethod
    def from_toml_table(cls, tbl: Mapping[str, Any] | None) -> MutableEnumFlags:
        """Create a builder from a TOML table mapping.

        Unspecified keys become ``None`` (inherit from base at freeze time).

        Args:
            tbl (Mapping[str, Any] | None): Table with keys matching the attributes.

        Returns:
            MutableEnumFlags: Parsed flags.
        """
        if not tbl:
            return cls()

        def pick(key: str) -> bool | None:
            return None if key not in tbl else bool(tbl[key])

        return cls(
            allow_user_overwrite=pick(Toml.KEY_ALLOW_USER_OVERWRITE),
            allow_standard_overwrite=pick(Toml.KEY_ALLOW_STANDARD_OVERWRITE),
            allow_empty=pick(Toml.KEY_ALLOW_EMPTY),
            enforce_identifier_naming=pick(Toml.KEY_ENFORCE_IDENTIFIER_NAMING),
            warnings_enabled=pick(Toml.KEY_WARNINGS_ENABLED),
        )

    def to_toml_table(self) -> dict[str, Any]:
        """Serialize only explicitly set keys to a TOML-friendly dict.

        Returns:
            dict[str, Any]: Table with primitive types only.
        """
        out: dict[str, Any] = {}
        if self.allow_user_overwrite is not None:
            out[Toml.KEY_ALLOW_USER_OVERWRITE] = self.allow_user_overwrite
        if self.allow_standard_overwrite is not None:
            out[Toml.KEY_ALLOW_STANDARD_OVERWRITE] = self.allow_standard_overwrite
        if self.allow_empty is not None:
            out[Toml.KEY_ALLOW_EMPTY] = self.allow_empty
        if self.enforce_identifier_naming is not None:
            out[Toml.KEY_ENFORCE_IDENTIFIER_NAMING] = self.enforce_identifier_naming
        if self.warnings_enabled is not None:
            out[Toml.KEY_WARNINGS_ENABLED] = self.warnings_enabled
        return out
