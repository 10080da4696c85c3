# topmark:header:start
#
#   project      : EnumExtender
#   file         : test_enum_registry.py
#   file_relpath : tests/registry/test_enum_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Behavioral tests for EnumRegistry creation and lookup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pytest

from enumextender.core.diagnostics import DiagnosticLevel
from enumextender.core.errors import (
    DuplicateDefinitionError,
    DuplicateKind,
    EmptyDefinitionError,
    ImmutableWriteError,
    InvalidArgumentType,
    InvalidIdentifierError,
    NoSuchMemberError,
    ReservedItemNameError,
    ReservedNameError,
)
from tests.conftest import make_registry

if TYPE_CHECKING:
    from enumextender.core.model import Enum
    from enumextender.registry import EnumRegistry

DIFFICULTY: dict[int, str] = {0: "Easy", 1: "Normal", 2: "Hard"}


def test_create_then_find_returns_ordered_items(registry: EnumRegistry) -> None:
    """Items come back ordered by value."""
    registry.create("Difficulty", {2: "Hard", 0: "Easy", 1: "Normal"})
    found: Enum | None = registry.find("Difficulty")
    assert found is not None
    assert [(i.name, i.value) for i in found.get_enum_items()] == [
        ("Easy", 0),
        ("Normal", 1),
        ("Hard", 2),
    ]


def test_new_is_an_alias_of_create(registry: EnumRegistry) -> None:
    """new() defines enumerators exactly like create()."""
    registry.new("Speed", ["Slow", "Fast"])
    assert registry["Speed"]["Fast"].value == 1


def test_duplicate_user_definition_keeps_first(registry: EnumRegistry) -> None:
    """A second create() with the same name fails and leaves the first intact."""
    registry.create("Difficulty", DIFFICULTY)
    first = registry["Difficulty"]
    with pytest.raises(DuplicateDefinitionError) as excinfo:
        registry.create("Difficulty", {0: "Other"})
    assert excinfo.value.kind is DuplicateKind.NAME
    assert registry["Difficulty"] is first
    assert first.names() == ("Easy", "Normal", "Hard")


def test_user_overwrite_replaces_and_warns(caplog: pytest.LogCaptureFixture) -> None:
    """With allow_user_overwrite the new definition replaces the old one."""
    registry = make_registry(allow_user_overwrite=True)
    registry.create("Difficulty", DIFFICULTY)
    with caplog.at_level(logging.WARNING):
        registry.create("Difficulty", {0: "Only"})
    assert registry["Difficulty"].names() == ("Only",)
    assert "user-made enumerator 'Difficulty' is being overwritten" in caplog.text


@pytest.mark.parametrize("name", ["GetEnumItems", "get_enum_items", "find", "New", "FromValue"])
def test_reserved_enum_name_is_rejected(registry: EnumRegistry, name: str) -> None:
    """Registry operation names cannot be used as enumerator names."""
    with pytest.raises(ReservedNameError):
        registry.create(name, {0: "X"})
    with pytest.raises(InvalidIdentifierError):
        registry.create(name, {0: "X"})
    assert registry.user_names() == ()


def test_reserved_item_name_is_rejected(registry: EnumRegistry) -> None:
    """The item-enumeration method name cannot be used as an item name."""
    with pytest.raises(ReservedItemNameError):
        registry.create("Foo", {0: "GetEnumItems"})
    assert registry.find("Foo") is None


def test_empty_definition_rejected_by_default(registry: EnumRegistry) -> None:
    """Empty definitions fail unless allowed."""
    with pytest.raises(EmptyDefinitionError):
        registry.create("Foo", {})
    assert registry.find("Foo") is None


def test_empty_definition_allowed_warns(caplog: pytest.LogCaptureFixture) -> None:
    """Allowed empty definitions succeed and emit an observable warning."""
    registry = make_registry(allow_empty=True)
    with caplog.at_level(logging.WARNING):
        registry.create("Foo", {})
    found = registry.find("Foo")
    assert found is not None
    assert found.get_enum_items() == []
    assert "enumerator 'Foo' has no elements" in caplog.text
    assert [(d.level, d.message, d.enum_name) for d in registry.diagnostics] == [
        (DiagnosticLevel.WARNING, "enumerator 'Foo' has no elements", "Foo")
    ]


def test_warnings_can_be_disabled(caplog: pytest.LogCaptureFixture) -> None:
    """With warnings off, permitted conditions are silent."""
    registry = make_registry(allow_empty=True, warnings_enabled=False)
    with caplog.at_level(logging.WARNING):
        registry.create("Foo", {})
    assert "has no elements" not in caplog.text
    assert registry.diagnostics == ()


def test_from_value_negative_is_type_error(registry: EnumRegistry) -> None:
    """Negative values are rejected before the enumerator is even looked up."""
    with pytest.raises(InvalidArgumentType):
        registry.from_value("Foo", -1)


def test_from_value(registry: EnumRegistry) -> None:
    """from_value returns the matching item or None."""
    registry.create("Difficulty", DIFFICULTY)
    item = registry.from_value("Difficulty", 2)
    assert item is not None
    assert str(item) == "Difficulty.Hard"
    assert registry.from_value("Difficulty", 7) is None


@pytest.mark.parametrize(
    ("name", "value", "exc"),
    [
        ("Missing", 0, NoSuchMemberError),
        ("from_value", 0, ReservedNameError),
        (3, 0, InvalidArgumentType),
        ("Difficulty", True, InvalidArgumentType),
        ("Difficulty", "1", InvalidArgumentType),
    ],
)
def test_from_value_errors(
    registry: EnumRegistry, name: Any, value: Any, exc: type[Exception]
) -> None:
    """from_value validates its arguments and requires an existing enumerator."""
    registry.create("Difficulty", DIFFICULTY)
    with pytest.raises(exc):
        registry.from_value(name, value)


def test_find_falls_back_to_standard(registry: EnumRegistry) -> None:
    """Names absent from the user table resolve against the standard provider."""
    color = registry.find("Color")
    assert color is not None
    assert color.names() == ("RED", "GREEN", "BLUE")
    assert registry.from_value("Color", 1) is color["GREEN"]
    assert not registry.is_user_defined("Color")
    assert "Color" in registry


def test_find_misses(registry: EnumRegistry) -> None:
    """Unknown, empty and reserved names yield None; non-strings are type errors."""
    assert registry.find("Nope") is None
    assert registry.find("") is None
    assert registry.find("GetStandardEnums") is None
    with pytest.raises(InvalidArgumentType):
        registry.find(42)  # type: ignore[arg-type]
    assert 42 not in registry


def test_strict_lookup(registry: EnumRegistry) -> None:
    """get() and indexing raise NoSuchMemberError for unknown names."""
    with pytest.raises(NoSuchMemberError, match="Nope is not a valid enumerator"):
        registry.get("Nope")
    with pytest.raises(KeyError):
        _ = registry["Nope"]


def test_standard_name_collision(registry: EnumRegistry) -> None:
    """Standard names cannot be redefined by default."""
    with pytest.raises(DuplicateDefinitionError) as excinfo:
        registry.create("Color", {0: "CYAN"})
    assert excinfo.value.kind is DuplicateKind.STANDARD_NAME


def test_shadowing_standard_keeps_provider_untouched(caplog: pytest.LogCaptureFixture) -> None:
    """A shadowing user enumerator wins in find(); the provider keeps its own."""
    registry = make_registry(allow_standard_overwrite=True)
    with caplog.at_level(logging.WARNING):
        registry.create("Color", {0: "CYAN", 1: "MAGENTA"})
    assert "standard enumerator 'Color' is being overwritten" in caplog.text
    assert registry["Color"].names() == ("CYAN", "MAGENTA")
    assert registry.is_user_defined("Color")
    assert registry.get_standard_enums().get("Color").names() == ("RED", "GREEN", "BLUE")


def test_failed_create_leaves_registry_unchanged(registry: EnumRegistry) -> None:
    """Validation errors never leave a partial definition behind."""
    registry.create("Difficulty", DIFFICULTY)
    before = registry.as_mapping()
    for items in ({0: "A", 1: "A"}, {0: "ok", 1: "not ok"}, {0: "A", -1: "B"}):
        with pytest.raises(
            (DuplicateDefinitionError, InvalidIdentifierError, InvalidArgumentType)
        ):
            registry.create("Broken", items)
    assert registry.as_mapping() == before
    assert registry.user_names() == ("Difficulty",)


def test_snapshot_is_not_affected_by_later_creates(registry: EnumRegistry) -> None:
    """as_mapping() returns a stable snapshot."""
    registry.create("A", ["x"])
    snapshot = registry.as_mapping()
    registry.create("B", ["y"])
    assert list(snapshot) == ["A"]
    assert registry.user_names() == ("A", "B")


def test_registry_is_read_only(registry: EnumRegistry) -> None:
    """Item and attribute writes on the registry raise ImmutableWriteError."""
    registry.create("A", ["x"])
    with pytest.raises(ImmutableWriteError):
        registry["B"] = registry["A"]  # type: ignore[index]
    with pytest.raises(ImmutableWriteError):
        del registry["A"]  # type: ignore[attr-defined]
    with pytest.raises(ImmutableWriteError):
        registry.A = 1  # type: ignore[attr-defined]
    with pytest.raises(ImmutableWriteError):
        registry.allow_empty = True  # type: ignore[misc]
    assert registry.user_names() == ("A",)


def test_flag_properties() -> None:
    """Flags are readable from the registry."""
    registry = make_registry(allow_empty=True, enforce_identifier_naming=False)
    assert registry.allow_empty is True
    assert registry.enforce_identifier_naming is False
    assert registry.allow_user_overwrite is False
    assert registry.allow_standard_overwrite is False
    assert registry.warnings_enabled is True


def test_names_merge_user_and_standard(registry: EnumRegistry) -> None:
    """names() lists user and standard enumerators once each, sorted."""
    registry.create("Difficulty", DIFFICULTY)
    assert registry.names() == ("Color", "Difficulty", "Temperature")


def test_standard_negative_members_are_skipped(registry: EnumRegistry) -> None:
    """Negative members of a standard IntEnum are not exposed."""
    temperature = registry["Temperature"]
    assert temperature.names() == ("FREEZING", "BOILING")
    assert registry.from_value("Temperature", 100) is temperature["BOILING"]
