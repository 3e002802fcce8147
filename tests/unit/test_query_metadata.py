"""Unit tests for table metadata."""

import dataclasses

import pytest

from identity.core.constants import TABLE_GROUP, TABLE_USER, TABLE_USER_GROUP_BINDING
from identity.core.query import TableMetadata, TableRegistry, build_registry, default_registry


def test_default_registry_is_cached():
    assert default_registry() is default_registry()


def test_default_registry_user_table():
    registry = default_registry()

    assert registry.is_searchable(TABLE_USER)
    assert "email" in registry.indexed_columns(TABLE_USER)
    assert "description" not in registry.indexed_columns(TABLE_USER)
    assert registry.search_columns(TABLE_USER)[0] == "user_id"
    assert "password" not in registry.columns(TABLE_USER)


def test_default_registry_group_and_binding_tables():
    registry = default_registry()

    assert registry.is_searchable(TABLE_GROUP)
    assert "group_path" in registry.columns(TABLE_GROUP)
    assert not registry.is_searchable(TABLE_USER_GROUP_BINDING)
    assert registry.search_columns(TABLE_USER_GROUP_BINDING) == ()


def test_unknown_table():
    registry = default_registry()

    assert "missing" not in registry
    assert registry.get("missing") is None
    assert registry.columns("missing") == ()
    assert registry.indexed_columns("missing") == frozenset()
    assert not registry.is_searchable("missing")


def test_metadata_is_immutable():
    table = TableMetadata(name="t", columns=("a",))

    with pytest.raises(dataclasses.FrozenInstanceError):
        table.searchable = True


def test_registry_does_not_see_later_changes_to_its_input():
    tables = [TableMetadata(name="t", columns=("a",))]
    registry = TableRegistry(tables)
    tables.append(TableMetadata(name="u", columns=("b",)))

    assert "u" not in registry


def test_build_registry():
    registry = build_registry(
        columns={"t": ["a", "b_id"]},
        indexed_columns={"t": ["a"]},
        search_columns={"t": ["a", "b_id"]},
        search_tables=["t"],
    )

    assert registry.get("t") == TableMetadata(
        name="t",
        columns=("a", "b_id"),
        indexed_columns=frozenset({"a"}),
        search_columns=("a", "b_id"),
        searchable=True,
    )
