"""Read-only per-table metadata consulted by the query builder."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType

from identity.core import constants


@dataclass(frozen=True)
class TableMetadata:
    """Columns of one table and how request fields may filter them."""

    name: str
    columns: tuple[str, ...]
    indexed_columns: frozenset[str] = field(default_factory=frozenset)
    search_columns: tuple[str, ...] = ()
    searchable: bool = False


class TableRegistry:
    """Immutable mapping from table name to ``TableMetadata``.

    Built once and shared by every request; nothing mutates it afterwards.
    """

    def __init__(self, tables: Iterable[TableMetadata]):
        self._tables: Mapping[str, TableMetadata] = MappingProxyType(
            {table.name: table for table in tables}
        )

    def get(self, table_name: str) -> TableMetadata | None:
        return self._tables.get(table_name)

    def __contains__(self, table_name: object) -> bool:
        return table_name in self._tables

    def columns(self, table_name: str) -> tuple[str, ...]:
        table = self._tables.get(table_name)
        return table.columns if table else ()

    def indexed_columns(self, table_name: str) -> frozenset[str]:
        table = self._tables.get(table_name)
        return table.indexed_columns if table else frozenset()

    def search_columns(self, table_name: str) -> tuple[str, ...]:
        table = self._tables.get(table_name)
        return table.search_columns if table else ()

    def is_searchable(self, table_name: str) -> bool:
        table = self._tables.get(table_name)
        return bool(table and table.searchable)


def build_registry(
    columns: Mapping[str, Iterable[str]],
    indexed_columns: Mapping[str, Iterable[str]],
    search_columns: Mapping[str, Iterable[str]],
    search_tables: Iterable[str],
) -> TableRegistry:
    """Assemble a registry from plain name mappings."""
    search_tables = set(search_tables)
    return TableRegistry(
        TableMetadata(
            name=name,
            columns=tuple(cols),
            indexed_columns=frozenset(indexed_columns.get(name, ())),
            search_columns=tuple(search_columns.get(name, ())),
            searchable=name in search_tables,
        )
        for name, cols in columns.items()
    )


@lru_cache
def default_registry() -> TableRegistry:
    """Get the cached registry describing the identity tables."""
    return build_registry(
        columns={
            constants.TABLE_USER: constants.USER_COLUMNS,
            constants.TABLE_GROUP: constants.GROUP_COLUMNS,
            constants.TABLE_USER_GROUP_BINDING: constants.USER_GROUP_BINDING_COLUMNS,
        },
        indexed_columns=constants.INDEXED_COLUMNS,
        search_columns=constants.SEARCH_COLUMNS,
        search_tables=constants.SEARCH_WORD_TABLES,
    )
