"""Query filter builder turning list requests into filtered SQLAlchemy queries."""

import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy import ColumnElement, and_, column, or_
from sqlalchemy.orm import Query

from identity.core.constants import COLUMN_GROUP_PATH
from identity.core.query.fields import SEARCH_WORD_COLUMN, filter_fields_for
from identity.core.query.metadata import TableRegistry, default_registry
from identity.core.query.pagination import (
    get_limit_from_request,
    get_offset_from_request,
)
from identity.core.query.values import (
    LIKE_ESCAPE_CHAR,
    contains_pattern,
    is_string_list,
    normalize_filter_value,
)

logger = logging.getLogger(__name__)

# Searchable columns with this suffix hold identifiers and only match exactly
ID_COLUMN_SUFFIX = "_id"


def _search_clause(column_name: str, term: str) -> ColumnElement[bool]:
    col = column(column_name)
    if column_name.endswith(ID_COLUMN_SUFFIX):
        return col == term
    return col.ilike(contains_pattern(term), escape=LIKE_ESCAPE_CHAR)


class QueryChain:
    """Accumulates filters, ordering and pagination onto an ORM query.

    Every method narrows ``self.query`` and returns the chain, so calls can be
    strung together:

        users = (
            QueryChain(db.query(User))
            .build_filter_conditions(request, TABLE_USER)
            .add_query_order_dir(request, COLUMN_CREATE_TIME)
            .paginate(request)
            .query.all()
        )

    Column names are rendered as identifiers and all values as bound
    parameters. The chain never executes the query.
    """

    def __init__(self, query: Query, registry: TableRegistry | None = None):
        self.query = query
        self.registry = registry or default_registry()

    def where(self, *criteria: ColumnElement[bool]) -> "QueryChain":
        self.query = self.query.filter(*criteria)
        return self

    def build_filter_conditions(
        self, request: Any, table_name: str, exclude: Iterable[str] = ()
    ) -> "QueryChain":
        """Restrict the query by every indexed column and search word ``request`` carries.

        Args:
            request: Request object; its fields are read through its filter field table.
            table_name: Table whose metadata decides which fields apply.
            exclude: Columns left out of the free-text search (indexed filters still apply).

        Returns:
            The chain, with an ``IN`` predicate per non-empty indexed field and
            the search clause when the table supports search.
        """
        indexed_columns = self.registry.indexed_columns(table_name)
        searchable = self.registry.is_searchable(table_name)
        exclude = frozenset(exclude)

        for field in filter_fields_for(request):
            if field.indexed and field.column in indexed_columns:
                value = normalize_filter_value(field.value(request))
                if value is not None:
                    self.where(column(field.column).in_(value))
            if field.column == SEARCH_WORD_COLUMN and searchable:
                value = normalize_filter_value(field.value(request))
                self._apply_search_filter(table_name, value, exclude)
        return self

    def _apply_search_filter(
        self, table_name: str, value: Any, exclude: frozenset[str]
    ) -> None:
        # One OR group per term over the searchable columns, terms AND-ed together
        if value is None:
            return
        if not is_string_list(value):
            logger.warning(f"search_word [{value!r}] is not a list of strings")
            return

        columns = [
            c for c in self.registry.search_columns(table_name) if c not in exclude
        ]
        term_clauses = []
        for term in value:
            clauses = [_search_clause(c, term) for c in columns]
            if clauses:
                term_clauses.append(or_(*clauses))

        if term_clauses:
            self.where(and_(*term_clauses))

    def build_root_group_id_conditions(
        self, root_group_ids: Iterable[str] | None
    ) -> "QueryChain":
        """Keep rows whose group path contains any of ``root_group_ids``.

        Empty ids are ignored; with nothing left the chain is unchanged.
        """
        ids = normalize_filter_value(list(root_group_ids or ()))
        if ids is None:
            return self

        group_path = column(COLUMN_GROUP_PATH)
        return self.where(
            or_(
                *(
                    group_path.like(contains_pattern(str(v)), escape=LIKE_ESCAPE_CHAR)
                    for v in ids
                )
            )
        )

    def add_query_order_dir(self, request: Any, default_column: str) -> "QueryChain":
        """Order by ``request.sort_key`` (or ``default_column``), descending unless ``request.reverse``."""
        sort_key = getattr(request, "sort_key", None)
        order_column = column(sort_key or default_column)
        if getattr(request, "reverse", False):
            self.query = self.query.order_by(order_column.asc())
        else:
            self.query = self.query.order_by(order_column.desc())
        return self

    def paginate(self, request: Any) -> "QueryChain":
        self.query = self.query.offset(get_offset_from_request(request)).limit(
            get_limit_from_request(request)
        )
        return self
