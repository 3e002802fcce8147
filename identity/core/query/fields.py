"""Per-request-type capability tables describing which fields can filter a query."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

from pydantic import BaseModel

# Column name for fields that carry no column tag
UNMAPPED = "-"

# Field whose value feeds the free-text search rather than an IN filter
SEARCH_WORD_COLUMN = "search_word"

# Field listing root groups for group-path filtering
ROOT_GROUP_ID_COLUMN = "root_group_id"


@dataclass(frozen=True)
class FilterField:
    """One request field: the column it maps to and how to read its value."""

    column: str
    extract: Callable[[Any], Any]
    indexed: bool = True

    def value(self, request: Any) -> Any:
        return self.extract(request)


_filter_fields: dict[type, tuple[FilterField, ...]] = {}


def declare_filter_fields(
    request_type: type, fields: Iterable[FilterField | tuple[str, str]]
) -> tuple[FilterField, ...]:
    """
    Register the filter fields of ``request_type`` explicitly.

    Args:
        request_type: Request class the fields belong to.
        fields: ``FilterField`` instances, or ``(column, attribute)`` pairs.

    Returns:
        The registered capability table.
    """
    table = tuple(
        f if isinstance(f, FilterField) else FilterField(f[0], attrgetter(f[1]))
        for f in fields
    )
    _filter_fields[request_type] = table
    return table


def _column_for(name: str, field_info: Any) -> str:
    if field_info.exclude:
        return UNMAPPED
    return field_info.alias or name


def _derive_filter_fields(request_type: type[BaseModel]) -> tuple[FilterField, ...]:
    return tuple(
        FilterField(_column_for(name, info), attrgetter(name))
        for name, info in request_type.model_fields.items()
    )


def filter_fields_for(request: Any) -> tuple[FilterField, ...]:
    """
    Return the capability table for ``request``'s type.

    Explicit declarations win; pydantic models are otherwise described once
    from their field aliases and the result is cached per type. Other objects
    expose no filter fields.
    """
    request_type = type(request)
    table = _filter_fields.get(request_type)
    if table is None:
        if isinstance(request, BaseModel):
            table = _derive_filter_fields(request_type)
        else:
            table = ()
        _filter_fields[request_type] = table
    return table
