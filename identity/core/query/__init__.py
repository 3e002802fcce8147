"""Generic query filter builder for list requests."""

from identity.core.query.chain import QueryChain
from identity.core.query.fields import (
    ROOT_GROUP_ID_COLUMN,
    SEARCH_WORD_COLUMN,
    UNMAPPED,
    FilterField,
    declare_filter_fields,
    filter_fields_for,
)
from identity.core.query.metadata import (
    TableMetadata,
    TableRegistry,
    build_registry,
    default_registry,
)
from identity.core.query.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    MAX_LIMIT,
    get_display_columns,
    get_limit_from_request,
    get_offset_from_request,
)
from identity.core.query.values import escape_like, normalize_filter_value

__all__ = [
    "QueryChain",
    "FilterField",
    "declare_filter_fields",
    "filter_fields_for",
    "SEARCH_WORD_COLUMN",
    "ROOT_GROUP_ID_COLUMN",
    "UNMAPPED",
    "TableMetadata",
    "TableRegistry",
    "build_registry",
    "default_registry",
    "DEFAULT_LIMIT",
    "DEFAULT_OFFSET",
    "MAX_LIMIT",
    "get_display_columns",
    "get_limit_from_request",
    "get_offset_from_request",
    "escape_like",
    "normalize_filter_value",
]
