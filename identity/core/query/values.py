"""Normalisation of request values into filter values."""

from typing import Any

# Escape character passed to LIKE/ILIKE alongside every escaped pattern
LIKE_ESCAPE_CHAR = "\\"

FilterValue = list[str] | list[int]


def normalize_filter_value(value: Any) -> FilterValue | None:
    """
    Collapse a request value into a filter value.

    Empty strings, ``None`` and empty lists are absent (``None``). A non-empty
    scalar becomes a one-element list; lists drop their empty-string elements.
    Values of any other shape are absent.

    Example:
        >>> normalize_filter_value("alice")
        ['alice']
        >>> normalize_filter_value(["", "bob"])
        ['bob']
        >>> normalize_filter_value("") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return [value] if value != "" else None
    if isinstance(value, int):
        return [value]
    if isinstance(value, (list, tuple)):
        values = [v for v in value if v is not None and v != ""]
        if not values:
            return None
        return values
    return None


def is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def escape_like(term: str) -> str:
    """
    Neutralise LIKE wildcards so ``term`` only ever matches itself.

    ``%``, ``_`` and the escape character are prefixed with
    ``LIKE_ESCAPE_CHAR``; the result must be used with ``escape=LIKE_ESCAPE_CHAR``.

    Example:
        >>> escape_like("50%_off")
        '50\\\\%\\\\_off'
    """
    return (
        term.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", LIKE_ESCAPE_CHAR + "%")
        .replace("_", LIKE_ESCAPE_CHAR + "_")
    )


def contains_pattern(term: str) -> str:
    """Build a substring LIKE pattern from an escaped ``term``."""
    return f"%{escape_like(term)}%"
