"""Offset/limit clamping and column projection for list requests."""

from typing import Any

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 20
MAX_LIMIT = 200


def get_limit(n: int) -> int:
    if n < 0:
        n = 0
    if n > MAX_LIMIT:
        n = MAX_LIMIT
    return n


def get_offset(n: int) -> int:
    if n < 0:
        n = 0
    return n


def get_offset_from_request(request: Any) -> int:
    """Offset requested by ``request``, ``DEFAULT_OFFSET`` when unset."""
    n = getattr(request, "offset", None) or 0
    if n == 0:
        return DEFAULT_OFFSET
    return get_offset(n)


def get_limit_from_request(request: Any) -> int:
    """
    Limit requested by ``request`` clamped to ``MAX_LIMIT``.

    An unset or zero limit yields ``DEFAULT_LIMIT``; a negative one clamps
    to zero.
    """
    n = getattr(request, "limit", None) or 0
    if n == 0:
        return DEFAULT_LIMIT
    return get_limit(n)


def get_display_columns(
    display_columns: list[str] | None, whole_columns: list[str] | tuple[str, ...]
) -> list[str]:
    """
    Project ``display_columns`` onto the columns a table actually has.

    ``None`` means every column; an empty list means none. Unknown columns
    are dropped silently.
    """
    if display_columns is None:
        return list(whole_columns)
    return [column for column in display_columns if column in whole_columns]
