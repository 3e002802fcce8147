"""Unit tests for filter value normalisation and LIKE escaping."""

import pytest

from identity.core.query import escape_like, normalize_filter_value


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        ("", None),
        ("alice", ["alice"]),
        (7, [7]),
        (0, [0]),
        ([], None),
        (["", ""], None),
        (["a", "", "b"], ["a", "b"]),
        (("a", None), ["a"]),
        ([1, 2], [1, 2]),
        (True, None),
        ({"a": 1}, None),
        (1.5, None),
    ],
)
def test_normalize_filter_value(value, expected):
    assert normalize_filter_value(value) == expected


def test_escape_like_percent_and_underscore():
    assert escape_like("50%_off") == "50\\%\\_off"


def test_escape_like_escapes_the_escape_character_first():
    assert escape_like("a\\%") == "a\\\\\\%"


def test_escape_like_plain_term_unchanged():
    assert escape_like("alice@example.com") == "alice@example.com"
