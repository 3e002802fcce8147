"""Unit tests for API exception helpers."""

import pytest
from fastapi import status

from identity.core.exceptions import (
    APIException,
    raise_bad_request,
    raise_conflict,
    raise_forbidden,
    raise_not_found,
)


def test_api_exception_detail_format():
    exc = APIException(code="SOME_CODE", message="Something", details={"a": 1})

    assert exc.status_code == status.HTTP_400_BAD_REQUEST
    assert exc.detail == {
        "error": {"code": "SOME_CODE", "message": "Something", "details": {"a": 1}}
    }


def test_raise_not_found_builds_code_from_resource():
    with pytest.raises(APIException) as exc_info:
        raise_not_found("User", "usr-x")

    assert exc_info.value.status_code == status.HTTP_404_NOT_FOUND
    assert exc_info.value.code == "USER_NOT_FOUND"
    assert "usr-x" in exc_info.value.message


@pytest.mark.parametrize(
    "helper, expected_status",
    [
        (raise_bad_request, status.HTTP_400_BAD_REQUEST),
        (raise_forbidden, status.HTTP_403_FORBIDDEN),
        (raise_conflict, status.HTTP_409_CONFLICT),
    ],
)
def test_raise_helpers(helper, expected_status):
    with pytest.raises(APIException) as exc_info:
        helper(code="X", message="y")

    assert exc_info.value.status_code == expected_status
    assert exc_info.value.code == "X"
