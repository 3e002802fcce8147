"""Custom exceptions for API error handling."""

from typing import Any

from fastapi import HTTPException, status


class APIException(HTTPException):
    """Custom exception for API errors with standard format.

    Example:
        raise APIException(
            code="USER_NOT_FOUND",
            message="User not found",
            status_code=status.HTTP_404_NOT_FOUND
        )
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize API exception.

        Args:
            code: Error code (e.g., 'EMPTY_PASSWORD', 'USER_NOT_FOUND').
            message: Human-readable error message.
            status_code: HTTP status code (default: 400).
            details: Optional additional error details.
        """
        super().__init__(
            status_code=status_code,
            detail={"error": {"code": code, "message": message, "details": details}},
        )
        self.code = code
        self.message = message
        self.details = details


def raise_not_found(resource: str, resource_id: str | None = None) -> None:
    """Raise 404 Not Found exception.

    Args:
        resource: Resource type (e.g., 'User', 'Group').
        resource_id: Optional resource ID.

    Raises:
        APIException: 404 Not Found error.
    """
    message = f"{resource} not found"
    if resource_id:
        message += f" (ID: {resource_id})"
    raise APIException(
        code=f"{resource.upper().replace(' ', '_')}_NOT_FOUND",
        message=message,
        status_code=status.HTTP_404_NOT_FOUND,
    )


def raise_bad_request(
    code: str, message: str, details: dict[str, Any] | None = None
) -> None:
    """Raise 400 Bad Request exception.

    Raises:
        APIException: 400 Bad Request error.
    """
    raise APIException(
        code=code,
        message=message,
        status_code=status.HTTP_400_BAD_REQUEST,
        details=details,
    )


def raise_forbidden(
    code: str = "PERMISSION_DENIED",
    message: str = "Permission denied",
    details: dict[str, Any] | None = None,
) -> None:
    """Raise 403 Forbidden exception.

    Raises:
        APIException: 403 Forbidden error.
    """
    raise APIException(
        code=code,
        message=message,
        status_code=status.HTTP_403_FORBIDDEN,
        details=details,
    )


def raise_conflict(
    code: str, message: str, details: dict[str, Any] | None = None
) -> None:
    """Raise 409 Conflict exception.

    Raises:
        APIException: 409 Conflict error.
    """
    raise APIException(
        code=code,
        message=message,
        status_code=status.HTTP_409_CONFLICT,
        details=details,
    )
