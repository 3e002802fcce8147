"""Common schemas for standard API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ListMeta(BaseModel):
    """Pagination metadata for list responses."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"total_count": 100, "offset": 0, "limit": 20}}
    )

    total_count: int = Field(..., description="Total number of matching items", ge=0)
    offset: int = Field(..., description="Offset applied to the query", ge=0)
    limit: int = Field(..., description="Limit applied to the query", ge=0)


class StandardResponse(BaseModel, Generic[T]):
    """Standard response wrapper for single resources."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"data": {}, "meta": None, "error": None}}
    )

    data: T = Field(..., description="Response data")
    meta: dict | None = Field(None, description="Optional metadata")
    error: None = Field(None, description="Error object (null on success)")


class StandardListResponse(BaseModel, Generic[T]):
    """Standard response wrapper for collections with pagination."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "data": [],
                "meta": {"total_count": 100, "offset": 0, "limit": 20},
                "error": None,
            }
        }
    )

    data: list[T] = Field(..., description="List of items")
    meta: ListMeta = Field(..., description="Pagination metadata")
    error: None = Field(None, description="Error object (null on success)")


class ErrorDetail(BaseModel):
    """Error detail schema."""

    code: str = Field(..., description="Error code (e.g., 'USER_NOT_FOUND')")
    message: str = Field(..., description="Human-readable error message")
    details: dict | None = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: ErrorDetail = Field(..., description="Error information")
    data: None = Field(None, description="Data object (null on error)")
