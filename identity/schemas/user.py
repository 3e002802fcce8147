"""User schemas for API requests and responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from identity.core import constants
from identity.core.query import SEARCH_WORD_COLUMN, declare_filter_fields


class DescribeUsersRequest(BaseModel):
    """Filters, ordering and pagination for listing users."""

    search_word: list[str] | str | None = Field(
        default=None, description="Free-text terms matched against searchable columns"
    )
    sort_key: str | None = Field(default=None, description="Column to order by")
    reverse: bool = Field(default=False, description="Ascending order when true")
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=0, ge=0, description="0 means the default page size")

    user_id: list[str] | None = None
    username: list[str] | None = None
    email: list[str] | None = None
    phone_number: list[str] | None = None
    status: list[str] | None = None

    root_group_id: list[str] | None = Field(
        default=None, description="Only users in these groups or their descendants"
    )
    display_columns: list[str] | None = Field(
        default=None, description="Columns to return; null returns all"
    )


declare_filter_fields(
    DescribeUsersRequest,
    [
        (SEARCH_WORD_COLUMN, "search_word"),
        (constants.COLUMN_USER_ID, "user_id"),
        (constants.COLUMN_USERNAME, "username"),
        (constants.COLUMN_EMAIL, "email"),
        (constants.COLUMN_PHONE_NUMBER, "phone_number"),
        (constants.COLUMN_STATUS, "status"),
    ],
)


class UserCreate(BaseModel):
    """Schema for creating a new user."""

    username: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=1, description="User password")
    phone_number: str | None = None
    description: str | None = None


class UserResponse(BaseModel):
    """Schema for user response; never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    username: str
    email: str
    phone_number: str | None = None
    description: str | None = None
    status: str
    create_time: datetime
    update_time: datetime
    status_time: datetime


class ComparePasswordRequest(BaseModel):
    password: str


class ComparePasswordResponse(BaseModel):
    ok: bool


class ModifyPasswordRequest(BaseModel):
    password: str = Field(..., description="New password; must not be empty")


class ModifyPasswordResponse(BaseModel):
    user_id: str
