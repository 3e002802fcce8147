"""Group and membership schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from identity.core import constants
from identity.core.query import SEARCH_WORD_COLUMN, declare_filter_fields


class DescribeGroupsRequest(BaseModel):
    """Filters, ordering and pagination for listing groups."""

    search_word: list[str] | str | None = None
    sort_key: str | None = None
    reverse: bool = False
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=0, ge=0)

    group_id: list[str] | None = None
    parent_group_id: list[str] | None = None
    name: list[str] | None = None
    status: list[str] | None = None

    root_group_id: list[str] | None = Field(
        default=None, description="Only these groups and their descendants"
    )
    display_columns: list[str] | None = None


declare_filter_fields(
    DescribeGroupsRequest,
    [
        (SEARCH_WORD_COLUMN, "search_word"),
        (constants.COLUMN_GROUP_ID, "group_id"),
        (constants.COLUMN_PARENT_GROUP_ID, "parent_group_id"),
        (constants.COLUMN_NAME, "name"),
        (constants.COLUMN_STATUS, "status"),
    ],
)


class GroupCreate(BaseModel):
    """Schema for creating a group; without a parent it becomes a root group."""

    name: str = Field(..., min_length=1, max_length=255)
    parent_group_id: str | None = None
    description: str | None = None


class GroupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    group_id: str
    parent_group_id: str | None = None
    group_path: str
    name: str
    description: str | None = None
    status: str
    create_time: datetime
    update_time: datetime
    status_time: datetime


class MembershipRequest(BaseModel):
    """Users and groups to bind or unbind; every user pairs with every group."""

    user_id: list[str] = Field(default_factory=list)
    group_id: list[str] = Field(default_factory=list)


class MembershipResponse(BaseModel):
    user_id: list[str]
    group_id: list[str]
