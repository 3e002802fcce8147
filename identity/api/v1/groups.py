"""Group router: listing, creation and membership."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from identity.core.db.deps import get_db
from identity.core.query import get_limit_from_request, get_offset_from_request
from identity.schemas.common import (
    ErrorResponse,
    ListMeta,
    StandardListResponse,
    StandardResponse,
)
from identity.schemas.group import (
    DescribeGroupsRequest,
    GroupCreate,
    GroupResponse,
    MembershipRequest,
    MembershipResponse,
)
from identity.schemas.user import UserResponse
from identity.services.group_service import GroupService

router = APIRouter()


@router.get(
    "",
    response_model=StandardListResponse[dict],
    status_code=status.HTTP_200_OK,
    summary="List groups",
)
async def describe_groups(
    db: Annotated[Session, Depends(get_db)],
    search_word: Annotated[list[str] | None, Query()] = None,
    sort_key: str | None = None,
    reverse: bool = False,
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=0, ge=0),
    group_id: Annotated[list[str] | None, Query()] = None,
    parent_group_id: Annotated[list[str] | None, Query()] = None,
    name: Annotated[list[str] | None, Query()] = None,
    group_status: Annotated[list[str] | None, Query(alias="status")] = None,
    root_group_id: Annotated[list[str] | None, Query()] = None,
    display_columns: Annotated[list[str] | None, Query()] = None,
) -> StandardListResponse[dict]:
    request = DescribeGroupsRequest(
        search_word=search_word,
        sort_key=sort_key,
        reverse=reverse,
        offset=offset,
        limit=limit,
        group_id=group_id,
        parent_group_id=parent_group_id,
        name=name,
        status=group_status,
        root_group_id=root_group_id,
        display_columns=display_columns,
    )
    groups, total = GroupService(db).describe_groups(request)
    return StandardListResponse(
        data=groups,
        meta=ListMeta(
            total_count=total,
            offset=get_offset_from_request(request),
            limit=get_limit_from_request(request),
        ),
    )


@router.post(
    "",
    response_model=StandardResponse[GroupResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create group",
    responses={404: {"model": ErrorResponse, "description": "Parent group not found"}},
)
async def create_group(
    group_data: GroupCreate,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[GroupResponse]:
    group = GroupService(db).create_group(group_data)
    return StandardResponse(data=GroupResponse.model_validate(group))


@router.post(
    "/join",
    response_model=StandardResponse[MembershipResponse],
    status_code=status.HTTP_200_OK,
    summary="Join groups",
    responses={
        400: {"model": ErrorResponse, "description": "Empty user or group ids"},
        403: {"model": ErrorResponse, "description": "User already in group"},
        404: {"model": ErrorResponse, "description": "User or group not found"},
    },
)
async def join_group(
    body: MembershipRequest,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[MembershipResponse]:
    """Add every listed user to every listed group."""
    GroupService(db).join_group(body.user_id, body.group_id)
    return StandardResponse(
        data=MembershipResponse(user_id=body.user_id, group_id=body.group_id)
    )


@router.post(
    "/leave",
    response_model=StandardResponse[MembershipResponse],
    status_code=status.HTTP_200_OK,
    summary="Leave groups",
    responses={
        400: {"model": ErrorResponse, "description": "Empty user or group ids"},
        403: {"model": ErrorResponse, "description": "User not in group"},
    },
)
async def leave_group(
    body: MembershipRequest,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[MembershipResponse]:
    """Remove every listed user from every listed group."""
    GroupService(db).leave_group(body.user_id, body.group_id)
    return StandardResponse(
        data=MembershipResponse(user_id=body.user_id, group_id=body.group_id)
    )


@router.get(
    "/{group_id}/users",
    response_model=StandardResponse[list[UserResponse]],
    status_code=status.HTTP_200_OK,
    summary="List group members",
    responses={404: {"model": ErrorResponse, "description": "Group not found"}},
)
async def get_group_users(
    group_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[list[UserResponse]]:
    service = GroupService(db)
    service.get_group(group_id)
    users = service.get_users_by_group_ids([group_id])
    return StandardResponse(data=[UserResponse.model_validate(u) for u in users])
