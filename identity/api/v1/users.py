"""User router: listing, creation and password operations."""

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
from identity.schemas.user import (
    ComparePasswordRequest,
    ComparePasswordResponse,
    DescribeUsersRequest,
    ModifyPasswordRequest,
    ModifyPasswordResponse,
    UserCreate,
    UserResponse,
)
from identity.services.user_service import UserService

router = APIRouter()


@router.get(
    "",
    response_model=StandardListResponse[dict],
    status_code=status.HTTP_200_OK,
    summary="List users",
)
async def describe_users(
    db: Annotated[Session, Depends(get_db)],
    search_word: Annotated[list[str] | None, Query()] = None,
    sort_key: str | None = None,
    reverse: bool = False,
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=0, ge=0, description="0 means the default page size"),
    user_id: Annotated[list[str] | None, Query()] = None,
    username: Annotated[list[str] | None, Query()] = None,
    email: Annotated[list[str] | None, Query()] = None,
    phone_number: Annotated[list[str] | None, Query()] = None,
    user_status: Annotated[list[str] | None, Query(alias="status")] = None,
    root_group_id: Annotated[list[str] | None, Query()] = None,
    display_columns: Annotated[list[str] | None, Query()] = None,
) -> StandardListResponse[dict]:
    """
    List users matching the given filters.

    Repeat a list parameter to pass several values (``?status=active&status=disabled``).
    """
    request = DescribeUsersRequest(
        search_word=search_word,
        sort_key=sort_key,
        reverse=reverse,
        offset=offset,
        limit=limit,
        user_id=user_id,
        username=username,
        email=email,
        phone_number=phone_number,
        status=user_status,
        root_group_id=root_group_id,
        display_columns=display_columns,
    )
    users, total = UserService(db).describe_users(request)
    return StandardListResponse(
        data=users,
        meta=ListMeta(
            total_count=total,
            offset=get_offset_from_request(request),
            limit=get_limit_from_request(request),
        ),
    )


@router.post(
    "",
    response_model=StandardResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    responses={409: {"model": ErrorResponse, "description": "Email already registered"}},
)
async def create_user(
    user_data: UserCreate,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[UserResponse]:
    """Create a new user. Responds 409 if the email is taken."""
    user = UserService(db).create_user(user_data)
    return StandardResponse(data=UserResponse.model_validate(user))


@router.get(
    "/{user_id}",
    response_model=StandardResponse[UserResponse],
    status_code=status.HTTP_200_OK,
    summary="Get user",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def get_user(
    user_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[UserResponse]:
    user = UserService(db).get_user(user_id)
    return StandardResponse(data=UserResponse.model_validate(user))


@router.post(
    "/{user_id}/password/compare",
    response_model=StandardResponse[ComparePasswordResponse],
    status_code=status.HTTP_200_OK,
    summary="Compare password",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def compare_password(
    user_id: str,
    body: ComparePasswordRequest,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[ComparePasswordResponse]:
    """Check a password; a mismatch is ``ok: false``, not an error."""
    ok = UserService(db).compare_password(user_id, body.password)
    return StandardResponse(data=ComparePasswordResponse(ok=ok))


@router.put(
    "/{user_id}/password",
    response_model=StandardResponse[ModifyPasswordResponse],
    status_code=status.HTTP_200_OK,
    summary="Modify password",
    responses={
        400: {"model": ErrorResponse, "description": "Empty password"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def modify_password(
    user_id: str,
    body: ModifyPasswordRequest,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[ModifyPasswordResponse]:
    modified = UserService(db).modify_password(user_id, body.password)
    return StandardResponse(data=ModifyPasswordResponse(user_id=modified))
