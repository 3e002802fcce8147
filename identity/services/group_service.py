"""Group service for group and membership management."""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from identity.core.constants import GROUP_PATH_SEPARATOR, TABLE_GROUP
from identity.core.exceptions import raise_bad_request, raise_forbidden, raise_not_found
from identity.core.logging import log_membership_change
from identity.core.query import TableRegistry, default_registry, get_display_columns
from identity.models.group import Group, new_group_id
from identity.models.user import User
from identity.models.user_group_binding import UserGroupBinding
from identity.repositories.group_repository import GroupRepository
from identity.schemas.group import DescribeGroupsRequest, GroupCreate

logger = logging.getLogger(__name__)


def _check_membership_args(user_ids: list[str], group_ids: list[str]) -> None:
    if not user_ids or not group_ids:
        raise_bad_request(
            code="EMPTY_USER_OR_GROUP_ID", message="Empty user id or group id"
        )


class GroupService:
    """Service for group business logic."""

    def __init__(self, db: Session, registry: TableRegistry | None = None):
        """Initialize service with database session."""
        self.db = db
        self.registry = registry or default_registry()
        self.repository = GroupRepository(db, self.registry)

    def describe_groups(
        self, request: DescribeGroupsRequest
    ) -> tuple[list[dict[str, Any]], int]:
        """
        List groups matching the request filters.

        Returns:
            Tuple of (group dicts restricted to the display columns, total count).
        """
        groups, total = self.repository.describe(request)
        columns = get_display_columns(
            request.display_columns, self.registry.columns(TABLE_GROUP)
        )
        return [{c: getattr(group, c) for c in columns} for group in groups], total

    def get_group(self, group_id: str) -> Group:
        group = self.repository.get_by_id(group_id)
        if not group:
            raise_not_found("Group", group_id)
        return group

    def create_group(self, group_data: GroupCreate) -> Group:
        """
        Create a group below ``group_data.parent_group_id`` (or as a root).

        The new group's path is its parent's path followed by its own id.

        Raises:
            APIException: 404 if the parent group does not exist.
        """
        parent_path = ""
        if group_data.parent_group_id:
            parent_path = self.get_group(group_data.parent_group_id).group_path

        group_id = new_group_id()
        group = Group(
            group_id=group_id,
            parent_group_id=group_data.parent_group_id,
            group_path=f"{parent_path}{group_id}{GROUP_PATH_SEPARATOR}",
            name=group_data.name,
            description=group_data.description,
        )
        try:
            return self.repository.create(group)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Create group failed: {e}")
            raise

    def get_user_group_bindings(
        self, user_ids: list[str], group_ids: list[str]
    ) -> list[UserGroupBinding]:
        return self.repository.get_bindings(user_ids, group_ids)

    def join_group(self, user_ids: list[str], group_ids: list[str]) -> None:
        """
        Add every user in ``user_ids`` to every group in ``group_ids``.

        All bindings are written in one transaction.

        Raises:
            APIException: 400 if either list is empty, 404 if a user or group
                does not exist, 403 if any user is already in any of the groups.
        """
        _check_membership_args(user_ids, group_ids)

        existing_users = self.repository.get_existing_user_ids(user_ids)
        for user_id in user_ids:
            if user_id not in existing_users:
                raise_not_found("User", user_id)
        existing_groups = self.repository.get_existing_group_ids(group_ids)
        for group_id in group_ids:
            if group_id not in existing_groups:
                raise_not_found("Group", group_id)

        if self.repository.get_bindings(user_ids, group_ids):
            raise_forbidden(code="USER_ALREADY_IN_GROUP", message="User already in group")

        try:
            self.repository.add_bindings(
                [
                    UserGroupBinding.new(user_id, group_id)
                    for group_id in dict.fromkeys(group_ids)
                    for user_id in dict.fromkeys(user_ids)
                ]
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Insert user group binding failed: {e}")
            raise

        log_membership_change("join_group", user_ids, group_ids)

    def leave_group(self, user_ids: list[str], group_ids: list[str]) -> None:
        """
        Remove every user in ``user_ids`` from every group in ``group_ids``.

        Raises:
            APIException: 400 if either list is empty, 403 unless every user
                is a member of every group.
        """
        _check_membership_args(user_ids, group_ids)

        bindings = self.repository.get_bindings(user_ids, group_ids)
        if len(bindings) != len(set(user_ids)) * len(set(group_ids)):
            raise_forbidden(code="USER_NOT_IN_GROUP", message="User not in group")

        try:
            self.repository.delete_bindings(user_ids, group_ids)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Delete user group binding failed: {e}")
            raise

        log_membership_change("leave_group", user_ids, group_ids)

    def get_groups_by_user_ids(self, user_ids: list[str]) -> list[Group]:
        return self.repository.get_groups_by_user_ids(user_ids)

    def get_users_by_group_ids(self, group_ids: list[str]) -> list[User]:
        return self.repository.get_users_by_group_ids(group_ids)

    def get_user_ids_by_group_ids(self, group_ids: list[str]) -> list[str]:
        return self.repository.get_user_ids_by_group_ids(group_ids)
