import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from identity.core.auth.password import hash_password, verify_password
from identity.core.constants import TABLE_USER
from identity.core.exceptions import raise_bad_request, raise_conflict, raise_not_found
from identity.core.logging import (
    log_password_compare_failure,
    log_password_modified,
    log_user_action,
    mask_email,
)
from identity.core.query import (
    TableRegistry,
    default_registry,
    get_display_columns,
)
from identity.models.user import User
from identity.repositories.user_repository import UserRepository
from identity.schemas.user import DescribeUsersRequest, UserCreate

logger = logging.getLogger(__name__)


class UserService:
    """Service for user business logic."""

    def __init__(self, db: Session, registry: TableRegistry | None = None):
        """Initialize service with database session."""
        self.registry = registry or default_registry()
        self.repository = UserRepository(db, self.registry)

    def describe_users(
        self, request: DescribeUsersRequest
    ) -> tuple[list[dict[str, Any]], int]:
        """
        List users matching the request filters.

        Args:
            request: Search words, indexed-column filters, root groups,
                ordering, pagination and the columns to return.

        Returns:
            Tuple of (user dicts restricted to the display columns, total count).
        """
        users, total = self.repository.describe(request)
        columns = get_display_columns(
            request.display_columns, self.registry.columns(TABLE_USER)
        )
        return [{c: getattr(user, c) for c in columns} for user in users], total

    def get_user(self, user_id: str) -> User:
        """Get a user by ID.

        Raises:
            APIException: 404 if the user does not exist.
        """
        user = self.repository.get_by_id(user_id)
        if not user:
            raise_not_found("User", user_id)
        return user

    def create_user(self, user_data: UserCreate) -> User:
        """
        Create a new user with a bcrypt-hashed password.

        Raises:
            APIException: 409 if the email is already registered.
        """
        if self.repository.get_by_email(user_data.email):
            raise_conflict(
                code="USER_ALREADY_EXISTS",
                message=f"User with email '{mask_email(user_data.email)}' already exists",
            )

        user_dict = user_data.model_dump()
        user_dict["password"] = hash_password(user_dict["password"])

        try:
            user = self.repository.create(user_dict)
        except SQLAlchemyError as e:
            self.repository.db.rollback()
            logger.error(f"Create user failed: {e}")
            raise

        log_user_action(
            action="create_user",
            target_user_id=user.user_id,
            details={"email": mask_email(user.email)},
        )
        return user

    def compare_password(self, user_id: str, password: str) -> bool:
        """Check ``password`` against the stored hash of ``user_id``."""
        user = self.get_user(user_id)
        if not verify_password(password, user.password):
            log_password_compare_failure(user_id, user.email)
            return False
        return True

    def modify_password(self, user_id: str, password: str) -> str:
        """
        Replace the password of ``user_id``.

        Raises:
            APIException: 400 on an empty password, 404 if the user does not exist.
        """
        if not password:
            raise_bad_request(code="EMPTY_PASSWORD", message="Empty password")

        user = self.get_user(user_id)
        try:
            self.repository.update(
                user,
                {
                    "password": hash_password(password),
                    "update_time": datetime.now(UTC),
                },
            )
        except SQLAlchemyError as e:
            self.repository.db.rollback()
            logger.error(f"Modify user [{user_id}] password failed: {e}")
            raise

        log_password_modified(user_id)
        return user_id
