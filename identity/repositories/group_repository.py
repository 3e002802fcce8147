from sqlalchemy.orm import Session

from identity.core.constants import COLUMN_CREATE_TIME, TABLE_GROUP
from identity.core.query import QueryChain, TableRegistry
from identity.models.group import Group
from identity.models.user import User
from identity.models.user_group_binding import UserGroupBinding
from identity.schemas.group import DescribeGroupsRequest


class GroupRepository:
    """Repository for groups and user-group bindings."""

    def __init__(self, db: Session, registry: TableRegistry | None = None):
        """Initialize repository with database session."""
        self.db = db
        self.registry = registry

    def create(self, group: Group) -> Group:
        """Persist a new group."""
        self.db.add(group)
        self.db.commit()
        self.db.refresh(group)
        return group

    def get_by_id(self, group_id: str) -> Group | None:
        """Get group by ID."""
        return self.db.query(Group).filter(Group.group_id == group_id).first()

    def describe(self, request: DescribeGroupsRequest) -> tuple[list[Group], int]:
        """Get the groups matching ``request`` and the total count before pagination."""
        chain = (
            QueryChain(self.db.query(Group), self.registry)
            .build_filter_conditions(request, TABLE_GROUP)
            .build_root_group_id_conditions(request.root_group_id)
        )
        total = chain.query.count()
        groups = (
            chain.add_query_order_dir(request, COLUMN_CREATE_TIME)
            .paginate(request)
            .query.all()
        )
        return groups, total

    def get_existing_group_ids(self, group_ids: list[str]) -> set[str]:
        rows = self.db.query(Group.group_id).filter(Group.group_id.in_(group_ids)).all()
        return {row.group_id for row in rows}

    def get_existing_user_ids(self, user_ids: list[str]) -> set[str]:
        rows = self.db.query(User.user_id).filter(User.user_id.in_(user_ids)).all()
        return {row.user_id for row in rows}

    def get_bindings(
        self, user_ids: list[str], group_ids: list[str]
    ) -> list[UserGroupBinding]:
        """Get the bindings between any of ``user_ids`` and any of ``group_ids``."""
        return (
            self.db.query(UserGroupBinding)
            .filter(
                UserGroupBinding.group_id.in_(group_ids),
                UserGroupBinding.user_id.in_(user_ids),
            )
            .all()
        )

    def add_bindings(self, bindings: list[UserGroupBinding]) -> None:
        """Stage bindings in the current transaction; the caller commits."""
        self.db.add_all(bindings)

    def delete_bindings(self, user_ids: list[str], group_ids: list[str]) -> int:
        """Delete the bindings between ``user_ids`` and ``group_ids``; the caller commits."""
        return (
            self.db.query(UserGroupBinding)
            .filter(
                UserGroupBinding.group_id.in_(group_ids),
                UserGroupBinding.user_id.in_(user_ids),
            )
            .delete(synchronize_session=False)
        )

    def get_groups_by_user_ids(self, user_ids: list[str]) -> list[Group]:
        """Get the groups any of ``user_ids`` belongs to."""
        return (
            self.db.query(Group)
            .join(UserGroupBinding, UserGroupBinding.group_id == Group.group_id)
            .filter(UserGroupBinding.user_id.in_(user_ids))
            .distinct()
            .all()
        )

    def get_users_by_group_ids(self, group_ids: list[str]) -> list[User]:
        """Get the members of any of ``group_ids``."""
        return (
            self.db.query(User)
            .join(UserGroupBinding, UserGroupBinding.user_id == User.user_id)
            .filter(UserGroupBinding.group_id.in_(group_ids))
            .distinct()
            .all()
        )

    def get_user_ids_by_group_ids(self, group_ids: list[str]) -> list[str]:
        rows = (
            self.db.query(UserGroupBinding.user_id)
            .filter(UserGroupBinding.group_id.in_(group_ids))
            .all()
        )
        return [row.user_id for row in rows]
