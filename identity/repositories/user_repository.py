from sqlalchemy.orm import Session

from identity.core.constants import COLUMN_CREATE_TIME, TABLE_USER
from identity.core.query import QueryChain, TableRegistry, normalize_filter_value
from identity.models.group import Group
from identity.models.user import User
from identity.models.user_group_binding import UserGroupBinding
from identity.schemas.user import DescribeUsersRequest


class UserRepository:
    """Repository for user data access."""

    def __init__(self, db: Session, registry: TableRegistry | None = None):
        """Initialize repository with database session."""
        self.db = db
        self.registry = registry

    def create(self, user_data: dict) -> User:
        """Create a new user."""
        user = User(**user_data)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def get_by_id(self, user_id: str) -> User | None:
        """Get user by ID."""
        return self.db.query(User).filter(User.user_id == user_id).first()

    def get_by_email(self, email: str) -> User | None:
        """Get user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def describe(self, request: DescribeUsersRequest) -> tuple[list[User], int]:
        """Get the users matching ``request`` and the total count before pagination."""
        chain = QueryChain(self.db.query(User), self.registry).build_filter_conditions(
            request, TABLE_USER
        )

        root_group_ids = normalize_filter_value(request.root_group_id)
        if root_group_ids is not None:
            group_ids = (
                QueryChain(self.db.query(Group.group_id), self.registry)
                .build_root_group_id_conditions(root_group_ids)
                .query.statement
            )
            member_ids = self.db.query(UserGroupBinding.user_id).filter(
                UserGroupBinding.group_id.in_(group_ids)
            )
            chain.where(User.user_id.in_(member_ids.statement))

        total = chain.query.count()
        users = (
            chain.add_query_order_dir(request, COLUMN_CREATE_TIME)
            .paginate(request)
            .query.all()
        )
        return users, total

    def update(self, user: User, user_data: dict) -> User:
        """Update user data."""
        for key, value in user_data.items():
            if value is not None:
                setattr(user, key, value)
        self.db.commit()
        self.db.refresh(user)
        return user
