"""Membership of a user in a group."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, UniqueConstraint

from identity.core.constants import (
    BINDING_ID_PREFIX,
    TABLE_GROUP,
    TABLE_USER,
    TABLE_USER_GROUP_BINDING,
)
from identity.core.db.session import Base


def new_binding_id() -> str:
    return f"{BINDING_ID_PREFIX}{uuid4().hex[:16]}"


class UserGroupBinding(Base):
    """User-group relationship."""

    __tablename__ = TABLE_USER_GROUP_BINDING

    id = Column(String(50), primary_key=True, default=new_binding_id)
    user_id = Column(
        String(50),
        ForeignKey(f"{TABLE_USER}.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    group_id = Column(
        String(50),
        ForeignKey(f"{TABLE_GROUP}.group_id", ondelete="CASCADE"),
        nullable=False,
    )
    create_time = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_user_group_binding_user", "user_id"),
        Index("idx_user_group_binding_group", "group_id"),
        UniqueConstraint("user_id", "group_id", name="uq_user_group_binding"),
    )

    @classmethod
    def new(cls, user_id: str, group_id: str) -> "UserGroupBinding":
        return cls(id=new_binding_id(), user_id=user_id, group_id=group_id)

    def __repr__(self) -> str:
        return f"<UserGroupBinding(id={self.id}, user_id={self.user_id}, group_id={self.group_id})>"
