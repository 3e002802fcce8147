"""Group model with a materialised ancestor path."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from identity.core.constants import GROUP_ID_PREFIX, STATUS_ACTIVE, TABLE_GROUP
from identity.core.db.session import Base


def new_group_id() -> str:
    return f"{GROUP_ID_PREFIX}{uuid4().hex[:16]}"


class Group(Base):
    """Group of users.

    ``group_path`` lists the ids from the root group down to this one, each
    followed by a ``.``, e.g. ``grp-root.grp-team.``.
    """

    __tablename__ = TABLE_GROUP

    group_id = Column(String(50), primary_key=True, default=new_group_id)
    parent_group_id = Column(
        String(50),
        ForeignKey(f"{TABLE_GROUP}.group_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    group_path = Column(String(1024), nullable=False, index=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    status = Column(String(20), default=STATUS_ACTIVE, nullable=False, index=True)

    # Timestamps
    create_time = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        index=True,
    )
    update_time = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )
    status_time = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Group(group_id={self.group_id}, name={self.name})>"
