"""User model with password support."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import Column, DateTime, String, Text

from identity.core.constants import STATUS_ACTIVE, TABLE_USER, USER_ID_PREFIX
from identity.core.db.session import Base


def new_user_id() -> str:
    return f"{USER_ID_PREFIX}{uuid4().hex[:16]}"


class User(Base):
    """User account; ``password`` holds the bcrypt hash."""

    __tablename__ = TABLE_USER

    user_id = Column(String(50), primary_key=True, default=new_user_id)
    username = Column(String(255), nullable=False, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone_number = Column(String(50), nullable=True, index=True)
    description = Column(Text, nullable=True)
    password = Column(String(255), nullable=False)
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
        return f"<User(user_id={self.user_id}, username={self.username})>"
