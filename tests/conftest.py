import os
from datetime import UTC, datetime, timedelta

# Cheap bcrypt rounds for tests; must be set before settings are first read
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from identity.core.auth.password import hash_password
from identity.core.db.deps import get_db
from identity.core.db.session import Base
from identity.main import app
from identity.models import Group, User, UserGroupBinding
from tests.constants import TEST_PASSWORD

BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    """Database session for a test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seed_data(db_session):
    """Three groups, four users and their memberships.

    grp-root
      grp-dev      alice
    grp-ops        bob
    grp-root       carol
    (no group)     dave
    """
    password_hash = hash_password(TEST_PASSWORD)

    groups = [
        Group(group_id="grp-root", group_path="grp-root.", name="Root",
              description="Company", create_time=BASE_TIME),
        Group(group_id="grp-dev", parent_group_id="grp-root",
              group_path="grp-root.grp-dev.", name="Developers",
              description="Build things", create_time=BASE_TIME + timedelta(minutes=1)),
        Group(group_id="grp-ops", group_path="grp-ops.", name="Operations",
              description="Run things", create_time=BASE_TIME + timedelta(minutes=2)),
    ]
    users = [
        User(user_id="usr-alice", username="alice", email="alice@example.com",
             phone_number="5550001", description="Team lead, 1000 tests",
             password=password_hash, create_time=BASE_TIME + timedelta(hours=1)),
        User(user_id="usr-bob", username="bob", email="bob@example.com",
             phone_number="5550002", description="100% reliable",
             password=password_hash, create_time=BASE_TIME + timedelta(hours=2)),
        User(user_id="usr-carol", username="carol", email="carol@corp.example.org",
             phone_number="5550003", description="on_call engineer", status="disabled",
             password=password_hash, create_time=BASE_TIME + timedelta(hours=3)),
        User(user_id="usr-dave", username="dave", email="dave@example.net",
             description="onxcall backup",
             password=password_hash, create_time=BASE_TIME + timedelta(hours=4)),
    ]
    bindings = [
        UserGroupBinding(id="ugb-1", user_id="usr-alice", group_id="grp-dev"),
        UserGroupBinding(id="ugb-2", user_id="usr-bob", group_id="grp-ops"),
        UserGroupBinding(id="ugb-3", user_id="usr-carol", group_id="grp-root"),
    ]
    db_session.add_all(groups)
    db_session.add_all(users)
    db_session.flush()
    db_session.add_all(bindings)
    db_session.commit()
    return {"users": users, "groups": groups, "bindings": bindings}


@pytest.fixture
def client(session_factory):
    """Test client whose requests use the test database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
