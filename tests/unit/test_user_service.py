"""Unit tests for UserService."""

import pytest
from fastapi import status

from identity.core.exceptions import APIException
from identity.core.auth.password import verify_password
from identity.schemas.user import DescribeUsersRequest, UserCreate
from identity.services.user_service import UserService
from tests.constants import TEST_PASSWORD, WRONG_PASSWORD


class TestDescribeUsers:
    def test_returns_all_columns_but_password(self, db_session, seed_data):
        users, total = UserService(db_session).describe_users(DescribeUsersRequest())

        assert total == 4
        assert [u["user_id"] for u in users] == [
            "usr-dave",
            "usr-carol",
            "usr-bob",
            "usr-alice",
        ]
        assert "password" not in users[0]
        assert users[0]["email"] == "dave@example.net"

    def test_display_columns(self, db_session, seed_data):
        request = DescribeUsersRequest(display_columns=["username", "password", "nope"])
        users, _ = UserService(db_session).describe_users(request)

        assert users[0] == {"username": "dave"}

    def test_empty_display_columns(self, db_session, seed_data):
        users, total = UserService(db_session).describe_users(
            DescribeUsersRequest(display_columns=[])
        )

        assert total == 4
        assert users == [{}, {}, {}, {}]

    def test_total_ignores_pagination(self, db_session, seed_data):
        request = DescribeUsersRequest(limit=1, offset=1)
        users, total = UserService(db_session).describe_users(request)

        assert total == 4
        assert [u["user_id"] for u in users] == ["usr-carol"]

    def test_root_group_filter_includes_descendants(self, db_session, seed_data):
        request = DescribeUsersRequest(root_group_id=["grp-root"], reverse=True)
        users, total = UserService(db_session).describe_users(request)

        # alice is in grp-dev, a child of grp-root
        assert total == 2
        assert [u["user_id"] for u in users] == ["usr-alice", "usr-carol"]

    def test_blank_root_group_id_does_not_filter(self, db_session, seed_data):
        service = UserService(db_session)
        users, total = service.describe_users(DescribeUsersRequest(root_group_id=[""]))
        _, unfiltered_total = service.describe_users(DescribeUsersRequest())

        # dave has no group binding and must still be listed
        assert total == unfiltered_total == 4
        assert "usr-dave" in [u["user_id"] for u in users]

    def test_root_group_filter_with_search(self, db_session, seed_data):
        request = DescribeUsersRequest(root_group_id=["grp-root"], search_word="call")
        users, total = UserService(db_session).describe_users(request)

        assert total == 1
        assert users[0]["user_id"] == "usr-carol"


class TestCreateUser:
    def test_create_user_hashes_password(self, db_session):
        service = UserService(db_session)
        user = service.create_user(
            UserCreate(username="erin", email="erin@example.com", password="pw-erin")
        )

        assert user.user_id.startswith("usr-")
        assert user.status == "active"
        assert user.password != "pw-erin"
        assert verify_password("pw-erin", user.password)

    def test_duplicate_email(self, db_session, seed_data):
        with pytest.raises(APIException) as exc_info:
            UserService(db_session).create_user(
                UserCreate(username="alice2", email="alice@example.com", password="x")
            )

        assert exc_info.value.status_code == status.HTTP_409_CONFLICT
        assert exc_info.value.code == "USER_ALREADY_EXISTS"


class TestPasswords:
    def test_compare_password_ok(self, db_session, seed_data):
        assert UserService(db_session).compare_password("usr-alice", TEST_PASSWORD) is True

    def test_compare_password_mismatch_is_logged(self, db_session, seed_data, caplog):
        result = UserService(db_session).compare_password("usr-alice", WRONG_PASSWORD)

        assert result is False
        assert "Password compare failed - user_id=usr-alice" in caplog.text
        assert WRONG_PASSWORD not in caplog.text
        assert "alice@example.com" not in caplog.text

    def test_compare_password_unknown_user(self, db_session, seed_data):
        with pytest.raises(APIException) as exc_info:
            UserService(db_session).compare_password("usr-nobody", TEST_PASSWORD)

        assert exc_info.value.code == "USER_NOT_FOUND"

    def test_modify_password(self, db_session, seed_data):
        service = UserService(db_session)

        assert service.modify_password("usr-bob", "new-password") == "usr-bob"
        assert service.compare_password("usr-bob", "new-password") is True
        assert service.compare_password("usr-bob", TEST_PASSWORD) is False

    def test_modify_password_empty(self, db_session, seed_data):
        with pytest.raises(APIException) as exc_info:
            UserService(db_session).modify_password("usr-bob", "")

        assert exc_info.value.status_code == status.HTTP_400_BAD_REQUEST
        assert exc_info.value.code == "EMPTY_PASSWORD"

    def test_modify_password_unknown_user(self, db_session, seed_data):
        with pytest.raises(APIException) as exc_info:
            UserService(db_session).modify_password("usr-nobody", "new-password")

        assert exc_info.value.status_code == status.HTTP_404_NOT_FOUND
