"""Unit tests for GroupService."""

from unittest.mock import patch

import pytest
from fastapi import status
from sqlalchemy.exc import SQLAlchemyError

from identity.core.exceptions import APIException
from identity.models import UserGroupBinding
from identity.schemas.group import DescribeGroupsRequest, GroupCreate
from identity.services.group_service import GroupService


class TestDescribeGroups:
    def test_default_order_and_total(self, db_session, seed_data):
        groups, total = GroupService(db_session).describe_groups(DescribeGroupsRequest())

        assert total == 3
        assert [g["group_id"] for g in groups] == ["grp-ops", "grp-dev", "grp-root"]

    def test_root_group_and_search(self, db_session, seed_data):
        request = DescribeGroupsRequest(root_group_id=["grp-root"], search_word=["build"])
        groups, total = GroupService(db_session).describe_groups(request)

        assert total == 1
        assert groups[0]["group_id"] == "grp-dev"

    def test_indexed_filter_and_display_columns(self, db_session, seed_data):
        request = DescribeGroupsRequest(
            parent_group_id=["grp-root"], display_columns=["name", "group_path"]
        )
        groups, _ = GroupService(db_session).describe_groups(request)

        assert groups == [{"name": "Developers", "group_path": "grp-root.grp-dev."}]


class TestCreateGroup:
    def test_root_group_path(self, db_session):
        group = GroupService(db_session).create_group(GroupCreate(name="Sales"))

        assert group.parent_group_id is None
        assert group.group_path == f"{group.group_id}."

    def test_child_group_path(self, db_session, seed_data):
        group = GroupService(db_session).create_group(
            GroupCreate(name="Backend", parent_group_id="grp-dev")
        )

        assert group.group_path == f"grp-root.grp-dev.{group.group_id}."

    def test_missing_parent(self, db_session):
        with pytest.raises(APIException) as exc_info:
            GroupService(db_session).create_group(
                GroupCreate(name="Orphan", parent_group_id="grp-missing")
            )

        assert exc_info.value.code == "GROUP_NOT_FOUND"


class TestMembership:
    def test_join_group_binds_every_pair(self, db_session, seed_data):
        service = GroupService(db_session)
        service.join_group(["usr-dave", "usr-bob"], ["grp-dev", "grp-root"])

        assert len(service.get_user_group_bindings(["usr-dave", "usr-bob"], ["grp-dev", "grp-root"])) == 4
        assert sorted(service.get_user_ids_by_group_ids(["grp-dev"])) == [
            "usr-alice",
            "usr-bob",
            "usr-dave",
        ]

    def test_join_group_empty_ids(self, db_session, seed_data):
        with pytest.raises(APIException) as exc_info:
            GroupService(db_session).join_group([], ["grp-dev"])

        assert exc_info.value.status_code == status.HTTP_400_BAD_REQUEST
        assert exc_info.value.code == "EMPTY_USER_OR_GROUP_ID"

    def test_join_group_already_member(self, db_session, seed_data):
        service = GroupService(db_session)

        with pytest.raises(APIException) as exc_info:
            service.join_group(["usr-alice", "usr-dave"], ["grp-dev"])

        assert exc_info.value.status_code == status.HTTP_403_FORBIDDEN
        assert exc_info.value.code == "USER_ALREADY_IN_GROUP"
        # nothing written for dave either
        assert service.get_user_group_bindings(["usr-dave"], ["grp-dev"]) == []

    @pytest.mark.parametrize(
        ("user_ids", "group_ids", "code"),
        [
            (["usr-dave", "usr-nobody"], ["grp-dev"], "USER_NOT_FOUND"),
            (["usr-dave"], ["grp-dev", "grp-missing"], "GROUP_NOT_FOUND"),
        ],
    )
    def test_join_group_unknown_ids(self, db_session, seed_data, user_ids, group_ids, code):
        service = GroupService(db_session)

        with pytest.raises(APIException) as exc_info:
            service.join_group(user_ids, group_ids)

        assert exc_info.value.status_code == status.HTTP_404_NOT_FOUND
        assert exc_info.value.code == code
        assert service.get_user_group_bindings(["usr-dave"], ["grp-dev"]) == []

    def test_join_group_rolls_back_on_store_error(self, db_session, seed_data):
        service = GroupService(db_session)

        with patch.object(db_session, "commit", side_effect=SQLAlchemyError("boom")):
            with pytest.raises(SQLAlchemyError):
                service.join_group(["usr-dave"], ["grp-ops"])

        assert db_session.query(UserGroupBinding).filter_by(user_id="usr-dave").count() == 0

    def test_leave_group(self, db_session, seed_data):
        service = GroupService(db_session)
        service.leave_group(["usr-alice"], ["grp-dev"])

        assert service.get_user_group_bindings(["usr-alice"], ["grp-dev"]) == []

    def test_leave_group_requires_every_binding(self, db_session, seed_data):
        service = GroupService(db_session)

        with pytest.raises(APIException) as exc_info:
            service.leave_group(["usr-alice", "usr-bob"], ["grp-dev"])

        assert exc_info.value.code == "USER_NOT_IN_GROUP"
        assert len(service.get_user_group_bindings(["usr-alice"], ["grp-dev"])) == 1

    def test_leave_group_empty_ids(self, db_session, seed_data):
        with pytest.raises(APIException) as exc_info:
            GroupService(db_session).leave_group(["usr-alice"], [])

        assert exc_info.value.code == "EMPTY_USER_OR_GROUP_ID"

    def test_lookups_by_ids(self, db_session, seed_data):
        service = GroupService(db_session)

        groups = service.get_groups_by_user_ids(["usr-alice", "usr-carol"])
        assert sorted(g.group_id for g in groups) == ["grp-dev", "grp-root"]

        users = service.get_users_by_group_ids(["grp-ops"])
        assert [u.user_id for u in users] == ["usr-bob"]
