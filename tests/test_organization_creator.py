"""Unit tests for the organization creation sequence."""

import pytest
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId

from common.utils.exceptions import InvalidParameterException
from workspace.schemas import MemberRole, Organization, OrganizationState
from workspace.services.organization import OrganizationCreator


@pytest.fixture
def creator(mock_repository, mock_group_service, mock_member_service):
    return OrganizationCreator(mock_repository, mock_group_service, mock_member_service)


class TestCreate:
    @pytest.mark.asyncio
    async def test_rejects_preassigned_id_without_writes(
        self, creator, mock_repository, mock_group_service, mock_member_service, sample_user_id
    ):
        with pytest.raises(InvalidParameterException) as exc_info:
            await creator.create(Organization(id=str(ObjectId()), name="Acme"), sample_user_id)

        assert exc_info.value.parameter == "organization"
        assert exc_info.value.status_code == 400
        mock_repository.save.assert_not_called()
        mock_group_service.create_all_users_group.assert_not_called()
        mock_group_service.create_dev_group.assert_not_called()
        mock_member_service.add_member.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejects_none(self, creator, mock_repository, sample_user_id):
        with pytest.raises(InvalidParameterException):
            await creator.create(None, sample_user_id)
        mock_repository.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_id_counts_as_new(self, creator, mock_repository, sample_user_id):
        org = await creator.create(Organization(id="  ", name="Acme"), sample_user_id)
        assert org.id.strip()
        mock_repository.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_saves_active_then_provisions_in_order(self, sample_user_id):
        calls = []
        new_id = str(ObjectId())

        async def save(org):
            calls.append(("save", org.state))
            return org.model_copy(update={"id": new_id})

        repository = MagicMock()
        repository.save = AsyncMock(side_effect=save)
        groups = MagicMock()
        groups.create_all_users_group = AsyncMock(side_effect=lambda org_id: calls.append(("all", org_id)))
        groups.create_dev_group = AsyncMock(side_effect=lambda org_id: calls.append(("dev", org_id)))
        members = MagicMock()
        members.add_member = AsyncMock(
            side_effect=lambda org_id, user_id, role: calls.append(("admin", org_id, user_id, role)) or True
        )

        result = await OrganizationCreator(repository, groups, members).create(
            Organization(name="Acme"), sample_user_id
        )

        assert calls == [
            ("save", "ACTIVE"),
            ("all", new_id),
            ("dev", new_id),
            ("admin", new_id, sample_user_id, MemberRole.ADMIN),
        ]
        assert result.id == new_id
        assert result.state == OrganizationState.ACTIVE

    @pytest.mark.asyncio
    async def test_save_failure_runs_nothing_downstream(
        self, creator, mock_repository, mock_group_service, mock_member_service, sample_user_id
    ):
        mock_repository.save.side_effect = RuntimeError("write failed")

        with pytest.raises(RuntimeError, match="write failed"):
            await creator.create(Organization(name="Acme"), sample_user_id)

        mock_group_service.create_all_users_group.assert_not_called()
        mock_member_service.add_member.assert_not_called()

    @pytest.mark.asyncio
    async def test_group_failure_propagates_and_keeps_org(
        self, creator, mock_repository, mock_group_service, mock_member_service, sample_user_id
    ):
        mock_group_service.create_dev_group.side_effect = RuntimeError("group store down")

        with pytest.raises(RuntimeError, match="group store down"):
            await creator.create(Organization(name="Acme"), sample_user_id)

        mock_repository.save.assert_called_once()
        mock_repository.update_by_id.assert_not_called()
        mock_group_service.create_all_users_group.assert_called_once()
        mock_member_service.add_member.assert_not_called()
