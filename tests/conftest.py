"""Shared test fixtures for workspace tests."""

import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId

from common.events import EventBus
from common.i18n import I18nService
from workspace.config import Settings, WorkspaceMode
from workspace.schemas import Asset, Organization, OrganizationState
from workspace.services.base import AssetStore, GroupProvisioner, MemberDirectory, OrganizationStore


@pytest.fixture
def sample_user_id():
    return str(ObjectId())


@pytest.fixture
def sample_org_id():
    return str(ObjectId())


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. Async methods like find_one, insert_one,
    # update_one etc. stay as AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def sample_org_doc(sample_org_id):
    now = datetime.now(timezone.utc)
    return {
        "_id": ObjectId(sample_org_id),
        "name": "Acme",
        "state": "ACTIVE",
        "logoAssetId": None,
        "commonSettings": {"theme": "dark", "theme_updateTime": 1700000000000},
        "isAutoGeneratedOrganization": False,
        "source": "okta",
        "thirdPartyCompanyId": "acme-1",
        "organizationDomain": {"domain": "acme.com"},
        "createdAt": now,
        "updatedAt": now,
    }


@pytest.fixture
def active_org(sample_org_doc):
    return Organization.from_document(sample_org_doc)


@pytest.fixture
def deleted_org(sample_org_doc):
    return Organization.from_document({**sample_org_doc, "state": OrganizationState.DELETED.value})


@pytest.fixture
def saas_settings():
    return Settings(_env_file=None, WORKSPACE_MODE=WorkspaceMode.SAAS)


@pytest.fixture
def enterprise_settings():
    return Settings(_env_file=None, WORKSPACE_MODE=WorkspaceMode.ENTERPRISE)


@pytest.fixture
def mock_repository():
    repository = MagicMock(spec=OrganizationStore)
    repository.save = AsyncMock(
        side_effect=lambda org: org.model_copy(update={"id": str(ObjectId())})
    )
    repository.find_by_id = AsyncMock(return_value=None)
    repository.find_by_id_and_state = AsyncMock(return_value=None)
    repository.find_first_by_state = AsyncMock(return_value=None)
    repository.find_by_source_and_company_and_state = AsyncMock(return_value=None)
    repository.find_by_domain_and_state = AsyncMock(return_value=None)
    repository.update_by_id = AsyncMock(return_value=True)
    repository.find_by_id_in_and_state = MagicMock()
    return repository


@pytest.fixture
def mock_group_service():
    service = MagicMock(spec=GroupProvisioner)
    service.create_all_users_group = AsyncMock(return_value=str(ObjectId()))
    service.create_dev_group = AsyncMock(return_value=str(ObjectId()))
    return service


@pytest.fixture
def mock_member_service():
    service = MagicMock(spec=MemberDirectory)
    service.add_member = AsyncMock(return_value=True)
    return service


@pytest.fixture
def sample_asset():
    return Asset(id=str(ObjectId()), contentType="image/png", fileName="logo.png", size=4)


@pytest.fixture
def mock_asset_store(sample_asset):
    store = MagicMock(spec=AssetStore)
    store.upload = AsyncMock(return_value=sample_asset)
    store.find_by_id = AsyncMock(return_value=sample_asset)
    store.delete = AsyncMock(return_value=None)
    store.remove = AsyncMock(return_value=True)
    return store


@pytest.fixture
def mock_event_bus():
    return MagicMock(spec=EventBus)


@pytest.fixture
def upload_file():
    """UploadFile stand-in with an async read()."""
    def _make(data=b"\x89PNG", filename="logo.png", content_type="image/png"):
        file = MagicMock()
        file.read = AsyncMock(return_value=data)
        file.filename = filename
        file.content_type = content_type
        return file
    return _make


@pytest.fixture
def locales_dir(tmp_path):
    for lang, suffix in {"en": "'s Workspace", "zh": "的工作空间"}.items():
        lang_dir = tmp_path / lang
        lang_dir.mkdir()
        (lang_dir / "organization.json").write_text(
            json.dumps({"userOrgSuffix": suffix, "greeting": "Hello {name}"}),
            encoding="utf-8",
        )
    return tmp_path


@pytest.fixture
def i18n_service(locales_dir):
    return I18nService(locales_dir=str(locales_dir), default_language="en")
