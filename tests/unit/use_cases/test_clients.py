"""Unit tests for client roster use cases"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.clients import (
    CreateClient,
    UpdateClient,
    DeleteClient,
    ListClients,
    CreateClientCommandDTO,
    UpdateClientCommandDTO,
)
from src.domain.client import ClientRecord, ClientStatus, MomoNetwork


@pytest.fixture
def mock_client_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=lambda client: client)
    repo.update = AsyncMock(side_effect=lambda client: client)
    return repo


def make_client(**overrides):
    data = dict(
        id="client_1",
        account_id="acct_1",
        name="Ama Mensah",
        email="ama@example.com",
        momo_number="0241234567",
        momo_network=MomoNetwork.MTN,
        status=ClientStatus.ACTIVE,
        invoices_count=0,
        created_at=1_700_000_000_000,
        updated_at=1_700_000_000_000,
    )
    data.update(overrides)
    return ClientRecord(**data)


@pytest.mark.asyncio
class TestCreateClient:

    async def test_new_client_is_active_with_zero_invoices(self, mock_uow, mock_client_repo):
        command = CreateClientCommandDTO(name=" Ama Mensah ", email="ama@example.com", momo_network=MomoNetwork.TELECEL)

        result = await CreateClient(mock_uow, mock_client_repo).execute("acct_1", command)

        assert result.is_ok()
        assert result.value.name == "Ama Mensah"
        assert result.value.status == "Active"
        assert result.value.invoices_count == 0
        assert result.value.momo_network == "Telecel"
        mock_uow.commit.assert_called_once()

    async def test_name_is_required(self, mock_uow, mock_client_repo):
        result = await CreateClient(mock_uow, mock_client_repo).execute(
            "acct_1", CreateClientCommandDTO(name="  ")
        )

        assert result.error.code == "MISSING_CLIENT_NAME"
        mock_client_repo.create.assert_not_called()


@pytest.mark.asyncio
class TestUpdateClient:

    async def test_only_set_fields_change(self, mock_uow, mock_client_repo):
        client = make_client()
        mock_client_repo.get_by_id = AsyncMock(return_value=client)

        result = await UpdateClient(mock_uow, mock_client_repo).execute(
            "acct_1", "client_1", UpdateClientCommandDTO(location="Kumasi", status=ClientStatus.PENDING)
        )

        assert result.value.location == "Kumasi"
        assert result.value.status == "Pending"
        assert result.value.email == "ama@example.com"
        assert client.updated_at > 1_700_000_000_000

    async def test_not_found(self, mock_uow, mock_client_repo):
        mock_client_repo.get_by_id = AsyncMock(return_value=None)

        result = await UpdateClient(mock_uow, mock_client_repo).execute(
            "acct_1", "missing", UpdateClientCommandDTO(name="X")
        )

        assert result.error.code == "CLIENT_NOT_FOUND"

    async def test_blank_name_rejected(self, mock_uow, mock_client_repo):
        result = await UpdateClient(mock_uow, mock_client_repo).execute(
            "acct_1", "client_1", UpdateClientCommandDTO(name="")
        )

        assert result.error.code == "MISSING_CLIENT_NAME"


@pytest.mark.asyncio
class TestDeleteAndListClients:

    async def test_delete(self, mock_uow, mock_client_repo):
        mock_client_repo.delete = AsyncMock(return_value=True)

        result = await DeleteClient(mock_uow, mock_client_repo).execute("acct_1", "client_1")

        assert result.value.deleted is True
        mock_uow.commit.assert_called_once()

    async def test_delete_failure(self, mock_uow, mock_client_repo):
        mock_client_repo.delete = AsyncMock(side_effect=Exception("locked"))

        result = await DeleteClient(mock_uow, mock_client_repo).execute("acct_1", "client_1")

        assert result.error.code == "DELETE_CLIENT_FAILED"
        mock_uow.rollback.assert_called_once()

    async def test_list(self, mock_client_repo):
        mock_client_repo.list_by_account = AsyncMock(return_value=[
            make_client(id="c2", name="Kwame"),
            make_client(id="c1", name="Ama"),
        ])

        result = await ListClients(mock_client_repo).execute("acct_1")

        assert result.value.total == 2
        assert [c.client_id for c in result.value.clients] == ["c2", "c1"]
