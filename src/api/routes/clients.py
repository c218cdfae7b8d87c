"""Client Roster API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.clients import (
    CreateClient,
    UpdateClient,
    DeleteClient,
    ListClients,
    CreateClientCommandDTO,
    UpdateClientCommandDTO,
    ClientResponseDTO,
    ListClientsResponseDTO,
    DeleteClientResponseDTO,
)
from src.adapter.repositories import SqlAlchemyClientRepository
from src.adapter.services import SqlAlchemyUnitOfWork
from src.depends import get_session, get_identity
from src.domain.identity import ActingIdentity
from src.api.error import ClientError, status_code_for

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.post("", response_model=ClientResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_client(
    request: CreateClientCommandDTO,
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    use_case = CreateClient(SqlAlchemyUnitOfWork(session), SqlAlchemyClientRepository(session))
    result = await use_case.execute(identity.account_id, request)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value


@router.get("", response_model=ListClientsResponseDTO)
async def list_clients(
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    result = await ListClients(SqlAlchemyClientRepository(session)).execute(identity.account_id)
    return result.value


@router.patch("/{client_id}", response_model=ClientResponseDTO)
async def update_client(
    client_id: str,
    request: UpdateClientCommandDTO,
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    use_case = UpdateClient(SqlAlchemyUnitOfWork(session), SqlAlchemyClientRepository(session))
    result = await use_case.execute(identity.account_id, client_id, request)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value


@router.delete("/{client_id}", response_model=DeleteClientResponseDTO)
async def delete_client(
    client_id: str,
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    use_case = DeleteClient(SqlAlchemyUnitOfWork(session), SqlAlchemyClientRepository(session))
    result = await use_case.execute(identity.account_id, client_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value
