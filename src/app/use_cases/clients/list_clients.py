"""List Clients Use Case"""

from libs.result import Result, Return
from src.app.repositories.client_repository import ClientRepository
from .dtos import ListClientsResponseDTO, ClientResponseDTO


class ListClients:
    """Use case: View the client roster, newest first"""

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, account_id: str) -> Result[ListClientsResponseDTO]:
        clients = await self.client_repo.list_by_account(account_id)
        return Return.ok(
            ListClientsResponseDTO(
                clients=[ClientResponseDTO.from_entity(c) for c in clients],
                total=len(clients),
            )
        )
