"""DeleteClient Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from .dtos import DeleteClientResponseDTO

logger = logging.getLogger(__name__)


class DeleteClient:
    """
    Use Case: Remove a client from the roster

    Invoices keep their embedded client snapshot.
    """

    def __init__(self, uow: UnitOfWork, client_repo: ClientRepository):
        self.uow = uow
        self.client_repo = client_repo

    async def execute(self, account_id: str, client_id: str) -> Result[DeleteClientResponseDTO]:
        try:
            deleted = await self.client_repo.delete(account_id, client_id)
            await self.uow.commit()
        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete client {client_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_CLIENT_FAILED",
                    message="Failed to delete client",
                    reason=str(e),
                )
            )

        return Return.ok(DeleteClientResponseDTO(client_id=client_id, deleted=deleted))
