"""UpdateClient Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.use_cases.invoicing.validation import MISSING_CLIENT_NAME
from src.domain.base import now_ms
from .dtos import UpdateClientCommandDTO, ClientResponseDTO

logger = logging.getLogger(__name__)


class UpdateClient:
    """
    Use Case: Edit a roster client

    Invoices already issued to the client keep their own snapshot and are
    not affected.
    """

    def __init__(self, uow: UnitOfWork, client_repo: ClientRepository):
        self.uow = uow
        self.client_repo = client_repo

    async def execute(
        self, account_id: str, client_id: str, command: UpdateClientCommandDTO
    ) -> Result[ClientResponseDTO]:
        patch = command.model_dump(exclude_unset=True, exclude_none=True)

        if "name" in patch and not patch["name"].strip():
            return Return.err(
                Error(
                    code=MISSING_CLIENT_NAME,
                    message="Please provide a client name.",
                    reason="name is empty",
                )
            )

        try:
            client = await self.client_repo.get_by_id(account_id, client_id)
            if not client:
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client with ID {client_id} not found",
                        reason="Client does not exist",
                    )
                )

            for field, value in patch.items():
                setattr(client, field, value.strip() if field == "name" else value)
            client.updated_at = now_ms()

            updated_client = await self.client_repo.update(client)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update client {client_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_CLIENT_FAILED",
                    message="Failed to update client",
                    reason=str(e),
                )
            )

        return Return.ok(ClientResponseDTO.from_entity(updated_client))
