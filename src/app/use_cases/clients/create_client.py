"""CreateClient Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.use_cases.invoicing.validation import MISSING_CLIENT_NAME
from src.domain.base import now_ms
from src.domain.client import ClientRecord, ClientStatus
from .dtos import CreateClientCommandDTO, ClientResponseDTO

logger = logging.getLogger(__name__)


class CreateClient:
    """
    Use Case: Add a client to the roster

    Business Rules:
    1. Name is required
    2. New clients start Active with invoices_count = 0
    """

    def __init__(self, uow: UnitOfWork, client_repo: ClientRepository):
        self.uow = uow
        self.client_repo = client_repo

    async def execute(self, account_id: str, command: CreateClientCommandDTO) -> Result[ClientResponseDTO]:
        if not command.name.strip():
            return Return.err(
                Error(
                    code=MISSING_CLIENT_NAME,
                    message="Please provide a client name.",
                    reason="name is empty",
                )
            )

        try:
            timestamp = now_ms()
            client = ClientRecord(
                account_id=account_id,
                name=command.name.strip(),
                email=command.email,
                momo_number=command.momo_number,
                momo_network=command.momo_network,
                location=command.location,
                invoices_count=0,
                status=ClientStatus.ACTIVE,
                created_at=timestamp,
                updated_at=timestamp,
            )
            created_client = await self.client_repo.create(client)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to add client for account {account_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_CLIENT_FAILED",
                    message="Failed to add client",
                    reason=str(e),
                )
            )

        logger.info(f"Added client {created_client.id} to account {account_id}")
        return Return.ok(ClientResponseDTO.from_entity(created_client))
