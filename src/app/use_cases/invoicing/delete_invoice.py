"""DeleteInvoice Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import DeleteInvoiceResponseDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete an invoice

    Business Rules:
    1. Removal is unconditional, whatever the status
    2. Payment records referencing the invoice are kept
    3. Deleting a missing invoice is a no-op (deleted=False)
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, account_id: str, invoice_id: str) -> Result[DeleteInvoiceResponseDTO]:
        try:
            deleted = await self.invoice_repo.delete(account_id, invoice_id)
            await self.uow.commit()
        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )

        if deleted:
            logger.info(f"Deleted invoice {invoice_id} for account {account_id}")
        return Return.ok(DeleteInvoiceResponseDTO(invoice_id=invoice_id, deleted=deleted))
