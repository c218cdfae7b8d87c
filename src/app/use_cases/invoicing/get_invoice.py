"""GetInvoice Use Case"""

from typing import Optional
from libs.result import Result, Return
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceResponseDTO


class GetInvoice:
    """
    Use case: View one invoice

    A missing invoice is an absent result (None), not an error.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, account_id: str, invoice_id: str) -> Result[Optional[InvoiceResponseDTO]]:
        invoice = await self.invoice_repo.get_by_id(account_id, invoice_id)
        if invoice is None:
            return Return.ok(None)
        return Return.ok(InvoiceResponseDTO.from_entity(invoice))
