"""
List Invoices Use Case

Retrieves an account's invoices, newest first, with optional filtering.
"""
from datetime import date
from typing import Optional
from libs.result import Result, Return
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import InvoiceStatus
from .dtos import ListInvoicesResponseDTO, InvoiceResponseDTO


class ListInvoices:
    """
    Use case: View invoices

    Filtering is applied to the effective status, so an unpaid invoice past
    its due date matches Overdue. Search matches the client name or the
    invoice number, case-insensitively.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        """
        Initialize with invoice repository.

        Args:
            invoice_repo: InvoiceRepository instance
        """
        self.invoice_repo = invoice_repo

    async def execute(
        self,
        account_id: str,
        status: Optional[InvoiceStatus] = None,
        search: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Result[ListInvoicesResponseDTO]:
        """
        List invoices for an account.

        Args:
            account_id: Owning account
            status: Only invoices whose effective status matches
            search: Substring of client name or invoice number
            today: Reference date for the overdue projection (default: today)

        Returns:
            Result[ListInvoicesResponseDTO]: Matching invoices
        """
        invoices = await self.invoice_repo.list_by_account(account_id)
        needle = (search or "").strip().lower()

        responses = []
        for invoice in invoices:
            if status is not None and invoice.effective_status(today) != status:
                continue
            if needle and not (
                needle in invoice.client_snapshot.name.lower()
                or needle in invoice.invoice_number.lower()
            ):
                continue
            responses.append(InvoiceResponseDTO.from_entity(invoice, today))

        return Return.ok(ListInvoicesResponseDTO(invoices=responses, total=len(responses)))
