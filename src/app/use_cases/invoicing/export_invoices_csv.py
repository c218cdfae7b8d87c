"""ExportInvoicesCsv Use Case"""

from datetime import date
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.csv_service import CsvService
from src.domain.invoice import InvoiceStatus
from src.app.use_cases.dtos import CsvExportResponseDTO


class ExportInvoicesCsv:
    """
    Use Case: Export the invoice list to CSV

    One row per invoice with number, dates, client, total and status.
    An empty list is reported as NO_DATA_TO_EXPORT.
    """

    def __init__(self, invoice_repo: InvoiceRepository, csv_service: CsvService):
        self.invoice_repo = invoice_repo
        self.csv_service = csv_service

    async def execute(
        self, account_id: str, today: Optional[date] = None
    ) -> Result[CsvExportResponseDTO]:
        today = today or date.today()
        invoices = await self.invoice_repo.list_by_account(account_id)

        if not invoices:
            return Return.err(
                Error(
                    code="NO_DATA_TO_EXPORT",
                    message="No data to export",
                    reason=f"Account {account_id} has no invoices",
                )
            )

        rows = [
            {
                "InvoiceNumber": invoice.invoice_number,
                "Date": invoice.issue_date.isoformat(),
                "DueDate": invoice.due_date.isoformat(),
                "ClientName": invoice.client_snapshot.name,
                "ClientEmail": invoice.client_snapshot.email,
                "Total": invoice.total,
                "Status": InvoiceStatus(invoice.status).value,
            }
            for invoice in invoices
        ]

        return Return.ok(
            CsvExportResponseDTO(
                filename=f"invoices_{today.isoformat()}.csv",
                content=self.csv_service.rows_to_csv(rows),
                row_count=len(rows),
            )
        )
