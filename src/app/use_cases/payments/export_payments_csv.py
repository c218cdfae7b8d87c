"""ExportPaymentsCsv Use Case"""

from datetime import date, datetime, timezone
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.payment_repository import PaymentRepository
from src.app.services.csv_service import CsvService
from src.app.use_cases.dtos import CsvExportResponseDTO
from src.domain.payment import PaymentStatus


def _payment_date(epoch_ms: int) -> str:
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc).date().isoformat()


class ExportPaymentsCsv:
    """
    Use Case: Export payments to CSV

    Honors the same method filter as the payments list.
    """

    def __init__(self, payment_repo: PaymentRepository, csv_service: CsvService):
        self.payment_repo = payment_repo
        self.csv_service = csv_service

    async def execute(
        self,
        account_id: str,
        method: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Result[CsvExportResponseDTO]:
        today = today or date.today()
        payments = await self.payment_repo.list_by_account(account_id)
        if method:
            payments = [p for p in payments if method.lower() in p.method.lower()]

        if not payments:
            return Return.err(
                Error(
                    code="NO_DATA_TO_EXPORT",
                    message="No data to export",
                    reason=f"Account {account_id} has no matching payments",
                )
            )

        rows = [
            {
                "Date": _payment_date(payment.date),
                "Reference": payment.reference or "",
                "Client": payment.client_name,
                "InvoiceId": payment.invoice_id,
                "Amount": payment.amount,
                "Method": payment.method,
                "Status": PaymentStatus(payment.status).value,
            }
            for payment in payments
        ]

        return Return.ok(
            CsvExportResponseDTO(
                filename=f"payments_{today.isoformat()}.csv",
                content=self.csv_service.rows_to_csv(rows),
                row_count=len(rows),
            )
        )
