"""SummarizeInvoices Use Case"""

import calendar
from datetime import date
from decimal import Decimal
from typing import Optional
from libs.result import Result, Return
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import InvoiceStatus
from .dtos import InvoiceSummaryDTO, MonthlyRevenueDTO


class SummarizeInvoices:
    """
    Use Case: Dashboard statistics

    Business Rules:
    1. Revenue counts Paid invoices only
    2. Outstanding counts every invoice that is neither Paid nor Draft
    3. Overdue is the read-time projection, never a stored status
    4. Monthly revenue buckets Paid invoices by issue month for one year
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(
        self,
        account_id: str,
        year: Optional[int] = None,
        today: Optional[date] = None,
    ) -> Result[InvoiceSummaryDTO]:
        today = today or date.today()
        year = year or today.year
        invoices = await self.invoice_repo.list_by_account(account_id)

        total_revenue = Decimal("0")
        outstanding = Decimal("0")
        draft_value = Decimal("0")
        draft_count = 0
        overdue_count = 0
        monthly = [Decimal("0")] * 12

        for invoice in invoices:
            status = InvoiceStatus(invoice.status)
            total = Decimal(invoice.total or 0)

            if status == InvoiceStatus.PAID:
                total_revenue += total
                if invoice.issue_date.year == year:
                    monthly[invoice.issue_date.month - 1] += total
            elif status == InvoiceStatus.DRAFT:
                draft_count += 1
                draft_value += total
            else:
                outstanding += total

            if invoice.effective_status(today) == InvoiceStatus.OVERDUE:
                overdue_count += 1

        return Return.ok(
            InvoiceSummaryDTO(
                total_revenue=total_revenue,
                outstanding=outstanding,
                total_invoices=len(invoices),
                draft_count=draft_count,
                draft_value=draft_value,
                overdue_count=overdue_count,
                year=year,
                monthly_revenue=[
                    MonthlyRevenueDTO(month=calendar.month_abbr[i + 1], revenue=monthly[i])
                    for i in range(12)
                ],
            )
        )
