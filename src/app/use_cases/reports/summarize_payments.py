"""SummarizePayments Use Case"""

from decimal import Decimal
from libs.result import Result, Return
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.payment import PaymentStatus
from .dtos import PaymentSummaryDTO


class SummarizePayments:
    """Use Case: Totals for the payments page (verified received, pending)"""

    def __init__(self, payment_repo: PaymentRepository):
        self.payment_repo = payment_repo

    async def execute(self, account_id: str) -> Result[PaymentSummaryDTO]:
        payments = await self.payment_repo.list_by_account(account_id)

        verified = [p for p in payments if PaymentStatus(p.status) == PaymentStatus.VERIFIED]
        pending = [p for p in payments if PaymentStatus(p.status) == PaymentStatus.PENDING]

        return Return.ok(
            PaymentSummaryDTO(
                total_received=sum((Decimal(p.amount) for p in verified), Decimal("0")),
                pending_count=len(pending),
                pending_value=sum((Decimal(p.amount) for p in pending), Decimal("0")),
                total_payments=len(payments),
            )
        )
