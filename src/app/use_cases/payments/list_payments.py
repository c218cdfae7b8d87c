"""
List Payments Use Case
"""
from typing import Optional
from libs.result import Result, Return
from src.app.repositories.payment_repository import PaymentRepository
from .dtos import ListPaymentsResponseDTO, PaymentResponseDTO


class ListPayments:
    """
    Use case: View payments

    Ordered by payment date, most recent first. The method filter is a
    case-insensitive substring match (e.g. 'momo' matches 'MTN MoMo').
    """

    def __init__(self, payment_repo: PaymentRepository):
        self.payment_repo = payment_repo

    async def execute(
        self,
        account_id: str,
        client_name: Optional[str] = None,
        method: Optional[str] = None,
    ) -> Result[ListPaymentsResponseDTO]:
        payments = await self.payment_repo.list_by_account(account_id, client_name=client_name)

        if method:
            needle = method.lower()
            payments = [p for p in payments if needle in p.method.lower()]

        return Return.ok(
            ListPaymentsResponseDTO(
                payments=[PaymentResponseDTO.from_entity(p) for p in payments],
                total=len(payments),
            )
        )
