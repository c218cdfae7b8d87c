"""RecordPayment Use Case

Manually records a receipt against an invoice number.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.base import now_ms
from src.domain.payment import PaymentRecord
from .dtos import RecordPaymentCommandDTO, PaymentResponseDTO

logger = logging.getLogger(__name__)


class RecordPayment:
    """
    Use Case: Record a payment manually

    Business Rules:
    1. The invoice is referenced by number; its status is not changed here
    2. Manual payments default to Pending until verified
    """

    def __init__(self, uow: UnitOfWork, payment_repo: PaymentRepository):
        self.uow = uow
        self.payment_repo = payment_repo

    async def execute(self, account_id: str, command: RecordPaymentCommandDTO) -> Result[PaymentResponseDTO]:
        try:
            timestamp = now_ms()
            payment = PaymentRecord(
                account_id=account_id,
                invoice_id=command.invoice_id,
                amount=command.amount,
                date=command.date or timestamp,
                method=command.method,
                reference=command.reference,
                client_name=command.client_name,
                status=command.status,
                created_at=timestamp,
                updated_at=timestamp,
            )
            created_payment = await self.payment_repo.create(payment)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to record payment for invoice {command.invoice_id}: {e}")
            return Return.err(
                Error(
                    code="RECORD_PAYMENT_FAILED",
                    message="Failed to record payment",
                    reason=str(e),
                )
            )

        logger.info(f"Recorded payment {created_payment.id} for invoice {command.invoice_id}")
        return Return.ok(PaymentResponseDTO.from_entity(created_payment))
