"""VerifyPayment Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.base import now_ms
from src.domain.payment import PaymentStatus
from .dtos import PaymentResponseDTO

logger = logging.getLogger(__name__)


class VerifyPayment:
    """
    Use Case: Mark a pending payment as Verified
    """

    def __init__(self, uow: UnitOfWork, payment_repo: PaymentRepository):
        self.uow = uow
        self.payment_repo = payment_repo

    async def execute(self, account_id: str, payment_id: str) -> Result[PaymentResponseDTO]:
        try:
            payment = await self.payment_repo.get_by_id(account_id, payment_id)
            if not payment:
                return Return.err(
                    Error(
                        code="PAYMENT_NOT_FOUND",
                        message=f"Payment with ID {payment_id} not found",
                        reason="Payment does not exist",
                    )
                )

            payment.status = PaymentStatus.VERIFIED
            payment.updated_at = now_ms()
            updated_payment = await self.payment_repo.update(payment)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to verify payment {payment_id}: {e}")
            return Return.err(
                Error(
                    code="VERIFY_PAYMENT_FAILED",
                    message="Failed to verify payment",
                    reason=str(e),
                )
            )

        return Return.ok(PaymentResponseDTO.from_entity(updated_payment))
