"""DeletePayment Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.payment_repository import PaymentRepository
from .dtos import DeletePaymentResponseDTO

logger = logging.getLogger(__name__)


class DeletePayment:
    """
    Use Case: Delete a payment record

    The invoice the payment referenced keeps its status; a Paid invoice
    stays Paid after its receipt is removed.
    """

    def __init__(self, uow: UnitOfWork, payment_repo: PaymentRepository):
        self.uow = uow
        self.payment_repo = payment_repo

    async def execute(self, account_id: str, payment_id: str) -> Result[DeletePaymentResponseDTO]:
        try:
            deleted = await self.payment_repo.delete(account_id, payment_id)
            await self.uow.commit()
        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete payment {payment_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_PAYMENT_FAILED",
                    message="Failed to delete payment record",
                    reason=str(e),
                )
            )

        return Return.ok(DeletePaymentResponseDTO(payment_id=payment_id, deleted=deleted))
