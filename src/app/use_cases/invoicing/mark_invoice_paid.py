"""MarkInvoicePaid Use Case

Quick action: flags an invoice as Paid and records a verified receipt.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.use_cases.payments.dtos import PaymentResponseDTO
from src.domain.base import now_ms
from src.domain.invoice import InvoiceStatus
from src.domain.payment import PaymentRecord, PaymentStatus
from .dtos import InvoiceResponseDTO, MarkPaidResponseDTO

logger = logging.getLogger(__name__)

QUICK_PAYMENT_METHOD = "Cash/Other"


class MarkInvoicePaid:
    """
    Use Case: Mark an invoice as paid

    Business Rules:
    1. Invoice must exist and not already be Paid
    2. Status write and payment write are two separate commits; they are NOT
       atomic. If the payment write fails the invoice stays Paid and the
       caller gets PAYMENT_RECORD_FAILED. Nothing is retried.
    3. The payment references the invoice by number, carries the invoice's
       current total and client name, and is created Verified

    Flow:
    1. Load invoice and check status
    2. Write 1: status = Paid, refresh updated_at, commit
    3. Write 2: create verified payment record, commit
    4. Return invoice and payment
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        payment_repo: PaymentRepository,
        payment_method: str = QUICK_PAYMENT_METHOD,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.payment_repo = payment_repo
        self.payment_method = payment_method

    async def execute(self, account_id: str, invoice_id: str) -> Result[MarkPaidResponseDTO]:
        """
        Execute mark-as-paid

        Args:
            account_id: Owning account
            invoice_id: Invoice document ID

        Returns:
            Result[MarkPaidResponseDTO]: Paid invoice and its payment record, or error
        """
        # Steps 1-2: status write
        try:
            invoice = await self.invoice_repo.get_by_id(account_id, invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            if invoice.status == InvoiceStatus.PAID:
                return Return.err(
                    Error(
                        code="INVOICE_ALREADY_PAID",
                        message=f"Invoice #{invoice.invoice_number} is already paid",
                        reason="Marking a paid invoice again would duplicate its payment record",
                    )
                )

            invoice.status = InvoiceStatus.PAID
            invoice.updated_at = now_ms()
            paid_invoice = await self.invoice_repo.update(invoice)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to mark invoice {invoice_id} as paid: {e}")
            return Return.err(
                Error(
                    code="MARK_PAID_FAILED",
                    message="Failed to mark invoice as paid",
                    reason=str(e),
                )
            )

        # Step 3: payment write
        try:
            payment = PaymentRecord(
                account_id=account_id,
                invoice_id=paid_invoice.invoice_number,
                amount=paid_invoice.total,
                date=now_ms(),
                method=self.payment_method,
                client_name=paid_invoice.client_snapshot.name,
                status=PaymentStatus.VERIFIED,
            )
            created_payment = await self.payment_repo.create(payment)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(
                f"Invoice {paid_invoice.invoice_number} is marked Paid but its payment "
                f"record was not written: {e}"
            )
            return Return.err(
                Error(
                    code="PAYMENT_RECORD_FAILED",
                    message=f"Invoice #{paid_invoice.invoice_number} was marked as paid "
                            f"but its payment record could not be saved",
                    reason=str(e),
                )
            )

        logger.info(
            f"Invoice {paid_invoice.invoice_number} marked as paid, "
            f"payment {created_payment.id} recorded for {created_payment.amount}"
        )

        # Step 4: Build response
        return Return.ok(
            MarkPaidResponseDTO(
                invoice=InvoiceResponseDTO.from_entity(paid_invoice),
                payment=PaymentResponseDTO.from_entity(created_payment),
            )
        )
