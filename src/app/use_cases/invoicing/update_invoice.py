"""UpdateInvoice Use Case

Applies an edit to a saved invoice and re-derives its total.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import now_ms
from src.domain.business_profile import BusinessSnapshot
from src.domain.client import ClientSnapshot, NEW_CLIENT_ID
from .dtos import UpdateInvoiceCommandDTO, InvoiceResponseDTO
from .validation import validate_invoice_content

logger = logging.getLogger(__name__)

# Plain fields copied as-is when present in the patch
_SCALAR_FIELDS = (
    "invoice_number",
    "issue_date",
    "due_date",
    "status",
    "currency",
    "vat_rate",
    "vat_enabled",
    "levies_enabled",
    "covid_levy_enabled",
    "terms_enabled",
    "terms_text",
)


class UpdateInvoice:
    """
    Use Case: Edit an existing invoice

    Business Rules:
    1. Same content rules as creation (client name, item descriptions)
    2. Status is kept unless the patch sets it explicitly
    3. Business info is re-snapshotted only when the patch supplies it
    4. Total is recomputed from the merged items and flags
    5. updated_at is refreshed

    Flow:
    1. Load invoice (INVOICE_NOT_FOUND if missing)
    2. Merge patch over stored content and validate
    3. Apply fields, recompute total, stamp updated_at
    4. Persist and commit
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(
        self, account_id: str, invoice_id: str, command: UpdateInvoiceCommandDTO
    ) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice update

        Args:
            account_id: Owning account
            invoice_id: Invoice document ID
            command: Fields to change (unset fields are left untouched)

        Returns:
            Result[InvoiceResponseDTO]: Updated invoice or error
        """
        patch = command.model_dump(exclude_unset=True)

        try:
            # Step 1: Load
            invoice = await self.invoice_repo.get_by_id(account_id, invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Validate merged content before mutating anything
            items = (
                [item.to_domain() for item in command.items]
                if command.items is not None
                else invoice.line_items
            )
            current_client = invoice.client_snapshot
            client = current_client
            if command.client is not None:
                client = ClientSnapshot(
                    id=command.client.id or current_client.id or NEW_CLIENT_ID,
                    name=command.client.name.strip(),
                    email=command.client.email,
                    momo_number=command.client.momo_number,
                    momo_network=command.client.momo_network,
                    location=command.client.location,
                    invoices_count=current_client.invoices_count,
                    status=current_client.status,
                )

            validation_error = validate_invoice_content(client.name, items)
            if validation_error:
                return Return.err(validation_error)

            # Step 3: Apply
            for field in _SCALAR_FIELDS:
                if field in patch and patch[field] is not None:
                    setattr(invoice, field, getattr(command, field))

            invoice.items = [item.model_dump(mode="json") for item in items]
            invoice.client = client.model_dump(mode="json")
            if command.business_info is not None:
                invoice.business_info = BusinessSnapshot(
                    **command.business_info.model_dump()
                ).model_dump(mode="json")

            invoice.total = invoice.compute_totals().total
            invoice.updated_at = now_ms()

            # Step 4: Persist
            updated_invoice = await self.invoice_repo.update(invoice)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_FAILED",
                    message="Failed to update invoice",
                    reason=str(e),
                )
            )

        logger.info(f"Updated invoice {updated_invoice.invoice_number} ({invoice_id})")
        return Return.ok(InvoiceResponseDTO.from_entity(updated_invoice))
