"""CreateInvoice Use Case

Saves a new invoice, enforcing the guest quota for unauthenticated users.
"""

import logging
from datetime import date
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.quota_gate import QuotaGate
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.business_profile_repository import BusinessProfileRepository
from src.domain.base import now_ms
from src.domain.business_profile import BusinessSnapshot, Preferences
from src.domain.client import ClientSnapshot, NEW_CLIENT_ID
from src.domain.identity import ActingIdentity
from src.domain.invoice import Invoice
from src.domain.tax import compute_totals
from .dtos import CreateInvoiceCommandDTO, ClientDetailsDTO, InvoiceResponseDTO
from .validation import validate_invoice_content

logger = logging.getLogger(__name__)

GUEST_INVOICE_LIMIT_REACHED = "GUEST_INVOICE_LIMIT_REACHED"


class CreateInvoice:
    """
    Use Case: Create an invoice

    Business Rules:
    1. Client name and every item description are required
    2. Guests are limited by the invoice quota gate; registered users are not
    3. Business and client fields are snapshotted into the invoice
    4. Total is derived from items and tax flags, never taken from the caller
    5. The guest counter is incremented only after the store confirms the write

    Flow:
    1. Validate content (no side effects on failure)
    2. Check quota (guests only) and signal lockout if exhausted
    3. Resolve defaults from the business profile and snapshot parties
    4. Compute totals, persist and commit
    5. Increment the guest counter
    6. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        client_repo: ClientRepository,
        profile_repo: BusinessProfileRepository,
        quota_gate: QuotaGate,
        default_preferences: Optional[Preferences] = None,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.client_repo = client_repo
        self.profile_repo = profile_repo
        self.quota_gate = quota_gate
        self.default_preferences = default_preferences or Preferences()

    async def execute(
        self, command: CreateInvoiceCommandDTO, identity: ActingIdentity
    ) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with items, tax flags and client details
            identity: Resolved acting identity (account and guest flag)

        Returns:
            Result[InvoiceResponseDTO]: Created invoice, a validation error,
            a GUEST_INVOICE_LIMIT_REACHED lockout, or CREATE_INVOICE_FAILED
        """
        items = [item.to_domain() for item in command.items]

        # Step 1: Validate before touching anything
        validation_error = validate_invoice_content(command.client.name, items)
        if validation_error:
            return Return.err(validation_error)

        # Step 2: Guest quota
        if identity.is_guest and not self.quota_gate.can_create(identity.is_guest):
            logger.warning(
                f"Guest account {identity.account_id} reached the invoice limit "
                f"({self.quota_gate.limit})"
            )
            return Return.err(
                Error(
                    code=GUEST_INVOICE_LIMIT_REACHED,
                    message=f"You have reached the {self.quota_gate.limit} invoice limit for guest users. "
                            f"Create a free account to generate unlimited invoices.",
                    reason=f"guest counter={self.quota_gate.count()}, limit={self.quota_gate.limit}",
                )
            )

        try:
            # Step 3: Resolve defaults and snapshots
            profile = await self.profile_repo.get(identity.account_id)
            preferences = (
                profile.get_preferences(self.default_preferences) if profile else self.default_preferences
            )

            if command.business_info is not None:
                business: Optional[BusinessSnapshot] = BusinessSnapshot(**command.business_info.model_dump())
            else:
                business = profile.snapshot() if profile else None

            client = await self._resolve_client(identity.account_id, command.client)

            issue_date = command.issue_date or date.today()
            invoice_number = (command.invoice_number or "").strip()
            if not invoice_number:
                invoice_number = await self.invoice_repo.generate_invoice_number(
                    account_id=identity.account_id,
                    prefix=preferences.invoice_prefix,
                    year=issue_date.year,
                )

            vat_rate = command.vat_rate if command.vat_rate is not None else preferences.default_tax_rate

            # Step 4: Derive totals and persist
            totals = compute_totals(
                items,
                vat_rate=vat_rate,
                vat_enabled=command.vat_enabled,
                levies_enabled=command.levies_enabled,
                covid_levy_enabled=command.covid_levy_enabled,
            )

            timestamp = now_ms()
            invoice = Invoice(
                account_id=identity.account_id,
                invoice_number=invoice_number,
                issue_date=issue_date,
                due_date=command.due_date or issue_date,
                items=[item.model_dump(mode="json") for item in items],
                status=command.status,
                currency=command.currency or preferences.default_currency,
                vat_enabled=command.vat_enabled,
                levies_enabled=command.levies_enabled,
                covid_levy_enabled=command.covid_levy_enabled,
                vat_rate=vat_rate,
                total=totals.total,
                client=client.model_dump(mode="json"),
                business_info=business.model_dump(mode="json") if business else None,
                terms_enabled=command.terms_enabled,
                terms_text=command.terms_text,
                created_at=timestamp,
                updated_at=timestamp,
            )

            created_invoice = await self.invoice_repo.create(invoice)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to save invoice for account {identity.account_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to save invoice",
                    reason=str(e),
                )
            )

        # Step 5: Consume guest quota only once the write is confirmed
        if identity.is_guest:
            try:
                self.quota_gate.increment()
            except OSError as e:
                # The invoice is already committed
                logger.warning(
                    f"Invoice {created_invoice.id} saved but the guest counter was not updated: {e}"
                )

        logger.info(
            f"Created invoice {created_invoice.invoice_number} ({created_invoice.id}) "
            f"for account {identity.account_id}"
        )

        # Step 6: Build response
        return Return.ok(InvoiceResponseDTO.from_entity(created_invoice))

    async def _resolve_client(self, account_id: str, details: ClientDetailsDTO) -> ClientSnapshot:
        """
        Build the client snapshot from the form fields

        Fields typed on the form win; blanks are filled from the roster entry
        when the client was picked from the roster. Unknown clients keep the
        'new' sentinel id.
        """
        snapshot = ClientSnapshot(
            id=details.id or NEW_CLIENT_ID,
            name=details.name.strip(),
            email=details.email,
            momo_number=details.momo_number,
            momo_network=details.momo_network,
            location=details.location,
        )

        if snapshot.id == NEW_CLIENT_ID:
            return snapshot

        record = await self.client_repo.get_by_id(account_id, snapshot.id)
        if record is None:
            snapshot.id = NEW_CLIENT_ID
            return snapshot

        roster = record.snapshot()
        return ClientSnapshot(
            id=roster.id,
            name=snapshot.name or roster.name,
            email=snapshot.email or roster.email,
            momo_number=snapshot.momo_number or roster.momo_number,
            momo_network=snapshot.momo_network or roster.momo_network,
            location=snapshot.location or roster.location,
            invoices_count=roster.invoices_count,
            status=roster.status,
        )
