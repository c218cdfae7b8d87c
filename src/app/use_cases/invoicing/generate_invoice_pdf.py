"""GenerateInvoicePdf Use Case

Renders a saved invoice to PDF. Guests share a separate export quota.
"""

import base64
import logging
from decimal import Decimal
from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.pdf_service import (
    PdfService,
    InvoiceDocument,
    DocumentLine,
    DocumentCharge,
    DocumentParty,
)
from src.app.services.quota_gate import QuotaGate
from src.domain.base import now_ms
from src.domain.identity import ActingIdentity
from src.domain.invoice import Invoice
from src.domain.money import format_money
from src.domain.tax import LEVIES_RATE, COVID_LEVY_RATE
from .dtos import InvoicePdfResponseDTO

logger = logging.getLogger(__name__)

GUEST_EXPORT_LIMIT_REACHED = "GUEST_EXPORT_LIMIT_REACHED"


def _percent(rate) -> str:
    return f"{Decimal(str(rate)).normalize():f}%"


def build_invoice_document(invoice: Invoice) -> InvoiceDocument:
    """Turn an invoice into display-ready text for rendering"""
    currency = invoice.currency
    totals = invoice.compute_totals()

    business = invoice.business_snapshot
    issuer_lines: List[str] = []
    if business:
        issuer_lines = [line for line in (business.address, business.email) if line]
        if business.tin:
            issuer_lines.append(f"TIN: {business.tin}")
        if business.momo_number:
            issuer_lines.append(f"{business.momo_network or 'MoMo'}: {business.momo_number}")

    client = invoice.client_snapshot
    client_lines = [line for line in (client.email, client.momo_number, client.location) if line]

    charges = []
    if invoice.vat_enabled:
        charges.append(DocumentCharge(
            label=f"VAT ({_percent(invoice.vat_rate)})",
            amount=format_money(totals.vat_amount, currency),
        ))
    if invoice.levies_enabled:
        charges.append(DocumentCharge(
            label=f"Levies ({_percent(LEVIES_RATE * 100)})",
            amount=format_money(totals.levies_amount, currency),
        ))
    if invoice.covid_levy_enabled:
        charges.append(DocumentCharge(
            label=f"COVID-19 ({_percent(COVID_LEVY_RATE * 100)})",
            amount=format_money(totals.covid_amount, currency),
        ))

    return InvoiceDocument(
        invoice_number=invoice.invoice_number,
        status=invoice.effective_status().value,
        issue_date=invoice.issue_date.isoformat(),
        due_date=invoice.due_date.isoformat(),
        issuer=DocumentParty(name=business.name if business else "", lines=issuer_lines),
        bill_to=DocumentParty(name=client.name, lines=client_lines),
        lines=[
            DocumentLine(
                description=item.description,
                quantity=item.quantity,
                unit_price=format_money(item.price, currency),
                line_total=format_money(item.line_total, currency),
            )
            for item in invoice.line_items
        ],
        subtotal=format_money(totals.subtotal, currency),
        charges=charges,
        total=format_money(invoice.total, currency),
        terms_text=invoice.terms_text if invoice.terms_enabled else None,
    )


class GenerateInvoicePdf:
    """
    Use Case: Download an invoice as PDF

    Business Rules:
    1. Invoice must exist
    2. Guests are limited by the export quota gate; registered users are not
    3. The export counter is incremented only after rendering succeeded

    Flow:
    1. Check export quota (guests only)
    2. Load invoice
    3. Build display-ready document and render
    4. Increment guest export counter
    5. Return PDF as base64
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        pdf_service: PdfService,
        export_quota_gate: QuotaGate,
    ):
        self.invoice_repo = invoice_repo
        self.pdf_service = pdf_service
        self.export_quota_gate = export_quota_gate

    async def execute(self, identity: ActingIdentity, invoice_id: str) -> Result[InvoicePdfResponseDTO]:
        # Step 1: Guest export quota
        if not self.export_quota_gate.can_create(identity.is_guest):
            logger.warning(f"Guest account {identity.account_id} reached the export limit")
            return Return.err(
                Error(
                    code=GUEST_EXPORT_LIMIT_REACHED,
                    message=f"You have used all {self.export_quota_gate.limit} free exports. "
                            f"Create a free account for unlimited downloads.",
                    reason=f"guest export counter={self.export_quota_gate.count()}",
                )
            )

        try:
            # Step 2: Load
            invoice = await self.invoice_repo.get_by_id(identity.account_id, invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 3: Render
            pdf_bytes = self.pdf_service.render_invoice(build_invoice_document(invoice))

        except Exception as e:
            logger.error(f"Failed to render invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="GENERATE_PDF_FAILED",
                    message="Failed to generate invoice PDF",
                    reason=str(e),
                )
            )

        # Step 4: Consume guest export quota
        if identity.is_guest:
            try:
                self.export_quota_gate.increment()
            except OSError as e:
                logger.warning(f"Guest export counter was not updated for invoice {invoice_id}: {e}")

        # Step 5: Build response
        return Return.ok(
            InvoicePdfResponseDTO(
                invoice_id=invoice.id,
                invoice_number=invoice.invoice_number,
                filename=f"{invoice.invoice_number}.pdf",
                pdf_base64=base64.b64encode(pdf_bytes).decode("utf-8"),
                generated_at=now_ms(),
            )
        )
