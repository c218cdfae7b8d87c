"""Invoice API Routes

FastAPI routes for the invoice lifecycle: create, edit, mark as paid,
delete, list, and the PDF/CSV exports.
"""

import base64
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.app.services.quota_gate import QuotaGate
from src.app.use_cases.dtos import CsvExportResponseDTO
from src.app.use_cases.invoicing import (
    CreateInvoice,
    UpdateInvoice,
    MarkInvoicePaid,
    DeleteInvoice,
    GetInvoice,
    ListInvoices,
    GenerateInvoicePdf,
    ExportInvoicesCsv,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    InvoiceResponseDTO,
    ListInvoicesResponseDTO,
    MarkPaidResponseDTO,
    DeleteInvoiceResponseDTO,
    InvoicePdfResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyInvoiceRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyBusinessProfileRepository,
)
from src.adapter.services import SqlAlchemyUnitOfWork, ReportLabPdfService, StdlibCsvService
from src.depends import (
    get_session,
    get_identity,
    get_invoice_quota_gate,
    get_export_quota_gate,
    get_default_preferences,
)
from src.domain.business_profile import Preferences
from src.domain.identity import ActingIdentity
from src.domain.invoice import InvoiceStatus
from src.api.error import ClientError, status_code_for

router = APIRouter(prefix="/invoices", tags=["Invoices"])

LOCKOUT_RESPONSE = {
    "description": "Guest quota exhausted",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "GUEST_INVOICE_LIMIT_REACHED",
                    "message": "You have reached the 7 invoice limit for guest users. "
                               "Create a free account to generate unlimited invoices."
                }
            }
        }
    }
}


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "MISSING_CLIENT_NAME",
                            "message": "Please provide a client name."
                        }
                    }
                }
            }
        },
        403: LOCKOUT_RESPONSE,
    }
)
async def create_invoice(
    request: CreateInvoiceCommandDTO,
    identity: ActingIdentity = Depends(get_identity),
    quota_gate: QuotaGate = Depends(get_invoice_quota_gate),
    default_preferences: Preferences = Depends(get_default_preferences),
    session: AsyncSession = Depends(get_session),
):
    """
    Save a new invoice.

    Totals are derived server-side from items and tax flags. Guests
    (`X-Guest: true`) are limited to a fixed number of invoices per
    installation.

    **Returns:**
    - 201: Invoice created
    - 400: Missing client name or item description
    - 403: Guest invoice limit reached
    """
    use_case = CreateInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyClientRepository(session),
        SqlAlchemyBusinessProfileRepository(session),
        quota_gate,
        default_preferences,
    )
    result = await use_case.execute(request, identity)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value


@router.get("", response_model=ListInvoicesResponseDTO)
async def list_invoices(
    status_filter: Optional[InvoiceStatus] = Query(default=None, alias="status"),
    search: Optional[str] = Query(default=None, description="Client name or invoice number"),
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    """
    List invoices, newest first.

    `status=Overdue` matches unpaid invoices past their due date.
    """
    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(identity.account_id, status=status_filter, search=search)
    return result.value


@router.get(
    "/export/csv",
    responses={200: {"content": {"text/csv": {}}, "description": "CSV document"}},
)
async def export_invoices_csv(
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    """Download all invoices as CSV."""
    use_case = ExportInvoicesCsv(SqlAlchemyInvoiceRepository(session), StdlibCsvService())
    result = await use_case.execute(identity.account_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return _csv_response(result.value)


@router.get("/{invoice_id}", response_model=InvoiceResponseDTO)
async def get_invoice(
    invoice_id: str,
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetInvoice(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(identity.account_id, invoice_id)

    if result.value is None:
        raise ClientError(
            _not_found(invoice_id),
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return result.value


@router.patch("/{invoice_id}", response_model=InvoiceResponseDTO)
async def update_invoice(
    invoice_id: str,
    request: UpdateInvoiceCommandDTO,
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    """
    Edit an invoice.

    Only fields present in the body change. The total is always recomputed.
    """
    use_case = UpdateInvoice(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(identity.account_id, invoice_id, request)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value


@router.delete("/{invoice_id}", response_model=DeleteInvoiceResponseDTO)
async def delete_invoice(
    invoice_id: str,
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    """Delete an invoice. Payments referencing it are kept."""
    use_case = DeleteInvoice(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(identity.account_id, invoice_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value


@router.post(
    "/{invoice_id}/mark-paid",
    response_model=MarkPaidResponseDTO,
    responses={
        500: {
            "description": "Invoice marked Paid but the payment record was not written",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "PAYMENT_RECORD_FAILED",
                            "message": "Invoice INV-2026-001 was marked as paid but the payment record could not be saved"
                        }
                    }
                }
            }
        }
    }
)
async def mark_invoice_paid(
    invoice_id: str,
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    """
    Quick action: mark an invoice as paid and record a verified payment.

    **Returns:**
    - 200: Invoice paid and payment recorded
    - 404: Invoice not found
    - 409: Invoice already paid
    - 500: Status saved but payment record failed (PAYMENT_RECORD_FAILED)
    """
    use_case = MarkInvoicePaid(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyPaymentRepository(session),
        payment_method=ApplicationConfig.QUICK_PAYMENT_METHOD,
    )
    result = await use_case.execute(identity.account_id, invoice_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value


@router.get("/{invoice_id}/pdf", response_model=InvoicePdfResponseDTO, responses={403: LOCKOUT_RESPONSE})
async def get_invoice_pdf(
    invoice_id: str,
    identity: ActingIdentity = Depends(get_identity),
    export_quota_gate: QuotaGate = Depends(get_export_quota_gate),
    session: AsyncSession = Depends(get_session),
):
    """Render the invoice as a base64-encoded PDF."""
    use_case = GenerateInvoicePdf(
        SqlAlchemyInvoiceRepository(session), ReportLabPdfService(), export_quota_gate
    )
    result = await use_case.execute(identity, invoice_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value


@router.get(
    "/{invoice_id}/pdf/download",
    responses={
        200: {"content": {"application/pdf": {}}, "description": "PDF document"},
        403: LOCKOUT_RESPONSE,
    }
)
async def download_invoice_pdf(
    invoice_id: str,
    identity: ActingIdentity = Depends(get_identity),
    export_quota_gate: QuotaGate = Depends(get_export_quota_gate),
    session: AsyncSession = Depends(get_session),
):
    """Download the invoice PDF as a file."""
    use_case = GenerateInvoicePdf(
        SqlAlchemyInvoiceRepository(session), ReportLabPdfService(), export_quota_gate
    )
    result = await use_case.execute(identity, invoice_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return Response(
        content=base64.b64decode(result.value.pdf_base64),
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={result.value.filename}"},
    )


def _csv_response(export: CsvExportResponseDTO) -> Response:
    return Response(
        content=export.content,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={export.filename}"},
    )


def _not_found(invoice_id: str) -> Error:
    return Error(
        code="INVOICE_NOT_FOUND",
        message=f"Invoice with ID {invoice_id} not found",
        reason="Invoice does not exist",
    )
