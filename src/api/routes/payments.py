"""Payment API Routes"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.payments import (
    RecordPayment,
    VerifyPayment,
    DeletePayment,
    ListPayments,
    ExportPaymentsCsv,
    RecordPaymentCommandDTO,
    PaymentResponseDTO,
    ListPaymentsResponseDTO,
    DeletePaymentResponseDTO,
)
from src.adapter.repositories import SqlAlchemyPaymentRepository
from src.adapter.services import SqlAlchemyUnitOfWork, StdlibCsvService
from src.depends import get_session, get_identity
from src.domain.identity import ActingIdentity
from src.api.error import ClientError, status_code_for

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.post("", response_model=PaymentResponseDTO, status_code=status.HTTP_201_CREATED)
async def record_payment(
    request: RecordPaymentCommandDTO,
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    """
    Record a payment against an invoice number.

    The invoice status is not changed; use the invoice mark-paid action for that.
    """
    use_case = RecordPayment(SqlAlchemyUnitOfWork(session), SqlAlchemyPaymentRepository(session))
    result = await use_case.execute(identity.account_id, request)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value


@router.get("", response_model=ListPaymentsResponseDTO)
async def list_payments(
    client_name: Optional[str] = Query(default=None),
    method: Optional[str] = Query(default=None, description="Case-insensitive substring of the method"),
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    use_case = ListPayments(SqlAlchemyPaymentRepository(session))
    result = await use_case.execute(identity.account_id, client_name=client_name, method=method)
    return result.value


@router.get(
    "/export/csv",
    responses={200: {"content": {"text/csv": {}}, "description": "CSV document"}},
)
async def export_payments_csv(
    method: Optional[str] = Query(default=None),
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    use_case = ExportPaymentsCsv(SqlAlchemyPaymentRepository(session), StdlibCsvService())
    result = await use_case.execute(identity.account_id, method=method)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return Response(
        content=result.value.content,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={result.value.filename}"},
    )


@router.post("/{payment_id}/verify", response_model=PaymentResponseDTO)
async def verify_payment(
    payment_id: str,
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    use_case = VerifyPayment(SqlAlchemyUnitOfWork(session), SqlAlchemyPaymentRepository(session))
    result = await use_case.execute(identity.account_id, payment_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value


@router.delete("/{payment_id}", response_model=DeletePaymentResponseDTO)
async def delete_payment(
    payment_id: str,
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    """Delete a payment record. The invoice keeps its status."""
    use_case = DeletePayment(SqlAlchemyUnitOfWork(session), SqlAlchemyPaymentRepository(session))
    result = await use_case.execute(identity.account_id, payment_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value
