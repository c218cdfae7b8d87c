"""Reporting API Routes"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.reports import (
    SummarizeInvoices,
    SummarizePayments,
    InvoiceSummaryDTO,
    PaymentSummaryDTO,
)
from src.adapter.repositories import SqlAlchemyInvoiceRepository, SqlAlchemyPaymentRepository
from src.depends import get_session, get_identity
from src.domain.identity import ActingIdentity

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/invoices", response_model=InvoiceSummaryDTO)
async def summarize_invoices(
    year: Optional[int] = Query(default=None, description="Year for the monthly revenue series"),
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    result = await SummarizeInvoices(SqlAlchemyInvoiceRepository(session)).execute(
        identity.account_id, year=year
    )
    return result.value


@router.get("/payments", response_model=PaymentSummaryDTO)
async def summarize_payments(
    identity: ActingIdentity = Depends(get_identity),
    session: AsyncSession = Depends(get_session),
):
    result = await SummarizePayments(SqlAlchemyPaymentRepository(session)).execute(
        identity.account_id
    )
    return result.value
