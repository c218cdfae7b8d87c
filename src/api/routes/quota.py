"""Guest Quota API Routes"""

from fastapi import APIRouter, Depends

from src.api.schemas.quota_response import QuotaCounterSchema, QuotaStatusSchema
from src.app.services.quota_gate import QuotaGate
from src.depends import get_identity, get_invoice_quota_gate, get_export_quota_gate
from src.domain.identity import ActingIdentity

router = APIRouter(prefix="/quota", tags=["Quota"])


@router.get("", response_model=QuotaStatusSchema)
async def get_quota_status(
    identity: ActingIdentity = Depends(get_identity),
    invoice_gate: QuotaGate = Depends(get_invoice_quota_gate),
    export_gate: QuotaGate = Depends(get_export_quota_gate),
):
    """
    Report guest usage so the client can show remaining free invoices.

    Registered users are never locked.
    """
    return QuotaStatusSchema(
        is_guest=identity.is_guest,
        invoices=QuotaCounterSchema.from_gate(invoice_gate, identity.is_guest),
        exports=QuotaCounterSchema.from_gate(export_gate, identity.is_guest),
    )
