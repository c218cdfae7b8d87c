"""Data Transfer Objects for Payment Use Cases"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.payment import PaymentRecord, PaymentStatus


class RecordPaymentCommandDTO(BaseModel):
    """
    Command DTO for recording a payment manually

    Used as input to RecordPayment use case.
    """

    invoice_id: str = Field(
        ...,
        description="Invoice NUMBER the payment settles"
    )

    amount: Decimal = Field(
        ...,
        ge=0,
        decimal_places=6,
        description="Amount received"
    )

    date: Optional[int] = Field(
        default=None,
        description="Payment time in epoch ms (defaults to now)"
    )

    method: str = Field(
        default="Cash/Other",
        description="Payment method label"
    )

    reference: Optional[str] = Field(
        default=None,
        description="External payment reference"
    )

    client_name: str = Field(
        default="",
        description="Name of the paying client"
    )

    status: PaymentStatus = Field(
        default=PaymentStatus.PENDING,
        description="Verification status"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": "INV-2026-001",
                "amount": "1210.00",
                "method": "MTN MoMo",
                "reference": "MP240101.1234.A56789",
                "client_name": "Ama Mensah",
                "status": "Pending"
            }
        }


class PaymentResponseDTO(BaseModel):
    """Response DTO for a payment record"""

    payment_id: str = Field(..., description="Payment document ID")
    invoice_id: str = Field(..., description="Invoice number")
    amount: Decimal = Field(..., description="Amount received")
    date: int = Field(..., description="Payment time (epoch ms)")
    method: str = Field(..., description="Payment method label")
    reference: Optional[str] = Field(default=None, description="External reference")
    client_name: str = Field(..., description="Paying client")
    status: str = Field(..., description="Verified or Pending")
    created_at: int = Field(..., description="Creation time (epoch ms)")
    updated_at: int = Field(..., description="Last update time (epoch ms)")

    @classmethod
    def from_entity(cls, payment: PaymentRecord) -> "PaymentResponseDTO":
        return cls(
            payment_id=payment.id,
            invoice_id=payment.invoice_id,
            amount=payment.amount,
            date=payment.date,
            method=payment.method,
            reference=payment.reference,
            client_name=payment.client_name,
            status=PaymentStatus(payment.status).value,
            created_at=payment.created_at,
            updated_at=payment.updated_at,
        )


class ListPaymentsResponseDTO(BaseModel):
    payments: List[PaymentResponseDTO] = Field(default_factory=list)
    total: int = Field(..., description="Number of payments returned")


class DeletePaymentResponseDTO(BaseModel):
    payment_id: str
    deleted: bool
