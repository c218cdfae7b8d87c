"""Payment Record Domain Entity

Receipt events. A payment references its invoice by invoice number and has
a lifecycle independent of that invoice: deleting either one leaves the
other untouched.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, Numeric, String
from src.domain.base import BaseModel, generate_uuid, now_ms


class PaymentStatus(str, Enum):
    """Payment verification status"""
    VERIFIED = "Verified"
    PENDING = "Pending"


class PaymentRecord(BaseModel, table=True):
    """
    Payment Record - A receipt against an invoice

    Domain Rules:
    - invoice_id holds the invoice NUMBER, not the document id
    - Quick-action payments (mark as paid) are created Verified
    - Deleting a payment never reverts the invoice status
    """

    __tablename__ = "payments"
    __table_args__ = (
        Index("ix_payments_account_date", "account_id", "date"),
        Index("ix_payments_account_client", "account_id", "client_name"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Document identifier"
    )

    account_id: str = Field(
        index=True,
        description="Owning account"
    )

    invoice_id: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Invoice number this payment settles"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Amount received (precision: 18,6)"
    )

    date: int = Field(
        default_factory=now_ms,
        sa_column=Column(BigInteger, nullable=False),
        description="Payment time (epoch ms)"
    )

    method: str = Field(
        default="Cash/Other",
        description="Payment method label (e.g., MTN MoMo, Bank Transfer)"
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
        description="Verification status (Verified, Pending)"
    )

    created_at: int = Field(
        default_factory=now_ms,
        sa_column=Column(BigInteger, nullable=False),
        description="Creation time (epoch ms)"
    )

    updated_at: int = Field(
        default_factory=now_ms,
        sa_column=Column(BigInteger, nullable=False),
        description="Last update time (epoch ms)"
    )
