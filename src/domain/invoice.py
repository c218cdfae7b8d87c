"""Invoice Domain Entity

The central aggregate: an issuer snapshot, a client snapshot, line items,
tax toggles, the derived total and a lifecycle status.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, Boolean, Date, JSON, Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid, now_ms
from src.domain.business_profile import BusinessSnapshot
from src.domain.client import ClientSnapshot
from src.domain.line_item import LineItem
from src.domain.tax import DEFAULT_VAT_RATE, InvoiceTotals, compute_totals, effective_rate as combined_rate


class InvoiceStatus(str, Enum):
    """Invoice lifecycle states"""
    DRAFT = "Draft"
    PENDING = "Pending"
    SENT = "Sent"
    OVERDUE = "Overdue"
    PAID = "Paid"


# Statuses that become Overdue once the due date has passed
AWAITING_PAYMENT = (InvoiceStatus.PENDING, InvoiceStatus.SENT)


class Invoice(BaseModel, table=True):
    """
    Invoice - Line-itemed bill with jurisdiction tax add-ons

    Domain Rules:
    - total == subtotal + vat_amount + levies_amount + covid_amount
    - subtotal == sum(quantity * price) over items
    - client and business_info are value snapshots taken at save time
    - A saved invoice has at least one line item
    - Overdue is projected at read time from due_date, see effective_status()
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index("ix_invoices_account_created", "account_id", "created_at"),
        Index("ix_invoices_account_number", "account_id", "invoice_number"),
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

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="User-editable invoice number (e.g., INV-2026-001)"
    )

    issue_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Issue date"
    )

    due_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Due date (defaults to the issue date)"
    )

    items: List[dict] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Ordered line items"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.PENDING,
        description="Lifecycle status"
    )

    currency: str = Field(
        default="GHS",
        sa_column=Column(String(3), nullable=False),
        description="Currency code"
    )

    vat_enabled: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False),
        description="Apply VAT at vat_rate"
    )

    levies_enabled: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False),
        description="Apply the bundled 5% NHIL/GETFund levies"
    )

    covid_levy_enabled: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False),
        description="Apply the 1% COVID-19 recovery levy"
    )

    vat_rate: Decimal = Field(
        default=DEFAULT_VAT_RATE,
        sa_column=Column(Numeric(5, 2), nullable=False),
        description="VAT percentage in force when the invoice was saved"
    )

    total: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Grand total (derived, precision: 18,6)"
    )

    client: dict = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
        description="Client snapshot"
    )

    business_info: Optional[dict] = Field(
        default=None,
        sa_column=Column(JSON, nullable=True),
        description="Business profile snapshot"
    )

    terms_enabled: bool = Field(
        default=False,
        description="Print payment terms on the invoice"
    )

    terms_text: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Payment terms text"
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

    @property
    def line_items(self) -> List[LineItem]:
        return [LineItem.model_validate(item) for item in self.items or []]

    @property
    def client_snapshot(self) -> ClientSnapshot:
        return ClientSnapshot.model_validate(self.client or {})

    @property
    def business_snapshot(self) -> Optional[BusinessSnapshot]:
        if self.business_info is None:
            return None
        return BusinessSnapshot.model_validate(self.business_info)

    def compute_totals(self) -> InvoiceTotals:
        return compute_totals(
            self.line_items,
            vat_rate=self.vat_rate,
            vat_enabled=self.vat_enabled,
            levies_enabled=self.levies_enabled,
            covid_levy_enabled=self.covid_levy_enabled,
        )

    def effective_rate(self) -> Decimal:
        return combined_rate(
            self.vat_rate,
            vat_enabled=self.vat_enabled,
            levies_enabled=self.levies_enabled,
            covid_levy_enabled=self.covid_levy_enabled,
        )

    def effective_status(self, today: Optional[date] = None) -> InvoiceStatus:
        """Stored status, or Overdue when an unpaid invoice is past its due date"""
        status = InvoiceStatus(self.status)
        today = today or date.today()
        if status in AWAITING_PAYMENT and self.due_date < today:
            return InvoiceStatus.OVERDUE
        return status
