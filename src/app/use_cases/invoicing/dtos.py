"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.business_profile import BusinessSnapshot
from src.domain.client import ClientSnapshot
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.line_item import LineItem
from src.app.use_cases.payments.dtos import PaymentResponseDTO


class LineItemDTO(BaseModel):
    """Line item as entered by the user"""

    id: Optional[str] = Field(default=None, description="Local list identifier")
    description: str = Field(default="", description="Item description")
    quantity: int = Field(default=1, description="Quantity")
    price: Decimal = Field(
        default=Decimal("0"),
        decimal_places=2,
        description="Unit price (at most 2 decimal places)"
    )

    def to_domain(self) -> LineItem:
        return LineItem(
            id=self.id,
            description=self.description,
            quantity=self.quantity,
            price=self.price,
        )


class ClientDetailsDTO(BaseModel):
    """Client fields entered on the invoice form"""

    id: Optional[str] = Field(
        default=None,
        description="Roster client ID; omitted or 'new' for a client not yet in the roster"
    )
    name: str = Field(default="", description="Client name")
    email: str = Field(default="", description="Client email")
    momo_number: str = Field(default="", description="Client mobile-money number")
    momo_network: Optional[str] = Field(default=None, description="Client mobile-money network")
    location: Optional[str] = Field(default=None, description="Client location")


class BusinessInfoDTO(BaseModel):
    """Issuer fields to snapshot on the invoice"""

    name: str = ""
    email: str = ""
    address: str = ""
    logo_url: Optional[str] = None
    tin: str = ""
    momo_number: Optional[str] = None
    momo_network: Optional[str] = None


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case. Totals are never accepted from
    the caller; they are derived from items and tax flags.
    """

    invoice_number: Optional[str] = Field(
        default=None,
        description="Invoice number; generated from the account prefix when blank"
    )

    issue_date: Optional[date] = Field(
        default=None,
        description="Issue date (defaults to today)"
    )

    due_date: Optional[date] = Field(
        default=None,
        description="Due date (defaults to the issue date)"
    )

    items: List[LineItemDTO] = Field(
        default_factory=list,
        description="Ordered line items"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.PENDING,
        description="Initial status (Draft for 'save as draft')"
    )

    currency: Optional[str] = Field(
        default=None,
        description="Currency code (defaults to the profile preference)"
    )

    vat_rate: Optional[Decimal] = Field(
        default=None,
        ge=0,
        max_digits=5,
        decimal_places=2,
        description="VAT percentage (defaults to the profile preference)"
    )

    vat_enabled: bool = False
    levies_enabled: bool = False
    covid_levy_enabled: bool = False

    client: ClientDetailsDTO = Field(
        default_factory=ClientDetailsDTO,
        description="Client details to snapshot"
    )

    business_info: Optional[BusinessInfoDTO] = Field(
        default=None,
        description="Issuer details; the saved business profile is used when omitted"
    )

    terms_enabled: bool = False
    terms_text: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_number": "INV-2026-001",
                "issue_date": "2026-01-15",
                "due_date": "2026-02-15",
                "items": [
                    {"description": "Website design", "quantity": 1, "price": "1000.00"}
                ],
                "status": "Pending",
                "vat_enabled": True,
                "levies_enabled": True,
                "covid_levy_enabled": True,
                "client": {"name": "Ama Mensah", "email": "ama@example.com"}
            }
        }


class UpdateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for editing an invoice

    Only fields explicitly set are applied. Status is kept unless set here;
    business_info is re-snapshotted only when supplied.
    """

    invoice_number: Optional[str] = None
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    items: Optional[List[LineItemDTO]] = None
    status: Optional[InvoiceStatus] = None
    currency: Optional[str] = None
    vat_rate: Optional[Decimal] = Field(default=None, ge=0, max_digits=5, decimal_places=2)
    vat_enabled: Optional[bool] = None
    levies_enabled: Optional[bool] = None
    covid_levy_enabled: Optional[bool] = None
    client: Optional[ClientDetailsDTO] = None
    business_info: Optional[BusinessInfoDTO] = None
    terms_enabled: Optional[bool] = None
    terms_text: Optional[str] = None


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice operations

    Carries both the stored status and the read-time effective status
    (Overdue when an unpaid invoice is past due).
    """

    invoice_id: str = Field(..., description="Invoice document ID")
    invoice_number: str = Field(..., description="Invoice number")
    issue_date: date = Field(..., description="Issue date")
    due_date: date = Field(..., description="Due date")
    items: List[LineItemDTO] = Field(default_factory=list)
    status: str = Field(..., description="Stored status")
    effective_status: str = Field(..., description="Status with Overdue projected from the due date")
    currency: str
    vat_enabled: bool
    levies_enabled: bool
    covid_levy_enabled: bool
    vat_rate: Decimal
    effective_rate: Decimal = Field(..., description="Combined percentage of the enabled taxes")
    subtotal: Decimal
    vat_amount: Decimal
    levies_amount: Decimal
    covid_amount: Decimal
    total: Decimal
    client: ClientSnapshot
    business_info: Optional[BusinessSnapshot] = None
    terms_enabled: bool = False
    terms_text: Optional[str] = None
    created_at: int
    updated_at: int

    @classmethod
    def from_entity(cls, invoice: Invoice, today: Optional[date] = None) -> "InvoiceResponseDTO":
        totals = invoice.compute_totals()
        return cls(
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            issue_date=invoice.issue_date,
            due_date=invoice.due_date,
            items=[LineItemDTO(**item.model_dump()) for item in invoice.line_items],
            status=InvoiceStatus(invoice.status).value,
            effective_status=invoice.effective_status(today).value,
            currency=invoice.currency,
            vat_enabled=invoice.vat_enabled,
            levies_enabled=invoice.levies_enabled,
            covid_levy_enabled=invoice.covid_levy_enabled,
            vat_rate=invoice.vat_rate,
            effective_rate=invoice.effective_rate(),
            subtotal=totals.subtotal,
            vat_amount=totals.vat_amount,
            levies_amount=totals.levies_amount,
            covid_amount=totals.covid_amount,
            total=invoice.total,
            client=invoice.client_snapshot,
            business_info=invoice.business_snapshot,
            terms_enabled=invoice.terms_enabled,
            terms_text=invoice.terms_text,
            created_at=invoice.created_at,
            updated_at=invoice.updated_at,
        )


class ListInvoicesResponseDTO(BaseModel):
    invoices: List[InvoiceResponseDTO] = Field(default_factory=list)
    total: int = Field(..., description="Number of invoices returned")


class MarkPaidResponseDTO(BaseModel):
    """Result of the two-write mark-as-paid operation"""

    invoice: InvoiceResponseDTO
    payment: PaymentResponseDTO


class DeleteInvoiceResponseDTO(BaseModel):
    invoice_id: str
    deleted: bool = Field(..., description="False when the invoice did not exist")


class InvoicePdfResponseDTO(BaseModel):
    """Rendered invoice PDF"""

    invoice_id: str
    invoice_number: str
    filename: str
    pdf_base64: str = Field(..., description="PDF document, base64-encoded")
    generated_at: int = Field(..., description="Render time (epoch ms)")
