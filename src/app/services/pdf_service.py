"""PDF Rendering Service Interface

The core hands over display-ready invoice data and receives opaque PDF
bytes. Amounts in InvoiceDocument are already formatted for display.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from pydantic import BaseModel, Field


class DocumentLine(BaseModel):
    description: str
    quantity: int
    unit_price: str
    line_total: str


class DocumentCharge(BaseModel):
    label: str
    amount: str


class DocumentParty(BaseModel):
    name: str
    lines: List[str] = Field(default_factory=list)


class InvoiceDocument(BaseModel):
    """Display-ready invoice view"""

    invoice_number: str
    status: str
    issue_date: str
    due_date: str
    issuer: DocumentParty
    bill_to: DocumentParty
    lines: List[DocumentLine] = Field(default_factory=list)
    subtotal: str
    charges: List[DocumentCharge] = Field(default_factory=list)
    total: str
    terms_text: Optional[str] = None


class PdfService(ABC):
    """
    Service interface for PDF generation
    """

    @abstractmethod
    def render_invoice(self, document: InvoiceDocument) -> bytes:
        """
        Render an invoice document to PDF

        Args:
            document: Display-ready invoice view

        Returns:
            PDF document as bytes
        """
        pass
