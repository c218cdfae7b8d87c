"""Invoicing use cases"""
from .create_invoice import CreateInvoice, GUEST_INVOICE_LIMIT_REACHED
from .update_invoice import UpdateInvoice
from .mark_invoice_paid import MarkInvoicePaid
from .delete_invoice import DeleteInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .generate_invoice_pdf import GenerateInvoicePdf, GUEST_EXPORT_LIMIT_REACHED
from .export_invoices_csv import ExportInvoicesCsv
from .validation import VALIDATION_ERROR_CODES
from .dtos import (
    LineItemDTO,
    ClientDetailsDTO,
    BusinessInfoDTO,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    InvoiceResponseDTO,
    ListInvoicesResponseDTO,
    MarkPaidResponseDTO,
    DeleteInvoiceResponseDTO,
    InvoicePdfResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "UpdateInvoice",
    "MarkInvoicePaid",
    "DeleteInvoice",
    "GetInvoice",
    "ListInvoices",
    "GenerateInvoicePdf",
    "ExportInvoicesCsv",
    "GUEST_INVOICE_LIMIT_REACHED",
    "GUEST_EXPORT_LIMIT_REACHED",
    "VALIDATION_ERROR_CODES",
    "LineItemDTO",
    "ClientDetailsDTO",
    "BusinessInfoDTO",
    "CreateInvoiceCommandDTO",
    "UpdateInvoiceCommandDTO",
    "InvoiceResponseDTO",
    "ListInvoicesResponseDTO",
    "MarkPaidResponseDTO",
    "DeleteInvoiceResponseDTO",
    "InvoicePdfResponseDTO",
]
