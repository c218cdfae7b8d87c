from .unit_of_work import UnitOfWork
from .counter_store import CounterStore
from .quota_gate import QuotaGate, GUEST_INVOICE_COUNT_KEY, GUEST_EXPORT_COUNT_KEY
from .csv_service import CsvService
from .pdf_service import PdfService, InvoiceDocument

__all__ = [
    "UnitOfWork",
    "CounterStore",
    "QuotaGate",
    "GUEST_INVOICE_COUNT_KEY",
    "GUEST_EXPORT_COUNT_KEY",
    "CsvService",
    "PdfService",
    "InvoiceDocument",
]
