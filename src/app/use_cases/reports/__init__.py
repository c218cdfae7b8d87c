"""Reporting use cases"""
from .summarize_invoices import SummarizeInvoices
from .summarize_payments import SummarizePayments
from .dtos import InvoiceSummaryDTO, PaymentSummaryDTO, MonthlyRevenueDTO

__all__ = [
    "SummarizeInvoices",
    "SummarizePayments",
    "InvoiceSummaryDTO",
    "PaymentSummaryDTO",
    "MonthlyRevenueDTO",
]
