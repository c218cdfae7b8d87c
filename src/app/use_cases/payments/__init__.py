"""Payment use cases"""
from .record_payment import RecordPayment
from .verify_payment import VerifyPayment
from .delete_payment import DeletePayment
from .list_payments import ListPayments
from .export_payments_csv import ExportPaymentsCsv
from .dtos import (
    RecordPaymentCommandDTO,
    PaymentResponseDTO,
    ListPaymentsResponseDTO,
    DeletePaymentResponseDTO,
)

__all__ = [
    "RecordPayment",
    "VerifyPayment",
    "DeletePayment",
    "ListPayments",
    "ExportPaymentsCsv",
    "RecordPaymentCommandDTO",
    "PaymentResponseDTO",
    "ListPaymentsResponseDTO",
    "DeletePaymentResponseDTO",
]
