from .invoice_repository import InvoiceRepository
from .client_repository import ClientRepository
from .payment_repository import PaymentRepository
from .business_profile_repository import BusinessProfileRepository

__all__ = [
    "InvoiceRepository",
    "ClientRepository",
    "PaymentRepository",
    "BusinessProfileRepository",
]
