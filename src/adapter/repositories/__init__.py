from .invoice_repository import SqlAlchemyInvoiceRepository
from .client_repository import SqlAlchemyClientRepository
from .payment_repository import SqlAlchemyPaymentRepository
from .business_profile_repository import SqlAlchemyBusinessProfileRepository

__all__ = [
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyClientRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemyBusinessProfileRepository",
]
