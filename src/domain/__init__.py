from .base import BaseModel, generate_uuid, now_ms
from .line_item import LineItem
from .client import ClientRecord, ClientSnapshot, ClientStatus, MomoNetwork, NEW_CLIENT_ID
from .business_profile import BusinessProfile, BusinessSnapshot, Preferences
from .invoice import Invoice, InvoiceStatus
from .payment import PaymentRecord, PaymentStatus
from .identity import ActingIdentity
from .tax import InvoiceTotals, InvalidLineItemError, compute_totals

__all__ = [
    "BaseModel",
    "generate_uuid",
    "now_ms",
    "LineItem",
    "ClientRecord",
    "ClientSnapshot",
    "ClientStatus",
    "MomoNetwork",
    "NEW_CLIENT_ID",
    "BusinessProfile",
    "BusinessSnapshot",
    "Preferences",
    "Invoice",
    "InvoiceStatus",
    "PaymentRecord",
    "PaymentStatus",
    "ActingIdentity",
    "InvoiceTotals",
    "InvalidLineItemError",
    "compute_totals",
]
