"""Data Transfer Objects for Report Use Cases"""

from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field


class MonthlyRevenueDTO(BaseModel):
    month: str = Field(..., description="Short month name (Jan..Dec)")
    revenue: Decimal = Field(default=Decimal("0"))


class InvoiceSummaryDTO(BaseModel):
    """Dashboard figures derived from the account's invoices"""

    total_revenue: Decimal = Field(..., description="Sum of Paid invoice totals")
    outstanding: Decimal = Field(..., description="Sum of totals neither Paid nor Draft")
    total_invoices: int
    draft_count: int
    draft_value: Decimal
    overdue_count: int = Field(..., description="Unpaid invoices past their due date")
    year: int = Field(..., description="Year covered by monthly_revenue")
    monthly_revenue: List[MonthlyRevenueDTO] = Field(default_factory=list)


class PaymentSummaryDTO(BaseModel):
    """Figures derived from the account's payment records"""

    total_received: Decimal = Field(..., description="Sum of Verified payments")
    pending_count: int
    pending_value: Decimal
    total_payments: int
