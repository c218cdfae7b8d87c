"""Line Item Value Object

An entry on an invoice. Line items have no identity outside the invoice
that embeds them; ``id`` is only a local handle for list editing.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import SQLModel, Field


class LineItem(SQLModel):
    """
    Line Item - description, quantity and unit price

    Domain Rules:
    - line_total = quantity * price, always recomputed, never stored
    - Negative quantity or price is rejected by the tax engine and at save time
    """

    id: Optional[str] = Field(
        default=None,
        description="Local identifier for list management (not persisted identity)"
    )

    description: str = Field(
        default="",
        description="Free-text description of the goods or service"
    )

    quantity: int = Field(
        default=1,
        description="Number of units (non-negative integer)"
    )

    price: Decimal = Field(
        default=Decimal("0"),
        description="Unit price (non-negative decimal)"
    )

    @property
    def line_total(self) -> Decimal:
        return Decimal(self.quantity) * self.price
