"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations. Every query is scoped to
    the owning account.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice
        """
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, account_id: str, invoice_id: str) -> Optional[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.account_id == account_id)
            .where(Invoice.id == invoice_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_account(self, account_id: str) -> List[Invoice]:
        """
        Retrieve an account's invoices

        Args:
            account_id: Owning account

        Returns:
            List of invoices, newest first
        """
        statement = (
            select(Invoice)
            .where(Invoice.account_id == account_id)
            .order_by(Invoice.created_at.desc())
        )

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def delete(self, account_id: str, invoice_id: str) -> bool:
        invoice = await self.get_by_id(account_id, invoice_id)
        if invoice is None:
            return False
        await self.session.delete(invoice)
        await self.session.flush()
        return True

    async def generate_invoice_number(self, account_id: str, prefix: str, year: int) -> str:
        """
        Generate the next invoice number for an account

        Format: {prefix}{year}-{NNN} (e.g., INV-2026-001)

        Numbers the user edited into another shape are ignored when looking
        for the highest sequence.

        Returns:
            Invoice number string
        """
        series = f"{prefix}{year}-"

        statement = (
            select(Invoice.invoice_number)
            .where(Invoice.account_id == account_id)
            .where(Invoice.invoice_number.like(f"{series}%"))
        )
        result = await self.session.execute(statement)

        highest = 0
        for number in result.scalars().all():
            suffix = number[len(series):]
            if suffix.isdigit():
                highest = max(highest, int(suffix))

        return f"{series}{highest + 1:03d}"
