"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
All operations are scoped to an account namespace.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Each write is atomic at single-document granularity; there are no
    multi-document transactions.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist (account_id already set)

        Returns:
            Created Invoice with its assigned ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, account_id: str, invoice_id: str) -> Optional[Invoice]:
        """
        Retrieve invoice by ID within an account

        Args:
            account_id: Owning account
            invoice_id: Invoice document ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_account(self, account_id: str) -> List[Invoice]:
        """
        List an account's invoices, newest first

        Args:
            account_id: Owning account

        Returns:
            List of invoices ordered by created_at descending
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Persist changes to an existing invoice

        Args:
            invoice: Invoice entity with updated values (timestamps already stamped)

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def delete(self, account_id: str, invoice_id: str) -> bool:
        """
        Remove an invoice

        Args:
            account_id: Owning account
            invoice_id: Invoice document ID

        Returns:
            True if a record was removed, False if it did not exist
        """
        pass

    @abstractmethod
    async def generate_invoice_number(self, account_id: str, prefix: str, year: int) -> str:
        """
        Generate the next invoice number for an account

        Format: {prefix}{year}-{NNN} (e.g., INV-2026-001)

        Args:
            account_id: Owning account
            prefix: Invoice prefix from preferences
            year: Issue year

        Returns:
            Invoice number string
        """
        pass
