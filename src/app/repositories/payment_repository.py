"""Payment Repository Interface

Defines the contract for payment record persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.payment import PaymentRecord


class PaymentRepository(ABC):
    """Repository interface for PaymentRecord persistence"""

    @abstractmethod
    async def create(self, payment: PaymentRecord) -> PaymentRecord:
        """
        Create a new payment record

        Args:
            payment: PaymentRecord entity to persist

        Returns:
            Created PaymentRecord with its assigned ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, account_id: str, payment_id: str) -> Optional[PaymentRecord]:
        """
        Retrieve payment by ID within an account

        Returns:
            PaymentRecord if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_account(
        self, account_id: str, client_name: Optional[str] = None
    ) -> List[PaymentRecord]:
        """
        List an account's payments, most recent payment date first

        Args:
            account_id: Owning account
            client_name: Optional exact match on the paying client's name
        """
        pass

    @abstractmethod
    async def update(self, payment: PaymentRecord) -> PaymentRecord:
        """
        Persist changes to an existing payment
        """
        pass

    @abstractmethod
    async def delete(self, account_id: str, payment_id: str) -> bool:
        """
        Remove a payment record (the referenced invoice is not touched)

        Returns:
            True if a record was removed, False if it did not exist
        """
        pass
