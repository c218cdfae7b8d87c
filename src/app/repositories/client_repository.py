"""Client Repository Interface

Defines the contract for client roster persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.client import ClientRecord


class ClientRepository(ABC):
    """Repository interface for ClientRecord persistence"""

    @abstractmethod
    async def create(self, client: ClientRecord) -> ClientRecord:
        """
        Create a new client

        Args:
            client: ClientRecord entity to persist

        Returns:
            Created ClientRecord with its assigned ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, account_id: str, client_id: str) -> Optional[ClientRecord]:
        """
        Retrieve client by ID within an account

        Returns:
            ClientRecord if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_account(self, account_id: str) -> List[ClientRecord]:
        """
        List an account's clients, newest first
        """
        pass

    @abstractmethod
    async def update(self, client: ClientRecord) -> ClientRecord:
        """
        Persist changes to an existing client
        """
        pass

    @abstractmethod
    async def delete(self, account_id: str, client_id: str) -> bool:
        """
        Remove a client from the roster

        Returns:
            True if a record was removed, False if it did not exist
        """
        pass
