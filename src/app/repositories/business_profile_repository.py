"""Business Profile Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.business_profile import BusinessProfile


class BusinessProfileRepository(ABC):
    """Repository interface for the per-account BusinessProfile"""

    @abstractmethod
    async def get(self, account_id: str) -> Optional[BusinessProfile]:
        """
        Retrieve the account's profile

        Returns:
            BusinessProfile if one has been saved, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, profile: BusinessProfile) -> BusinessProfile:
        """
        Create or replace the account's profile

        Args:
            profile: BusinessProfile entity (account_id is the key)

        Returns:
            Saved BusinessProfile
        """
        pass
