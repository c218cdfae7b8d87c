"""SQLAlchemy Business Profile Repository Implementation"""

from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.business_profile_repository import BusinessProfileRepository
from src.domain.business_profile import BusinessProfile


class SqlAlchemyBusinessProfileRepository(BusinessProfileRepository):
    """SQLAlchemy implementation of BusinessProfileRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, account_id: str) -> Optional[BusinessProfile]:
        return await self.session.get(BusinessProfile, account_id)

    async def save(self, profile: BusinessProfile) -> BusinessProfile:
        """
        Insert or update the account's profile

        Args:
            profile: BusinessProfile entity

        Returns:
            Saved BusinessProfile
        """
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile
