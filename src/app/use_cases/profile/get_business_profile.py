"""Get Business Profile Use Case"""

from typing import Optional
from libs.result import Result, Return
from src.domain.business_profile import Preferences
from src.app.repositories.business_profile_repository import BusinessProfileRepository
from .dtos import BusinessProfileResponseDTO


class GetBusinessProfile:
    """Use case: Read the account's business profile (None if never saved)"""

    def __init__(
        self,
        profile_repo: BusinessProfileRepository,
        default_preferences: Optional[Preferences] = None,
    ):
        self.profile_repo = profile_repo
        self.default_preferences = default_preferences

    async def execute(self, account_id: str) -> Result[Optional[BusinessProfileResponseDTO]]:
        profile = await self.profile_repo.get(account_id)
        if profile is None:
            return Return.ok(None)
        return Return.ok(BusinessProfileResponseDTO.from_entity(profile, self.default_preferences))
