"""UpdateBusinessProfile Use Case"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.business_profile_repository import BusinessProfileRepository
from src.domain.base import now_ms
from src.domain.business_profile import BusinessProfile, Preferences
from .dtos import UpdateBusinessProfileCommandDTO, BusinessProfileResponseDTO

logger = logging.getLogger(__name__)


class UpdateBusinessProfile:
    """
    Use Case: Edit the business profile from account settings

    Business Rules:
    1. The profile is created on first save
    2. Only fields present in the command change
    3. Already-saved invoices keep their own business snapshot
    4. Only preference keys the user set are stored; the rest follow the
       installation defaults

    Flow:
    1. Load or create profile
    2. Merge fields and preferences
    3. Save and commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        profile_repo: BusinessProfileRepository,
        default_preferences: Optional[Preferences] = None,
    ):
        self.uow = uow
        self.profile_repo = profile_repo
        self.default_preferences = default_preferences or Preferences()

    async def execute(
        self, account_id: str, command: UpdateBusinessProfileCommandDTO
    ) -> Result[BusinessProfileResponseDTO]:
        patch = command.model_dump(exclude_unset=True, exclude={"preferences"})

        try:
            # Step 1: Load or create
            profile = await self.profile_repo.get(account_id)
            if profile is None:
                profile = BusinessProfile(account_id=account_id)

            # Step 2: Merge
            for field, value in patch.items():
                setattr(profile, field, value)

            if command.preferences is not None:
                stored = dict(profile.preferences or {})
                stored.update(
                    command.preferences.model_dump(mode="json", exclude_unset=True, exclude_none=True)
                )
                profile.preferences = stored

            profile.updated_at = now_ms()

            # Step 3: Persist
            saved_profile = await self.profile_repo.save(profile)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update business profile for account {account_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_PROFILE_FAILED",
                    message="Failed to update business profile",
                    reason=str(e),
                )
            )

        logger.info(f"Updated business profile for account {account_id}")
        return Return.ok(BusinessProfileResponseDTO.from_entity(saved_profile, self.default_preferences))
