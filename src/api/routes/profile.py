"""Business Profile API Routes"""

from typing import Optional
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.profile import (
    GetBusinessProfile,
    UpdateBusinessProfile,
    UpdateBusinessProfileCommandDTO,
    BusinessProfileResponseDTO,
)
from src.adapter.repositories import SqlAlchemyBusinessProfileRepository
from src.adapter.services import SqlAlchemyUnitOfWork
from src.depends import get_session, get_identity, get_default_preferences
from src.domain.business_profile import Preferences
from src.domain.identity import ActingIdentity
from src.api.error import ClientError, status_code_for

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=Optional[BusinessProfileResponseDTO])
async def get_business_profile(
    identity: ActingIdentity = Depends(get_identity),
    default_preferences: Preferences = Depends(get_default_preferences),
    session: AsyncSession = Depends(get_session),
):
    """Return the business profile, or null if it was never saved."""
    use_case = GetBusinessProfile(SqlAlchemyBusinessProfileRepository(session), default_preferences)
    result = await use_case.execute(identity.account_id)
    return result.value


@router.put("", response_model=BusinessProfileResponseDTO)
async def update_business_profile(
    request: UpdateBusinessProfileCommandDTO,
    identity: ActingIdentity = Depends(get_identity),
    default_preferences: Preferences = Depends(get_default_preferences),
    session: AsyncSession = Depends(get_session),
):
    """
    Save business profile fields and preferences.

    Invoices already saved keep the business details they were issued with.
    """
    use_case = UpdateBusinessProfile(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyBusinessProfileRepository(session),
        default_preferences,
    )
    result = await use_case.execute(identity.account_id, request)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value
