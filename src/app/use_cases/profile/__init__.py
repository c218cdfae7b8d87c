"""Business profile use cases"""
from .get_business_profile import GetBusinessProfile
from .update_business_profile import UpdateBusinessProfile
from .dtos import (
    PreferencesDTO,
    UpdateBusinessProfileCommandDTO,
    BusinessProfileResponseDTO,
)

__all__ = [
    "GetBusinessProfile",
    "UpdateBusinessProfile",
    "PreferencesDTO",
    "UpdateBusinessProfileCommandDTO",
    "BusinessProfileResponseDTO",
]
