"""Data Transfer Objects for Business Profile Use Cases"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

from src.domain.business_profile import BusinessProfile, Preferences


class PreferencesDTO(BaseModel):
    default_currency: Optional[str] = None
    default_tax_rate: Optional[Decimal] = Field(default=None, ge=0, max_digits=5, decimal_places=2)
    invoice_prefix: Optional[str] = None
    auto_save: Optional[bool] = None


class UpdateBusinessProfileCommandDTO(BaseModel):
    """
    Command DTO for editing the business profile

    Unset fields keep their stored value. Preferences are merged key by key.
    """

    name: Optional[str] = Field(default=None, description="Business name")
    email: Optional[str] = Field(default=None, description="Business email")
    address: Optional[str] = Field(default=None, description="Postal or digital address")
    logo_url: Optional[str] = Field(default=None, description="Logo reference")
    tin: Optional[str] = Field(default=None, description="Tax identification number")
    momo_number: Optional[str] = Field(default=None, description="Mobile-money number")
    momo_network: Optional[str] = Field(default=None, description="Mobile-money network")
    preferences: Optional[PreferencesDTO] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Kofi Prints",
                "email": "hello@kofiprints.com",
                "address": "GA-123-4567",
                "tin": "C0012345678",
                "preferences": {"default_currency": "GHS", "default_tax_rate": 15, "invoice_prefix": "INV-"}
            }
        }


class BusinessProfileResponseDTO(BaseModel):
    account_id: str
    name: str
    email: str
    address: str
    logo_url: Optional[str] = None
    tin: str
    momo_number: Optional[str] = None
    momo_network: Optional[str] = None
    preferences: Preferences
    updated_at: int

    @classmethod
    def from_entity(
        cls, profile: BusinessProfile, defaults: Optional[Preferences] = None
    ) -> "BusinessProfileResponseDTO":
        return cls(
            account_id=profile.account_id,
            name=profile.name,
            email=profile.email,
            address=profile.address,
            logo_url=profile.logo_url,
            tin=profile.tin or "",
            momo_number=profile.momo_number,
            momo_network=profile.momo_network,
            preferences=profile.get_preferences(defaults),
            updated_at=profile.updated_at,
        )
