"""Business Profile Domain Entity

The issuer identity of an account. One profile per account, edited only
through account settings. Invoices embed a BusinessSnapshot taken at save
time so later edits never rewrite historical invoices.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import BigInteger, JSON
from src.domain.base import BaseModel, now_ms


class Preferences(SQLModel):
    """Invoice defaults chosen by the account"""

    default_currency: str = "GHS"
    default_tax_rate: Decimal = Decimal("15")
    invoice_prefix: str = "INV-"
    auto_save: bool = False


class BusinessSnapshot(SQLModel):
    """Business fields as embedded in an invoice at save time"""

    name: str = ""
    email: str = ""
    address: str = ""
    logo_url: Optional[str] = None
    tin: str = ""
    momo_number: Optional[str] = None
    momo_network: Optional[str] = None


class BusinessProfile(BaseModel, table=True):
    """
    Business Profile - Issuer identity and invoice preferences

    Domain Rules:
    - Exactly one profile per account (account_id is the primary key)
    - Preferences fall back to defaults when unset
    """

    __tablename__ = "business_profiles"

    account_id: str = Field(
        primary_key=True,
        description="Owning account (one profile per account)"
    )

    name: str = Field(default="", description="Business name")
    email: str = Field(default="", description="Business email")
    address: str = Field(default="", description="Postal or digital address")
    logo_url: Optional[str] = Field(default=None, description="Logo reference")
    tin: str = Field(default="", description="Tax identification number")
    momo_number: Optional[str] = Field(default=None, description="Mobile-money number")
    momo_network: Optional[str] = Field(default=None, description="Mobile-money network")

    preferences: Optional[dict] = Field(
        default=None,
        sa_column=Column(JSON, nullable=True),
        description="Invoice preferences (currency, tax rate, prefix, auto-save)"
    )

    created_at: int = Field(
        default_factory=now_ms,
        sa_column=Column(BigInteger, nullable=False),
        description="Creation time (epoch ms)"
    )

    updated_at: int = Field(
        default_factory=now_ms,
        sa_column=Column(BigInteger, nullable=False),
        description="Last update time (epoch ms)"
    )

    def get_preferences(self, defaults: Optional[Preferences] = None) -> Preferences:
        """Stored preferences laid over the given (or built-in) defaults"""
        merged = (defaults or Preferences()).model_dump()
        merged.update(self.preferences or {})
        return Preferences.model_validate(merged)

    def snapshot(self) -> BusinessSnapshot:
        return BusinessSnapshot(
            name=self.name,
            email=self.email,
            address=self.address,
            logo_url=self.logo_url,
            tin=self.tin or "",
            momo_number=self.momo_number,
            momo_network=self.momo_network,
        )
