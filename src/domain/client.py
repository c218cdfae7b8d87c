"""Client Domain Entity

Billing counterparties kept in the account's client roster.
Invoices embed a ClientSnapshot copied at save time, never a live reference.
"""

from enum import Enum
from typing import Optional
from sqlmodel import SQLModel, Field, Column, Index
from sqlalchemy import BigInteger, String
from src.domain.base import BaseModel, generate_uuid, now_ms

NEW_CLIENT_ID = "new"


class ClientStatus(str, Enum):
    """Client roster status"""
    ACTIVE = "Active"
    PENDING = "Pending"


class MomoNetwork(str, Enum):
    """Mobile-money networks"""
    MTN = "MTN"
    TELECEL = "Telecel"
    AT = "AT"


class ClientRecord(BaseModel, table=True):
    """
    Client Record - A billing counterparty in the roster

    Domain Rules:
    - Scoped to one account (account_id)
    - New clients start Active with invoices_count = 0
    - Never hard-deleted from invoices that reference them (invoices hold snapshots)
    """

    __tablename__ = "clients"
    __table_args__ = (
        Index("ix_clients_account_created", "account_id", "created_at"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Document identifier"
    )

    account_id: str = Field(
        index=True,
        description="Owning account"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Client name"
    )

    email: str = Field(
        default="",
        description="Client email address"
    )

    momo_number: str = Field(
        default="",
        description="Mobile-money subscriber number"
    )

    momo_network: MomoNetwork = Field(
        default=MomoNetwork.MTN,
        description="Mobile-money network"
    )

    location: Optional[str] = Field(
        default=None,
        description="Free-text location"
    )

    invoices_count: int = Field(
        default=0,
        description="Denormalized count of invoices issued to this client"
    )

    status: ClientStatus = Field(
        default=ClientStatus.ACTIVE,
        description="Roster status (Active, Pending)"
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

    def snapshot(self) -> "ClientSnapshot":
        return ClientSnapshot(
            id=self.id,
            name=self.name,
            email=self.email,
            momo_number=self.momo_number,
            momo_network=self.momo_network.value if isinstance(self.momo_network, MomoNetwork) else self.momo_network,
            location=self.location,
            invoices_count=self.invoices_count,
            status=self.status.value if isinstance(self.status, ClientStatus) else self.status,
        )


class ClientSnapshot(SQLModel):
    """Client fields as embedded in an invoice at save time"""

    id: str = NEW_CLIENT_ID
    name: str = ""
    email: str = ""
    momo_number: str = ""
    momo_network: Optional[str] = None
    location: Optional[str] = None
    invoices_count: int = 0
    status: str = ClientStatus.ACTIVE.value
