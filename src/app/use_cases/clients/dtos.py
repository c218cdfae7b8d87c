"""Data Transfer Objects for Client Use Cases"""

from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.client import ClientRecord, ClientStatus, MomoNetwork


class CreateClientCommandDTO(BaseModel):
    """
    Command DTO for adding a client to the roster
    """

    name: str = Field(..., description="Client name")
    email: str = Field(default="", description="Client email")
    momo_number: str = Field(default="", description="Mobile-money number")
    momo_network: MomoNetwork = Field(default=MomoNetwork.MTN, description="Mobile-money network")
    location: Optional[str] = Field(default=None, description="Free-text location")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Ama Mensah",
                "email": "ama@example.com",
                "momo_number": "0241234567",
                "momo_network": "MTN",
                "location": "Accra"
            }
        }


class UpdateClientCommandDTO(BaseModel):
    """Only fields explicitly set are applied"""

    name: Optional[str] = None
    email: Optional[str] = None
    momo_number: Optional[str] = None
    momo_network: Optional[MomoNetwork] = None
    location: Optional[str] = None
    status: Optional[ClientStatus] = None


class ClientResponseDTO(BaseModel):
    client_id: str
    name: str
    email: str
    momo_number: str
    momo_network: str
    location: Optional[str] = None
    invoices_count: int
    status: str
    created_at: int
    updated_at: int

    @classmethod
    def from_entity(cls, client: ClientRecord) -> "ClientResponseDTO":
        return cls(
            client_id=client.id,
            name=client.name,
            email=client.email,
            momo_number=client.momo_number,
            momo_network=MomoNetwork(client.momo_network).value,
            location=client.location,
            invoices_count=client.invoices_count,
            status=ClientStatus(client.status).value,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )


class ListClientsResponseDTO(BaseModel):
    clients: List[ClientResponseDTO] = Field(default_factory=list)
    total: int


class DeleteClientResponseDTO(BaseModel):
    client_id: str
    deleted: bool
