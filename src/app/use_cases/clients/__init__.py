"""Client roster use cases"""
from .create_client import CreateClient
from .update_client import UpdateClient
from .delete_client import DeleteClient
from .list_clients import ListClients
from .dtos import (
    CreateClientCommandDTO,
    UpdateClientCommandDTO,
    ClientResponseDTO,
    ListClientsResponseDTO,
    DeleteClientResponseDTO,
)

__all__ = [
    "CreateClient",
    "UpdateClient",
    "DeleteClient",
    "ListClients",
    "CreateClientCommandDTO",
    "UpdateClientCommandDTO",
    "ClientResponseDTO",
    "ListClientsResponseDTO",
    "DeleteClientResponseDTO",
]
