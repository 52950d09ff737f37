"""
Client Controller - HTTP handling for the client roster.
"""

from typing import List
from sqlalchemy.orm import Session

from ..services.client_service import ClientService
from ..schemas.client import ClientCreate, ClientUpdate, ClientResponse


class ClientController:

    def __init__(self, db: Session):
        self.db = db
        self.service = ClientService(db)

    async def get_clients(self) -> List[ClientResponse]:
        return [ClientResponse.model_validate(c) for c in self.service.get_clients()]

    async def get_client(self, client_id: str) -> ClientResponse:
        return ClientResponse.model_validate(self.service.get_client(client_id))

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        return ClientResponse.model_validate(self.service.create_client(client_data))

    async def update_client(self, client_id: str, client_data: ClientUpdate) -> ClientResponse:
        return ClientResponse.model_validate(self.service.update_client(client_id, client_data))

    async def delete_client(self, client_id: str) -> dict:
        self.service.delete_client(client_id)
        return {"success": True, "message": "Client deleted successfully"}
