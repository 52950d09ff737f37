"""
Client Service - CRUD for the client roster.
"""

import logging
from typing import List
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ..repositories.client_repository import ClientRepository
from ..models.client import Client
from ..schemas.client import ClientCreate, ClientUpdate

logger = logging.getLogger(__name__)


class ClientService:
    """Service layer for clients. Deletes are permanent."""

    def __init__(self, db: Session):
        self.db = db
        self.repository = ClientRepository(db)

    def create_client(self, client_data: ClientCreate) -> Client:
        client = self.repository.create(obj_in=client_data.model_dump())
        logger.info(f"Created client {client.id}")
        return client

    def get_clients(self) -> List[Client]:
        return self.repository.list_all()

    def get_client(self, client_id: str) -> Client:
        client = self.repository.get(client_id)
        if not client:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Client not found"
            )
        return client

    def update_client(self, client_id: str, client_data: ClientUpdate) -> Client:
        """
        Apply a partial update to a client.

        Raises:
            HTTPException: If the client does not exist (nothing is changed)
        """
        client = self.repository.update_by_id(
            client_id, client_data.model_dump(exclude_unset=True)
        )
        if client is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Client not found"
            )
        return client

    def delete_client(self, client_id: str) -> None:
        if not self.repository.delete(id=client_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Client not found"
            )
        logger.info(f"Deleted client {client_id}")
