"""
Client API routes.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..controllers.client_controller import ClientController
from ..schemas.client import ClientCreate, ClientUpdate, ClientResponse
from ..core.database import get_db


router = APIRouter()


@router.get("", response_model=List[ClientResponse], summary="Get all clients")
async def get_clients(db: Session = Depends(get_db)):
    controller = ClientController(db)
    return await controller.get_clients()


@router.post(
    "",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new client"
)
async def create_client(client_data: ClientCreate, db: Session = Depends(get_db)):
    controller = ClientController(db)
    return await controller.create_client(client_data)


@router.get("/{client_id}", response_model=ClientResponse, summary="Get client by ID")
async def get_client(client_id: str, db: Session = Depends(get_db)):
    controller = ClientController(db)
    return await controller.get_client(client_id)


@router.put("/{client_id}", response_model=ClientResponse, summary="Update a client")
async def update_client(
    client_id: str,
    client_data: ClientUpdate,
    db: Session = Depends(get_db)
):
    controller = ClientController(db)
    return await controller.update_client(client_id, client_data)


@router.delete("/{client_id}", summary="Delete a client")
async def delete_client(client_id: str, db: Session = Depends(get_db)):
    controller = ClientController(db)
    return await controller.delete_client(client_id)
