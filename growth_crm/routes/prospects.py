"""
Prospect API routes.
Clean endpoint definitions using the controller layer.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..controllers.prospect_controller import ProspectController
from ..schemas.prospect import ProspectCreate, ProspectUpdate, ProspectResponse
from ..schemas.interaction import InteractionResponse
from ..core.database import get_db


router = APIRouter()


@router.get(
    "",
    response_model=List[ProspectResponse],
    summary="Get all prospects",
    description="All prospects, newest first"
)
async def get_prospects(db: Session = Depends(get_db)):
    controller = ProspectController(db)
    return await controller.get_prospects()


@router.post(
    "",
    response_model=ProspectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new prospect",
    description="Manual prospect entry"
)
async def create_prospect(
    prospect_data: ProspectCreate,
    db: Session = Depends(get_db)
):
    """
    Create a prospect.

    - **status**: new, contacted, qualified, meeting_scheduled, proposal_sent, converted, rejected
    - **priority**: low, medium, high
    """
    controller = ProspectController(db)
    return await controller.create_prospect(prospect_data)


@router.get(
    "/{prospect_id}",
    response_model=ProspectResponse,
    summary="Get prospect by ID"
)
async def get_prospect_by_id(prospect_id: str, db: Session = Depends(get_db)):
    controller = ProspectController(db)
    return await controller.get_prospect(prospect_id)


@router.put(
    "/{prospect_id}",
    response_model=ProspectResponse,
    summary="Update a prospect",
    description="Partial update; any status may be set from any other"
)
async def update_prospect(
    prospect_id: str,
    prospect_data: ProspectUpdate,
    db: Session = Depends(get_db)
):
    controller = ProspectController(db)
    return await controller.update_prospect(prospect_id, prospect_data)


@router.get(
    "/{prospect_id}/interactions",
    response_model=List[InteractionResponse],
    summary="Get interactions for a prospect",
    description="Interactions logged against one prospect, newest first"
)
async def get_prospect_interactions(prospect_id: str, db: Session = Depends(get_db)):
    controller = ProspectController(db)
    return await controller.get_prospect_interactions(prospect_id)
