"""
Interaction routes - API endpoint definitions only.
Delegates all logic to the InteractionController.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..controllers.interaction_controller import InteractionController
from ..schemas.interaction import InteractionCreate, InteractionResponse
from ..core.database import get_db


router = APIRouter()


@router.get(
    "",
    response_model=List[InteractionResponse],
    summary="Get all interactions",
    description="Every logged interaction, newest first"
)
async def get_interactions(db: Session = Depends(get_db)):
    controller = InteractionController(db)
    return await controller.get_interactions()


@router.post(
    "",
    response_model=InteractionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Log an interaction"
)
async def log_interaction(
    interaction_data: InteractionCreate,
    db: Session = Depends(get_db)
):
    """
    Log a call, email, meeting or note against a prospect.

    The prospect's status and priority are left untouched; update the
    prospect separately to move it through the pipeline.
    """
    controller = InteractionController(db)
    return await controller.log_interaction(interaction_data)
