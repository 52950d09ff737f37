"""
Interaction service.

Logging an interaction records what happened and what should happen next.
It never changes the prospect's status or priority; those stay manual edits.
"""

import logging
from typing import List
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ..repositories.interaction_repository import InteractionRepository
from ..repositories.prospect_repository import ProspectRepository
from ..models.interaction import Interaction
from ..schemas.interaction import InteractionCreate, InteractionUpdate

logger = logging.getLogger(__name__)


class InteractionService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = InteractionRepository(db)
        self.prospects = ProspectRepository(db)

    def _require_prospect(self, prospect_id: str) -> None:
        if not self.prospects.exists(prospect_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Prospect not found"
            )

    def log_interaction(self, interaction_data: InteractionCreate) -> Interaction:
        """
        Append an interaction to a prospect's history.

        Raises:
            HTTPException: If the referenced prospect does not exist
        """
        self._require_prospect(interaction_data.prospect_id)
        interaction = self.repository.create(obj_in=interaction_data.model_dump())
        logger.info(
            f"Logged {interaction.type.value} interaction {interaction.id} "
            f"for prospect {interaction.prospect_id}"
        )
        return interaction

    def get_interactions(self) -> List[Interaction]:
        return self.repository.list_all()

    def get_prospect_interactions(self, prospect_id: str) -> List[Interaction]:
        self._require_prospect(prospect_id)
        return self.repository.get_by_prospect(prospect_id)

    def update_interaction(self, interaction_id: str, interaction_data: InteractionUpdate) -> Interaction:
        interaction = self.repository.update_by_id(
            interaction_id, interaction_data.model_dump(exclude_unset=True)
        )
        if interaction is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Interaction not found"
            )
        return interaction

    def delete_interaction(self, interaction_id: str) -> bool:
        return self.repository.delete(id=interaction_id)
