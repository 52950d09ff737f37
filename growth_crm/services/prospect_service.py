"""
Prospect Service - Business logic layer for Prospect operations.
Handles prospect CRUD for manual entry and edits.
"""

import logging
from typing import List
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ..repositories.prospect_repository import ProspectRepository
from ..repositories.interaction_repository import InteractionRepository
from ..models.prospect import Prospect
from ..schemas.prospect import ProspectCreate, ProspectUpdate

logger = logging.getLogger(__name__)


class ProspectService:
    """
    Service layer for prospect business logic.

    Status changes are plain edits: any status can be set from any other,
    including moving a converted or rejected prospect back into the pipeline.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = ProspectRepository(db)
        self.interactions = InteractionRepository(db)

    def create_prospect(self, prospect_data: ProspectCreate) -> Prospect:
        """Create a prospect from manual entry. No duplicate-email check is made here."""
        prospect = self.repository.create(obj_in=prospect_data.model_dump())
        logger.info(f"Created prospect {prospect.id}")
        return prospect

    def get_prospects(self) -> List[Prospect]:
        return self.repository.list_all()

    def get_prospect(self, prospect_id: str) -> Prospect:
        prospect = self.repository.get(prospect_id)
        if not prospect:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Prospect not found"
            )
        return prospect

    def update_prospect(self, prospect_id: str, prospect_data: ProspectUpdate) -> Prospect:
        """
        Apply a partial update to a prospect.

        Raises:
            HTTPException: If the prospect does not exist
        """
        update_dict = prospect_data.model_dump(exclude_unset=True)
        prospect = self.repository.update_by_id(prospect_id, update_dict)
        if prospect is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Prospect not found"
            )
        return prospect

    def delete_prospect(self, prospect_id: str) -> bool:
        """
        Delete a prospect together with the interactions logged against it.

        Returns:
            True if the prospect existed and was removed
        """
        if not self.repository.exists(prospect_id):
            return False
        removed = self.interactions.delete_by_prospect(prospect_id)
        deleted = self.repository.delete(id=prospect_id)
        logger.info(f"Deleted prospect {prospect_id} and {removed} interactions")
        return deleted
