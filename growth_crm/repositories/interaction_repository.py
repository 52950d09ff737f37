"""
Interaction repository. Interactions are appended against a prospect.
"""

from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import desc

from ..models.interaction import Interaction
from .base_repository import BaseRepository


class InteractionRepository(BaseRepository[Interaction]):

    def __init__(self, db: Session):
        super().__init__(Interaction, db)

    def get_by_prospect(self, prospect_id: str) -> List[Interaction]:
        """Interactions logged against one prospect, newest first."""
        return self.db.query(Interaction)\
            .filter(Interaction.prospect_id == prospect_id)\
            .order_by(desc(Interaction.created_at))\
            .all()

    def get_with_next_action(self) -> List[Interaction]:
        return self.db.query(Interaction)\
            .filter(Interaction.next_action.isnot(None))\
            .order_by(desc(Interaction.created_at))\
            .all()

    def delete_by_prospect(self, prospect_id: str) -> int:
        """Remove every interaction for a prospect. Returns the number removed."""
        removed = self.db.query(Interaction)\
            .filter(Interaction.prospect_id == prospect_id)\
            .delete(synchronize_session=False)
        self.db.commit()
        return removed
