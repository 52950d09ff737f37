"""
Interaction Controller - HTTP handling for the interaction log.
"""

from typing import List
from sqlalchemy.orm import Session

from ..services.interaction_service import InteractionService
from ..schemas.interaction import InteractionCreate, InteractionResponse


class InteractionController:

    def __init__(self, db: Session):
        self.db = db
        self.service = InteractionService(db)

    async def get_interactions(self) -> List[InteractionResponse]:
        return [InteractionResponse.model_validate(i) for i in self.service.get_interactions()]

    async def log_interaction(self, interaction_data: InteractionCreate) -> InteractionResponse:
        return InteractionResponse.model_validate(self.service.log_interaction(interaction_data))
