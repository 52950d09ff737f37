"""
Prospect Controller - HTTP request/response handling for Prospect endpoints.
"""

from typing import List
from sqlalchemy.orm import Session

from ..services.prospect_service import ProspectService
from ..services.interaction_service import InteractionService
from ..schemas.prospect import ProspectCreate, ProspectUpdate, ProspectResponse
from ..schemas.interaction import InteractionResponse


class ProspectController:
    """Controller for handling prospect HTTP requests."""

    def __init__(self, db: Session):
        self.db = db
        self.service = ProspectService(db)

    async def get_prospects(self) -> List[ProspectResponse]:
        return [ProspectResponse.model_validate(p) for p in self.service.get_prospects()]

    async def get_prospect(self, prospect_id: str) -> ProspectResponse:
        return ProspectResponse.model_validate(self.service.get_prospect(prospect_id))

    async def create_prospect(self, prospect_data: ProspectCreate) -> ProspectResponse:
        return ProspectResponse.model_validate(self.service.create_prospect(prospect_data))

    async def update_prospect(self, prospect_id: str, prospect_data: ProspectUpdate) -> ProspectResponse:
        return ProspectResponse.model_validate(
            self.service.update_prospect(prospect_id, prospect_data)
        )

    async def get_prospect_interactions(self, prospect_id: str) -> List[InteractionResponse]:
        interactions = InteractionService(self.db).get_prospect_interactions(prospect_id)
        return [InteractionResponse.model_validate(i) for i in interactions]
