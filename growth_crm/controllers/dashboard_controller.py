"""
Dashboard Controller - read-only triage views.
"""

from sqlalchemy.orm import Session

from ..services.dashboard_service import DashboardService
from ..schemas.dashboard import (
    DashboardMetrics, FollowUpBoard, PendingActionsResponse,
)


class DashboardController:

    def __init__(self, db: Session):
        self.db = db
        self.service = DashboardService(db)

    async def get_overview(self) -> DashboardMetrics:
        return DashboardMetrics(**self.service.get_metrics())

    async def get_follow_ups(self) -> FollowUpBoard:
        return FollowUpBoard.model_validate(
            self.service.get_follow_up_board(), from_attributes=True
        )

    async def get_pending_actions(self) -> PendingActionsResponse:
        interactions = self.service.get_pending_actions()
        return PendingActionsResponse.model_validate({
            "count": len(interactions),
            "interactions": interactions,
        }, from_attributes=True)
