from typing import List

from .base import CamelModel
from .prospect import ProspectResponse
from .interaction import InteractionResponse


class DashboardMetrics(CamelModel):
    """Headline counts for the admin dashboard"""
    total_submissions: int = 0
    new_submissions: int = 0  # Not yet a prospect or a client
    active_prospects: int = 0
    high_priority_prospects: int = 0
    qualified_prospects: int = 0
    active_clients: int = 0
    monthly_revenue: float = 0.0


class OverdueFollowUp(CamelModel):
    prospect: ProspectResponse
    days_overdue: int


class FollowUpBoard(CamelModel):
    overdue: List[OverdueFollowUp] = []
    due_today: List[ProspectResponse] = []
    upcoming_this_week: List[ProspectResponse] = []


class PendingActionsResponse(CamelModel):
    count: int = 0
    interactions: List[InteractionResponse] = []
