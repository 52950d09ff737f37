from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..controllers.dashboard_controller import DashboardController
from ..core.database import get_db
from ..schemas.dashboard import DashboardMetrics, FollowUpBoard, PendingActionsResponse

router = APIRouter()


@router.get("/overview", response_model=DashboardMetrics)
async def get_dashboard_overview(db: Session = Depends(get_db)):
    controller = DashboardController(db)
    return await controller.get_overview()


@router.get("/follow-ups", response_model=FollowUpBoard)
async def get_follow_ups(db: Session = Depends(get_db)):
    controller = DashboardController(db)
    return await controller.get_follow_ups()


@router.get("/pending-actions", response_model=PendingActionsResponse)
async def get_pending_actions(db: Session = Depends(get_db)):
    controller = DashboardController(db)
    return await controller.get_pending_actions()
