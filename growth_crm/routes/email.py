"""
Email connectivity route.
"""

from fastapi import APIRouter, Depends

from ..controllers.email_controller import EmailController
from ..core.database import RecordStore, get_store
from ..core.dependencies import get_notifier
from ..services.notification_service import NotificationService

router = APIRouter()


@router.post("/test-email", summary="Send a test notification email")
def send_test_email(
    notifier: NotificationService = Depends(get_notifier),
    store: RecordStore = Depends(get_store)
):
    """
    Check the SMTP connection and send a notification for a synthetic
    submission. Runs synchronously so the caller sees the real outcome.
    """
    controller = EmailController(notifier)
    return controller.send_test_email(store.now())
