"""
Email Controller - connectivity check for the notification channel.
"""

import logging
from datetime import datetime
from uuid import uuid4

from ..services.notification_service import NotificationService
from ..schemas.submission import ContactSubmissionResponse

logger = logging.getLogger(__name__)


class EmailController:

    def __init__(self, notifier: NotificationService):
        self.notifier = notifier

    def send_test_email(self, now: datetime) -> dict:
        """
        Verify the SMTP connection, then send a notification for a synthetic
        submission that is never stored.
        """
        if not self.notifier.verify_connection():
            return {
                "success": False,
                "message": "Email connection failed. Check the SMTP credentials.",
            }

        test_submission = ContactSubmissionResponse(
            id=f"test-{uuid4()}",
            name="Test User",
            email="test@example.com",
            message="This is a test consultation request to verify email notifications.",
            package="startup",
            created_at=now,
        )
        if self.notifier.send_consultation_notification(test_submission):
            return {"success": True, "message": "Test email sent successfully."}
        return {"success": False, "message": "Connection verified but the test email could not be sent."}
