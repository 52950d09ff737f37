"""
Consultation notifications.

NotificationService composes the "new consultation request" email and hands
it to the SMTP transport. NotificationDispatcher runs those sends on a
background worker: callers get control back immediately and only the log
ever sees the outcome.
"""

import html
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from ..schemas.submission import ContactSubmissionResponse
from .smtp_service import SMTPService

logger = logging.getLogger(__name__)

NO_PACKAGE_TEXT = "No specific package mentioned"
NEXT_STEPS_TEXT = (
    "Review this submission in your admin dashboard and follow up with the "
    "client within 24 hours."
)


class NotificationService:
    """Builds and sends consultation notifications to the business inbox."""

    def __init__(self, mailer: SMTPService, recipient: str):
        self.mailer = mailer
        self.recipient = recipient

    @staticmethod
    def build_subject(submission: ContactSubmissionResponse) -> str:
        return f"New Consultation Request from {submission.name}"

    @staticmethod
    def build_text(submission: ContactSubmissionResponse) -> str:
        submitted = submission.created_at.strftime("%d/%m/%Y, %H:%M:%S")
        return (
            "New Consultation Request\n\n"
            "Client Information:\n"
            f"Name: {submission.name}\n"
            f"Email: {submission.email}\n"
            f"Package Interest: {submission.package or NO_PACKAGE_TEXT}\n"
            f"Submitted: {submitted}\n\n"
            "Message:\n"
            f"{submission.message}\n\n"
            f"Next Steps: {NEXT_STEPS_TEXT}\n"
        )

    @staticmethod
    def build_html(submission: ContactSubmissionResponse) -> str:
        submitted = submission.created_at.strftime("%A, %d %B %Y at %H:%M")
        name = html.escape(submission.name)
        email = html.escape(submission.email)
        package = html.escape(submission.package or NO_PACKAGE_TEXT)
        message = html.escape(submission.message)
        return f"""
      <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h2 style="color: #2563eb; border-bottom: 2px solid #e5e7eb; padding-bottom: 10px;">
          New Consultation Request
        </h2>
        <div style="background-color: #f9fafb; padding: 20px; border-radius: 8px; margin: 20px 0;">
          <h3 style="margin-top: 0; color: #374151;">Client Information</h3>
          <p><strong>Name:</strong> {name}</p>
          <p><strong>Email:</strong> <a href="mailto:{email}">{email}</a></p>
          <p><strong>Package Interest:</strong> {package}</p>
          <p><strong>Submitted:</strong> {submitted}</p>
        </div>
        <div style="background-color: #ffffff; padding: 20px; border: 1px solid #e5e7eb; border-radius: 8px;">
          <h3 style="margin-top: 0; color: #374151;">Message</h3>
          <p style="line-height: 1.6; white-space: pre-wrap;">{message}</p>
        </div>
        <div style="margin-top: 30px; padding: 15px; background-color: #f0f9ff; border-radius: 8px; border-left: 4px solid #2563eb;">
          <p style="margin: 0; font-size: 14px; color: #1e40af;">
            <strong>Next Steps:</strong> {NEXT_STEPS_TEXT}
          </p>
        </div>
        <div style="margin-top: 20px; text-align: center; font-size: 12px; color: #6b7280;">
          <p>This notification was sent automatically from your Growth Accelerators consultation form.</p>
        </div>
      </div>
    """

    def send_consultation_notification(self, submission: ContactSubmissionResponse) -> bool:
        """
        Email the business inbox about a new consultation request.

        Returns:
            True if the email was accepted by the server, False otherwise
        """
        logger.info(f"Sending consultation notification for submission {submission.id}")
        result = self.mailer.send_email(
            to_email=self.recipient,
            subject=self.build_subject(submission),
            html_content=self.build_html(submission),
            text_content=self.build_text(submission),
            reply_to=submission.email,
        )
        if not result.get('success'):
            logger.error(
                f"Consultation notification for {submission.id} failed: {result.get('message')}"
            )
            return False
        return True

    def verify_connection(self) -> bool:
        return self.mailer.verify_connection()


class NotificationDispatcher:
    """
    Fire-and-forget runner for notifications.

    dispatch() schedules the call on a background worker and returns the
    Future straight away. The result is only observed by a logging callback;
    there are no retries.
    """

    def __init__(self, notifier: NotificationService, executor: Optional[ThreadPoolExecutor] = None):
        self.notifier = notifier
        self._executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="notify"
        )

    def dispatch(self, submission: ContactSubmissionResponse) -> Optional[Future]:
        return self._submit(self.notifier.send_consultation_notification, submission)

    def _submit(self, fn: Callable, submission: ContactSubmissionResponse) -> Optional[Future]:
        try:
            future = self._executor.submit(fn, submission)
        except RuntimeError as e:
            # Executor already shut down
            logger.error(f"Could not schedule notification for {submission.id}: {e}")
            return None
        future.add_done_callback(lambda f: self._log_outcome(submission.id, f))
        return future

    @staticmethod
    def _log_outcome(submission_id: str, future: Future) -> None:
        exc = future.exception()
        if exc is not None:
            logger.error(
                f"Notification for submission {submission_id} raised an error",
                exc_info=(type(exc), exc, exc.__traceback__),
            )
        elif future.result():
            logger.info(f"Notification sent for submission {submission_id}")
        else:
            logger.warning(f"Notification for submission {submission_id} was not sent")

    def shutdown(self, wait: bool = False) -> None:
        self._executor.shutdown(wait=wait)
