"""
FastAPI dependencies for the collaborators attached to the running app.
"""

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError

from .config import Settings
from ..schemas.submission import ContactSubmissionCreate
from ..services.notification_service import NotificationDispatcher, NotificationService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_dispatcher(request: Request) -> NotificationDispatcher:
    return request.app.state.dispatcher


def get_notifier(request: Request) -> NotificationService:
    return request.app.state.notifier


def checked_submission(
    submission_data: ContactSubmissionCreate,
    settings: Settings = Depends(get_settings)
) -> ContactSubmissionCreate:
    """
    Intake payload with the running app's minimum message length applied.

    A short message is reported through the same 400 field list as any
    other validation failure.
    """
    min_length = settings.MESSAGE_MIN_LENGTH
    if len(submission_data.message) < min_length:
        raise RequestValidationError([{
            "type": "string_too_short",
            "loc": ("body", "message"),
            "msg": f"Message must be at least {min_length} characters",
            "input": submission_data.message,
        }])
    return submission_data
