"""
Submission Service - consultation intake.
Stores validated requests and schedules the inbox notification.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ..models.submission import ContactSubmission
from ..repositories.submission_repository import SubmissionRepository
from ..schemas.submission import ContactSubmissionCreate, ContactSubmissionResponse
from .notification_service import NotificationDispatcher

logger = logging.getLogger(__name__)


class SubmissionService:
    """Service layer for consultation submissions."""

    def __init__(self, db: Session, dispatcher: Optional[NotificationDispatcher] = None):
        self.db = db
        self.repository = SubmissionRepository(db)
        self.dispatcher = dispatcher

    def submit(self, submission_data: ContactSubmissionCreate) -> ContactSubmission:
        """
        Store a consultation request and schedule the notification email.

        The submission is stored before anything else happens; the
        notification runs in the background and its outcome never reaches
        the caller.

        Args:
            submission_data: Validated intake payload

        Returns:
            The stored submission with its generated id
        """
        submission = self.repository.create(obj_in=submission_data.model_dump())
        logger.info(f"Stored consultation submission {submission.id}")

        if self.dispatcher is not None:
            # Hand over a detached copy; the session stays with this request
            snapshot = ContactSubmissionResponse.model_validate(submission)
            self.dispatcher.dispatch(snapshot)

        return submission

    def get_submissions(self) -> List[ContactSubmission]:
        """All submissions, newest first."""
        return self.repository.list_all()

    def get_submission(self, submission_id: str) -> ContactSubmission:
        submission = self.repository.get(submission_id)
        if not submission:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Submission not found"
            )
        return submission
