"""
Submission Controller - HTTP handling for consultation intake and conversion.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from ..services.submission_service import SubmissionService
from ..services.lifecycle_service import LeadLifecycleService
from ..services.dashboard_service import DashboardService
from ..services.notification_service import NotificationDispatcher
from ..schemas.submission import (
    ContactSubmissionCreate, ContactSubmissionResponse, ContactSubmitResponse,
)
from ..schemas.prospect import ProspectResponse
from ..schemas.client import ClientResponse, BulkConversionResponse


class SubmissionController:
    """Controller for consultation submissions and their conversion."""

    def __init__(self, db: Session, dispatcher: Optional[NotificationDispatcher] = None):
        self.db = db
        self.service = SubmissionService(db, dispatcher)
        self.lifecycle = LeadLifecycleService(db)

    async def submit(self, submission_data: ContactSubmissionCreate) -> ContactSubmitResponse:
        submission = self.service.submit(submission_data)
        return ContactSubmitResponse(id=submission.id)

    async def get_submissions(self) -> List[ContactSubmissionResponse]:
        return [
            ContactSubmissionResponse.model_validate(s)
            for s in self.service.get_submissions()
        ]

    async def get_unconverted_submissions(self) -> List[ContactSubmissionResponse]:
        return [
            ContactSubmissionResponse.model_validate(s)
            for s in DashboardService(self.db).get_unconverted_submissions()
        ]

    async def get_submission(self, submission_id: str) -> ContactSubmissionResponse:
        return ContactSubmissionResponse.model_validate(
            self.service.get_submission(submission_id)
        )

    async def convert_to_prospect(self, submission_id: str) -> ProspectResponse:
        prospect = self.lifecycle.convert_submission_to_prospect(submission_id)
        return ProspectResponse.model_validate(prospect)

    async def convert_to_client(self, submission_id: str) -> ClientResponse:
        client = self.lifecycle.convert_submission_to_client(submission_id)
        return ClientResponse.model_validate(client)

    async def convert_all_to_clients(self) -> BulkConversionResponse:
        clients = self.lifecycle.convert_all_submissions_to_clients()
        return BulkConversionResponse(
            converted_count=len(clients),
            clients=[ClientResponse.model_validate(c) for c in clients],
        )
