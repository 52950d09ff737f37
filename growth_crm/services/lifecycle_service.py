"""
Lead lifecycle rules.

Turns consultation submissions into prospects or clients. A submission's
identity for de-duplication is its email address: a submission counts as
"already a prospect" (or "already a client") when any prospect (or client)
carries the same email, whichever submission it came from.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ..models.client import Client, ClientStatus
from ..models.prospect import (
    Prospect, ProspectStatus, ProspectPriority, DEFAULT_PROSPECT_SOURCE,
)
from ..models.submission import ContactSubmission, ServicePackage
from ..repositories.client_repository import ClientRepository
from ..repositories.prospect_repository import ProspectRepository
from ..repositories.submission_repository import SubmissionRepository

logger = logging.getLogger(__name__)

NOTE_EXCERPT_LENGTH = 200

PACKAGE_PRICES: Dict[str, str] = {
    ServicePackage.STARTUP.value: "£750",
    ServicePackage.GROWTH.value: "£2,000",
    ServicePackage.ONGOING.value: "£1,500",
}
DEFAULT_PACKAGE = ServicePackage.STARTUP.value
DEFAULT_PACKAGE_PRICE = "£750"


def default_price_for_package(package: Optional[str]) -> str:
    """Monthly price text for a package; unknown or missing packages get the startup price."""
    return PACKAGE_PRICES.get(package or "", DEFAULT_PACKAGE_PRICE)


def message_excerpt(message: str) -> str:
    return f"{message[:NOTE_EXCERPT_LENGTH]}..."


def is_already_prospect(email: str, prospects: Iterable[Prospect]) -> bool:
    return any(p.email == email for p in prospects)


def is_already_client(email: str, clients: Iterable[Client]) -> bool:
    return any(c.email == email for c in clients)


def prospect_fields_from_submission(submission: ContactSubmission) -> dict:
    return {
        "submission_id": submission.id,
        "name": submission.name,
        "email": submission.email,
        "company": "",
        "status": ProspectStatus.NEW,
        "priority": ProspectPriority.MEDIUM,
        "source": DEFAULT_PROSPECT_SOURCE,
        "notes": f"Original inquiry: {message_excerpt(submission.message)}",
    }


def client_fields_from_submission(submission: ContactSubmission, now: datetime) -> dict:
    package = submission.package or DEFAULT_PACKAGE
    return {
        "submission_id": submission.id,
        "name": submission.name,
        "email": submission.email,
        "company": "",
        "current_package": package,
        "package_start_date": now,
        "monthly_value": default_price_for_package(package),
        "status": ClientStatus.ACTIVE,
        "notes": (
            f"Converted from consultation submission on {now.strftime('%d/%m/%Y')}. "
            f"Original message: {message_excerpt(submission.message)}"
        ),
    }


class LeadLifecycleService:
    """Conversion of submissions into prospects and clients."""

    def __init__(self, db: Session):
        self.db = db
        self.submissions = SubmissionRepository(db)
        self.prospects = ProspectRepository(db)
        self.clients = ClientRepository(db)

    def _get_submission(self, submission_id: str) -> ContactSubmission:
        submission = self.submissions.get(submission_id)
        if not submission:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Submission not found"
            )
        return submission

    def convert_submission_to_prospect(self, submission_id: str) -> Prospect:
        """
        Create a new prospect from a submission.

        Raises:
            HTTPException: 404 if the submission does not exist,
                409 if a prospect with the same email already exists
        """
        submission = self._get_submission(submission_id)

        if self.prospects.email_exists(submission.email):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"A prospect with email '{submission.email}' already exists"
            )

        prospect = self.prospects.create(obj_in=prospect_fields_from_submission(submission))
        logger.info(f"Converted submission {submission.id} to prospect {prospect.id}")
        return prospect

    def convert_submission_to_client(self, submission_id: str) -> Client:
        """
        Create an active client from a submission, priced from its package.

        Raises:
            HTTPException: 404 if the submission does not exist,
                409 if a client with the same email already exists
        """
        submission = self._get_submission(submission_id)

        if self.clients.email_exists(submission.email):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"A client with email '{submission.email}' already exists"
            )

        return self._create_client(submission)

    def convert_all_submissions_to_clients(self) -> List[Client]:
        """
        Convert every submission whose email is not yet a client.

        Submissions sharing an email are converted once (the newest one).
        """
        client_emails = self.clients.emails()
        created = []
        for submission in self.submissions.list_all():
            if submission.email in client_emails:
                continue
            created.append(self._create_client(submission))
            client_emails.add(submission.email)
        logger.info(f"Bulk conversion created {len(created)} clients")
        return created

    def _create_client(self, submission: ContactSubmission) -> Client:
        client = self.clients.create(
            obj_in=client_fields_from_submission(submission, self.clients.now())
        )
        logger.info(f"Converted submission {submission.id} to client {client.id}")
        return client
