"""
Fixed sample data applied to a fresh record store at startup.

Dates are relative to the store clock so the follow-up views always have
something overdue, something due today and something coming up.
"""

import logging
from datetime import timedelta
from typing import Optional

from sqlalchemy.orm import Session

from ..models.client import ClientStatus
from ..models.interaction import InteractionOutcome, InteractionType
from ..models.prospect import ProspectPriority, ProspectStatus
from ..repositories.client_repository import ClientRepository
from ..repositories.interaction_repository import InteractionRepository
from ..repositories.prospect_repository import ProspectRepository
from ..repositories.submission_repository import SubmissionRepository
from ..services.lifecycle_service import (
    client_fields_from_submission,
    prospect_fields_from_submission,
)
from ..services.user_service import UserService

logger = logging.getLogger(__name__)

SAMPLE_SUBMISSIONS = [
    {
        "name": "Sarah Mitchell",
        "email": "sarah@bloomandco.co.uk",
        "message": (
            "Business Stage: Early growth\nBusiness Type: Florist\n"
            "Main Goal: Build a repeatable marketing plan\nTimeline: 3 months\n"
            "Budget: £1,500-£2,500"
        ),
        "package": "growth",
    },
    {
        "name": "James Okafor",
        "email": "james@okaforlogistics.com",
        "message": "We are launching next quarter and need help with pricing and a go-to-market plan.",
        "package": "startup",
    },
    {
        "name": "Priya Shah",
        "email": "priya@shahdesignstudio.com",
        "message": "Looking for monthly support with operations and hiring as the studio grows.",
        "package": "ongoing",
    },
    {
        "name": "Tom Reynolds",
        "email": "tom.reynolds@gmail.com",
        "message": "Just exploring options for now. Could we book a short call next week?",
        "package": None,
    },
]


def seed_sample_data(db: Session) -> None:
    """Populate an empty store. Does nothing if submissions already exist."""
    submissions = SubmissionRepository(db)
    if submissions.count() > 0:
        return

    prospects = ProspectRepository(db)
    interactions = InteractionRepository(db)
    clients = ClientRepository(db)
    now = submissions.now()

    stored = [submissions.create(obj_in=data) for data in SAMPLE_SUBMISSIONS]
    sarah, james, priya, _tom = stored

    sarah_prospect = prospects.create(obj_in={
        **prospect_fields_from_submission(sarah),
        "company": "Bloom & Co",
        "status": ProspectStatus.MEETING_SCHEDULED,
        "priority": ProspectPriority.HIGH,
        "next_follow_up_date": now - timedelta(days=1),
        "assigned_to": "Georgie",
    })
    james_prospect = prospects.create(obj_in={
        **prospect_fields_from_submission(james),
        "company": "Okafor Logistics",
        "status": ProspectStatus.CONTACTED,
        "next_follow_up_date": now + timedelta(days=3),
    })

    interactions.create(obj_in={
        "prospect_id": sarah_prospect.id,
        "type": InteractionType.CALL,
        "subject": "Discovery call",
        "content": "Talked through seasonal peaks and current marketing spend.",
        "outcome": InteractionOutcome.POSITIVE,
        "next_action": "Send proposal for Growth Accelerator",
        "next_action_date": now - timedelta(hours=6),
    })
    interactions.create(obj_in={
        "prospect_id": james_prospect.id,
        "type": InteractionType.EMAIL,
        "subject": "Intro email",
        "content": "Sent welcome pack and availability for a call.",
        "outcome": InteractionOutcome.FOLLOW_UP_NEEDED,
        "next_action": "Chase for call slot",
        "next_action_date": now + timedelta(days=2),
    })

    clients.create(obj_in={
        **client_fields_from_submission(priya, now - timedelta(days=45)),
        "company": "Shah Design Studio",
    })
    clients.create(obj_in={
        "name": "Marcus Hale",
        "email": "marcus@halebrewing.co.uk",
        "company": "Hale Brewing Co",
        "current_package": "growth",
        "package_start_date": now - timedelta(days=120),
        "monthly_value": "£2,000",
        "status": ClientStatus.PAUSED,
        "notes": "Paused over the winter; revisit in spring.",
    })

    logger.info(
        f"Seeded {len(stored)} submissions, {prospects.count()} prospects, "
        f"{interactions.count()} interactions and {clients.count()} clients"
    )


def seed_admin_user(db: Session, username: str, password: Optional[str]) -> None:
    if not password:
        logger.info("ADMIN_PASSWORD not set; skipping admin user")
        return
    UserService(db).ensure_user(username, password)
