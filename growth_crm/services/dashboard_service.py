"""
Derived views for operator triage.

Every function here is a pure projection of records that already exist in
the store: nothing is cached and nothing is written. DashboardService only
gathers the current records and applies them.
"""

import math
import re
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from ..models.client import Client, ClientStatus
from ..models.interaction import Interaction
from ..models.prospect import Prospect, ProspectPriority, ProspectStatus
from ..models.submission import ContactSubmission
from ..repositories.client_repository import ClientRepository
from ..repositories.interaction_repository import InteractionRepository
from ..repositories.prospect_repository import ProspectRepository
from ..repositories.submission_repository import SubmissionRepository
from .lifecycle_service import is_already_client, is_already_prospect

UPCOMING_WINDOW = timedelta(days=7)
ONE_DAY = timedelta(days=1)

_AMOUNT = re.compile(r"\d+(?:\.\d+)?")


def overdue_follow_ups(prospects: Iterable[Prospect], now: datetime) -> List[Tuple[Prospect, int]]:
    """Prospects whose follow-up date has passed, most overdue first, with whole days overdue (rounded up)."""
    overdue = []
    for prospect in prospects:
        due = prospect.next_follow_up_date
        if due is not None and due < now:
            overdue.append((prospect, math.ceil((now - due) / ONE_DAY)))
    overdue.sort(key=lambda pair: pair[0].next_follow_up_date)
    return overdue


def due_today(prospects: Iterable[Prospect], now: datetime) -> List[Prospect]:
    """Prospects whose follow-up date falls on today's calendar date."""
    today = now.date()
    return [
        p for p in prospects
        if p.next_follow_up_date is not None and p.next_follow_up_date.date() == today
    ]


def upcoming_this_week(prospects: Iterable[Prospect], now: datetime) -> List[Prospect]:
    """Follow-ups after now and no later than seven days from now, soonest first."""
    horizon = now + UPCOMING_WINDOW
    upcoming = [
        p for p in prospects
        if p.next_follow_up_date is not None and now < p.next_follow_up_date <= horizon
    ]
    upcoming.sort(key=lambda p: p.next_follow_up_date)
    return upcoming


def pending_actions(interactions: Iterable[Interaction], now: datetime) -> List[Interaction]:
    """Interactions with a next action that is undated or already past its date."""
    return [
        i for i in interactions
        if i.next_action and i.next_action.strip()
        and (i.next_action_date is None or i.next_action_date < now)
    ]


def unconverted_submissions(
    submissions: Iterable[ContactSubmission],
    prospects: Iterable[Prospect],
    clients: Iterable[Client],
) -> List[ContactSubmission]:
    """Submissions whose email matches no prospect and no client."""
    prospects = list(prospects)
    clients = list(clients)
    return [
        s for s in submissions
        if not is_already_prospect(s.email, prospects) and not is_already_client(s.email, clients)
    ]


def parse_monthly_value(value: Optional[str]) -> float:
    """'£1,500' -> 1500.0, '£2,000 p.m.' -> 2000.0. Values with no number count as zero."""
    if not value:
        return 0.0
    match = _AMOUNT.search(value.replace(",", ""))
    return float(match.group()) if match else 0.0


def monthly_revenue(clients: Iterable[Client]) -> float:
    """Sum of monthly values across active clients."""
    return sum(
        parse_monthly_value(c.monthly_value)
        for c in clients
        if c.status == ClientStatus.ACTIVE
    )


def is_active_prospect(prospect: Prospect) -> bool:
    return prospect.is_active


def dashboard_counts(
    submissions: List[ContactSubmission],
    prospects: List[Prospect],
    clients: List[Client],
) -> dict:
    return {
        "total_submissions": len(submissions),
        "new_submissions": len(unconverted_submissions(submissions, prospects, clients)),
        "active_prospects": sum(1 for p in prospects if is_active_prospect(p)),
        "high_priority_prospects": sum(1 for p in prospects if p.priority == ProspectPriority.HIGH),
        "qualified_prospects": sum(1 for p in prospects if p.status == ProspectStatus.QUALIFIED),
        "active_clients": sum(1 for c in clients if c.status == ClientStatus.ACTIVE),
        "monthly_revenue": monthly_revenue(clients),
    }


class DashboardService:
    """Reads current store contents and applies the derived views."""

    def __init__(self, db: Session):
        self.db = db
        self.submissions = SubmissionRepository(db)
        self.prospects = ProspectRepository(db)
        self.interactions = InteractionRepository(db)
        self.clients = ClientRepository(db)

    def _now(self, now: Optional[datetime]) -> datetime:
        return now if now is not None else self.prospects.now()

    def get_metrics(self) -> dict:
        return dashboard_counts(
            self.submissions.list_all(),
            self.prospects.list_all(),
            self.clients.list_all(),
        )

    def get_follow_up_board(self, now: Optional[datetime] = None) -> dict:
        now = self._now(now)
        prospects = self.prospects.get_with_follow_up()
        return {
            "overdue": [
                {"prospect": p, "days_overdue": days}
                for p, days in overdue_follow_ups(prospects, now)
            ],
            "due_today": due_today(prospects, now),
            "upcoming_this_week": upcoming_this_week(prospects, now),
        }

    def get_pending_actions(self, now: Optional[datetime] = None) -> List[Interaction]:
        return pending_actions(self.interactions.get_with_next_action(), self._now(now))

    def get_unconverted_submissions(self) -> List[ContactSubmission]:
        return unconverted_submissions(
            self.submissions.list_all(),
            self.prospects.list_all(),
            self.clients.list_all(),
        )
