"""Pytest configuration and fixtures for test suite."""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from growth_crm.core.config import Settings
from growth_crm.core.database import RecordStore
from growth_crm.main import create_app
from growth_crm.services.notification_service import NotificationDispatcher, NotificationService


class TickingClock:
    """Deterministic clock: every reading moves time forward by one second."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


class FakeMailer:
    """Stands in for SMTPService; records what would have been sent."""

    def __init__(self, succeed: bool = True, raise_error: bool = False, connected: bool = True):
        self.succeed = succeed
        self.raise_error = raise_error
        self.connected = connected
        self.sent = []

    def send_email(self, to_email, subject, html_content, text_content=None,
                   from_email=None, reply_to=None):
        if self.raise_error:
            raise RuntimeError("SMTP server exploded")
        self.sent.append({
            "to": to_email,
            "subject": subject,
            "html": html_content,
            "text": text_content,
            "reply_to": reply_to,
        })
        if self.succeed:
            return {"success": True, "message": f"Email sent to {to_email}"}
        return {"success": False, "message": "Mailbox unavailable"}

    def verify_connection(self):
        return self.connected


START = datetime(2026, 3, 2, 9, 0, 0)


@pytest.fixture
def clock():
    return TickingClock(START)


@pytest.fixture
def store(clock):
    record_store = RecordStore(clock=clock)
    yield record_store
    record_store.dispose()


@pytest.fixture
def db(store):
    with store.session() as session:
        yield session


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def dispatcher(mailer):
    notifier = NotificationService(mailer, recipient="inbox@example.com")
    return NotificationDispatcher(notifier, executor=ThreadPoolExecutor(max_workers=1))


@pytest.fixture
def test_settings():
    return Settings(SEED_SAMPLE_DATA=False, LOG_LEVEL="DEBUG")


@pytest.fixture
def app(test_settings, store, mailer, dispatcher):
    return create_app(settings=test_settings, store=store, mailer=mailer, dispatcher=dispatcher)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def submission_payload():
    return {
        "name": "Sarah Mitchell",
        "email": "sarah@bloomandco.co.uk",
        "message": "We need help building a repeatable marketing plan for the shop.",
        "package": "growth",
    }
