"""Notification email composition, background dispatch and SMTP transport."""

import logging
import smtplib
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest

from growth_crm.core.config import Settings
from growth_crm.schemas.submission import ContactSubmissionResponse
from growth_crm.services.notification_service import (
    NotificationDispatcher,
    NotificationService,
)
from growth_crm.services.smtp_service import SMTPService
from tests.conftest import FakeMailer


@pytest.fixture
def submission():
    return ContactSubmissionResponse(
        id="sub-1",
        name="Sarah <Mitchell>",
        email="sarah@bloomandco.co.uk",
        message="Line one\nLine two & more",
        package=None,
        created_at=datetime(2026, 3, 2, 9, 30, 0),
    )


class TestNotificationService:

    def test_sends_to_business_inbox_with_reply_to(self, submission):
        mailer = FakeMailer()
        sent = NotificationService(mailer, "inbox@example.com").send_consultation_notification(submission)

        assert sent is True
        email = mailer.sent[0]
        assert email["to"] == "inbox@example.com"
        assert email["reply_to"] == "sarah@bloomandco.co.uk"
        assert email["subject"] == "New Consultation Request from Sarah <Mitchell>"

    def test_bodies_describe_the_request(self, submission):
        text = NotificationService.build_text(submission)
        body = NotificationService.build_html(submission)

        assert "Package Interest: No specific package mentioned" in text
        assert "Submitted: 02/03/2026, 09:30:00" in text
        assert "Line two & more" in text
        assert "Sarah &lt;Mitchell&gt;" in body
        assert "Line two &amp; more" in body
        assert "Monday, 02 March 2026 at 09:30" in body

    def test_rejected_send_reports_false(self, submission):
        mailer = FakeMailer(succeed=False)
        assert NotificationService(mailer, "inbox@example.com").send_consultation_notification(submission) is False


class TestNotificationDispatcher:

    def test_runs_in_background(self, submission):
        mailer = FakeMailer()
        dispatcher = NotificationDispatcher(
            NotificationService(mailer, "inbox@example.com"),
            executor=ThreadPoolExecutor(max_workers=1),
        )

        future = dispatcher.dispatch(submission)
        dispatcher.shutdown(wait=True)

        assert future.result() is True
        assert len(mailer.sent) == 1

    def test_errors_are_logged_not_raised(self, submission, caplog):
        dispatcher = NotificationDispatcher(
            NotificationService(FakeMailer(raise_error=True), "inbox@example.com"),
            executor=ThreadPoolExecutor(max_workers=1),
        )

        with caplog.at_level(logging.ERROR, logger="growth_crm.services.notification_service"):
            future = dispatcher.dispatch(submission)
            dispatcher.shutdown(wait=True)

        assert isinstance(future.exception(), RuntimeError)
        assert "Notification for submission sub-1 raised an error" in caplog.text

    def test_dispatch_after_shutdown_returns_none(self, submission):
        dispatcher = NotificationDispatcher(
            NotificationService(FakeMailer(), "inbox@example.com"),
            executor=ThreadPoolExecutor(max_workers=1),
        )
        dispatcher.shutdown(wait=True)

        assert dispatcher.dispatch(submission) is None


class TestSMTPService:

    def _service(self, **overrides):
        values = {
            "smtp_host": "smtp.test.local",
            "smtp_port": 587,
            "smtp_user": "sender@growthco.co.uk",
            "smtp_pass": "app-password",
            "from_email": "sender@growthco.co.uk",
        }
        values.update(overrides)
        return SMTPService(**values)

    def test_unconfigured_send_fails_without_connecting(self):
        service = self._service(smtp_user=None, smtp_pass=None)
        with patch("growth_crm.services.smtp_service.smtplib.SMTP") as smtp:
            result = service.send_email("to@growthco.co.uk", "Hi", "<p>Hi</p>")

        assert result["success"] is False
        smtp.assert_not_called()
        assert service.verify_connection() is False

    def test_send_uses_starttls_and_reply_to(self):
        service = self._service()
        server = MagicMock()
        with patch("growth_crm.services.smtp_service.smtplib.SMTP", return_value=server):
            result = service.send_email(
                "to@growthco.co.uk", "Hi", "<p>Hi</p>", "Hi", reply_to="lead@clientco.com"
            )

        assert result["success"] is True
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("sender@growthco.co.uk", "app-password")
        from_addr, to_addrs, raw = server.sendmail.call_args[0]
        assert from_addr == "sender@growthco.co.uk"
        assert to_addrs == ["to@growthco.co.uk"]
        assert "Reply-To: lead@clientco.com" in raw
        server.quit.assert_called_once()

    def test_authentication_failure_reported(self):
        service = self._service()
        server = MagicMock()
        server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")
        with patch("growth_crm.services.smtp_service.smtplib.SMTP", return_value=server):
            result = service.send_email("to@growthco.co.uk", "Hi", "<p>Hi</p>")
            verified = service.verify_connection()

        assert result["success"] is False
        assert "authentication failed" in result["message"]
        assert verified is False

    def test_secure_mode_uses_ssl(self):
        service = self._service(smtp_secure=True, smtp_port=465)
        server = MagicMock()
        with patch("growth_crm.services.smtp_service.smtplib.SMTP_SSL", return_value=server) as ssl:
            assert service.verify_connection() is True

        ssl.assert_called_once_with("smtp.test.local", 465, timeout=30)
        server.starttls.assert_not_called()

    def test_from_settings_accepts_gmail_variable_names(self, monkeypatch):
        monkeypatch.setenv("GMAIL_USER", "owner@growthco.co.uk")
        monkeypatch.setenv("GMAIL_APP_PASSWORD", "abcd efgh")
        monkeypatch.delenv("SMTP_USER", raising=False)
        monkeypatch.delenv("SMTP_PASS", raising=False)

        service = SMTPService.from_settings(Settings())

        assert service.smtp_user == "owner@growthco.co.uk"
        assert service.is_configured
