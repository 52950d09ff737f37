"""HTTP surface: routing, status codes and the camelCase wire format."""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from growth_crm.core.config import Settings
from growth_crm.main import create_app
from growth_crm.repositories import ClientRepository, SubmissionRepository
from tests.conftest import START, FakeMailer


def _submit(client, payload):
    response = client.post("/api/contact", json=payload)
    assert response.status_code == 200
    return response.json()["id"]


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestContactIntake:

    def test_submit_stores_and_notifies(self, client, dispatcher, mailer, submission_payload):
        response = client.post("/api/contact", json=submission_payload)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["id"]

        dispatcher.shutdown(wait=True)
        assert len(mailer.sent) == 1
        assert mailer.sent[0]["reply_to"] == "sarah@bloomandco.co.uk"

        stored = client.get(f"/api/contact-submissions/{body['id']}").json()
        assert stored["email"] == "sarah@bloomandco.co.uk"
        assert stored["package"] == "growth"
        assert "createdAt" in stored

    def test_validation_failure_names_fields_and_stores_nothing(self, client, store):
        response = client.post("/api/contact", json={
            "name": "S",
            "email": "not-an-email",
            "message": "   ",
        })

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation failed"
        assert {e["field"] for e in body["errors"]} == {"name", "email", "message"}
        with store.session() as db:
            assert SubmissionRepository(db).count() == 0

    def test_missing_body(self, client):
        response = client.post("/api/contact")
        assert response.status_code == 400

    def test_failed_notification_does_not_fail_request(
        self, test_settings, store, submission_payload
    ):
        app = create_app(settings=test_settings, store=store, mailer=FakeMailer(raise_error=True))
        with TestClient(app) as client:
            response = client.post("/api/contact", json=submission_payload)
            app.state.dispatcher.shutdown(wait=True)

            assert response.status_code == 200
            assert len(client.get("/api/contact-submissions").json()) == 1

    def test_submissions_newest_first(self, client, submission_payload):
        first = _submit(client, submission_payload)
        second = _submit(client, {**submission_payload, "email": "other@bloomandco.co.uk"})

        ids = [s["id"] for s in client.get("/api/contact-submissions").json()]

        assert ids == [second, first]

    def test_unknown_submission(self, client):
        response = client.get("/api/contact-submissions/missing")
        assert response.status_code == 404
        assert response.json()["detail"] == "Submission not found"


class TestMessageMinimumLength:

    def _app_client(self, store, mailer, min_length):
        settings = Settings(SEED_SAMPLE_DATA=False, MESSAGE_MIN_LENGTH=min_length)
        return TestClient(create_app(settings=settings, store=store, mailer=mailer))

    def test_default_minimum_is_ten(self, client, store, submission_payload):
        short = client.post("/api/contact", json={**submission_payload, "message": "Too short"})
        exact = client.post("/api/contact", json={**submission_payload, "message": "x" * 10})

        assert short.status_code == 400
        assert [e["field"] for e in short.json()["errors"]] == ["message"]
        assert exact.status_code == 200
        with store.session() as db:
            assert SubmissionRepository(db).count() == 1

    def test_app_settings_raise_the_minimum(self, store, mailer, submission_payload):
        with self._app_client(store, mailer, 50) as client:
            response = client.post(
                "/api/contact", json={**submission_payload, "message": "Only twenty chars ok"}
            )

            assert response.status_code == 400
            body = response.json()
            assert body["message"] == "Validation failed"
            assert body["errors"] == [
                {"field": "message", "message": "Message must be at least 50 characters"}
            ]
            with store.session() as db:
                assert SubmissionRepository(db).count() == 0
            assert mailer.sent == []

    def test_app_settings_lower_the_minimum(self, store, mailer, submission_payload):
        with self._app_client(store, mailer, 3) as client:
            response = client.post("/api/contact", json={**submission_payload, "message": "Hi!"})

        assert response.status_code == 200


class TestConversions:

    def test_convert_to_prospect_then_conflict(self, client, submission_payload):
        submission_id = _submit(client, submission_payload)

        response = client.post(f"/api/contact-submissions/{submission_id}/convert-to-prospect")
        assert response.status_code == 201
        prospect = response.json()
        assert prospect["submissionId"] == submission_id
        assert prospect["status"] == "new"
        assert prospect["priority"] == "medium"
        assert prospect["source"] == "consultation_form"

        again = client.post(f"/api/contact-submissions/{submission_id}/convert-to-prospect")
        assert again.status_code == 409
        assert len(client.get("/api/prospects").json()) == 1

    def test_convert_to_client_then_conflict(self, client, submission_payload):
        submission_id = _submit(client, submission_payload)

        response = client.post(f"/api/contact-submissions/{submission_id}/convert-to-client")
        assert response.status_code == 201
        assert response.json()["monthlyValue"] == "£2,000"
        assert response.json()["status"] == "active"

        again = client.post(f"/api/contact-submissions/{submission_id}/convert-to-client")
        assert again.status_code == 409

    def test_convert_unknown_submission(self, client):
        assert client.post("/api/contact-submissions/missing/convert-to-client").status_code == 404
        assert client.post("/api/contact-submissions/missing/convert-to-prospect").status_code == 404

    def test_unconverted_and_convert_all(self, client, submission_payload):
        converted = _submit(client, submission_payload)
        _submit(client, {**submission_payload, "email": "new@freshco.com", "package": "startup"})
        client.post(f"/api/contact-submissions/{converted}/convert-to-prospect")

        unconverted = client.get("/api/contact-submissions/unconverted").json()
        assert [s["email"] for s in unconverted] == ["new@freshco.com"]

        response = client.post("/api/contact-submissions/convert-all-to-clients")
        assert response.status_code == 200
        body = response.json()
        assert body["convertedCount"] == 2
        assert len(body["clients"]) == 2

        repeat = client.post("/api/contact-submissions/convert-all-to-clients").json()
        assert repeat["convertedCount"] == 0
        assert client.get("/api/contact-submissions/unconverted").json() == []


class TestClients:

    def test_crud(self, client):
        created = client.post("/api/clients", json={
            "name": "Nina Cole",
            "email": "nina@colestudio.com",
            "monthlyValue": "£1,500",
        })
        assert created.status_code == 201
        client_id = created.json()["id"]
        assert created.json()["status"] == "active"

        updated = client.put(f"/api/clients/{client_id}", json={"status": "PAUSED"})
        assert updated.status_code == 200
        assert updated.json()["status"] == "paused"
        assert updated.json()["monthlyValue"] == "£1,500"

        assert client.get(f"/api/clients/{client_id}").status_code == 200
        assert client.delete(f"/api/clients/{client_id}").json()["success"] is True
        assert client.get(f"/api/clients/{client_id}").status_code == 404
        assert client.delete(f"/api/clients/{client_id}").status_code == 404

    def test_update_unknown_client_changes_nothing(self, client, store):
        response = client.put("/api/clients/missing", json={"name": "Ghost Client"})

        assert response.status_code == 404
        with store.session() as db:
            assert ClientRepository(db).count() == 0

    def test_invalid_status_rejected(self, client):
        response = client.post("/api/clients", json={
            "name": "Nina Cole", "email": "nina@colestudio.com", "status": "archived",
        })
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "status"


class TestProspectsAndInteractions:

    def _create_prospect(self, client, **fields):
        payload = {"name": "Omar Reid", "email": "omar@reidjoinery.co.uk", **fields}
        response = client.post("/api/prospects", json=payload)
        assert response.status_code == 201
        return response.json()

    def test_create_get_update(self, client):
        prospect = self._create_prospect(client, priority="high", company="Reid Joinery")

        fetched = client.get(f"/api/prospects/{prospect['id']}").json()
        assert fetched["company"] == "Reid Joinery"

        updated = client.put(f"/api/prospects/{prospect['id']}", json={
            "status": "meeting_scheduled",
            "nextFollowUpDate": "2026-03-05T10:00:00Z",
        })
        assert updated.status_code == 200
        assert updated.json()["status"] == "meeting_scheduled"
        assert updated.json()["priority"] == "high"
        assert updated.json()["nextFollowUpDate"].startswith("2026-03-05T10:00:00")

    def test_null_status_rejected(self, client):
        prospect = self._create_prospect(client)
        response = client.put(f"/api/prospects/{prospect['id']}", json={"status": None})
        assert response.status_code == 400

    def test_unknown_prospect(self, client):
        assert client.get("/api/prospects/missing").status_code == 404
        assert client.put("/api/prospects/missing", json={"notes": "x"}).status_code == 404
        assert client.get("/api/prospects/missing/interactions").status_code == 404

    def test_log_interaction_leaves_status_alone(self, client):
        prospect = self._create_prospect(client, status="qualified")

        response = client.post("/api/interactions", json={
            "prospectId": prospect["id"],
            "type": "call",
            "subject": "Discovery",
            "content": "Great call, ready for a proposal",
            "outcome": "positive",
            "nextAction": "Send proposal",
        })

        assert response.status_code == 201
        assert response.json()["createdBy"] == "admin"
        after = client.get(f"/api/prospects/{prospect['id']}").json()
        assert after["status"] == "qualified"
        history = client.get(f"/api/prospects/{prospect['id']}/interactions").json()
        assert [i["id"] for i in history] == [response.json()["id"]]
        assert len(client.get("/api/interactions").json()) == 1

    def test_interaction_for_unknown_prospect(self, client):
        response = client.post("/api/interactions", json={
            "prospectId": "missing", "type": "note", "content": "Orphan",
        })
        assert response.status_code == 404

    def test_interaction_requires_valid_type(self, client):
        prospect = self._create_prospect(client)
        response = client.post("/api/interactions", json={
            "prospectId": prospect["id"], "type": "fax", "content": "Sent a fax",
        })
        assert response.status_code == 400


class TestDashboard:

    def test_overview(self, client):
        client.post("/api/clients", json={
            "name": "A Client", "email": "a@alphaco.com", "monthlyValue": "£1,500",
        })
        client.post("/api/clients", json={
            "name": "B Client", "email": "b@betaco.com", "monthlyValue": "£2,000",
        })

        overview = client.get("/api/dashboard/overview").json()

        assert overview["activeClients"] == 2
        assert overview["monthlyRevenue"] == 3500.0
        assert overview["totalSubmissions"] == 0

    def test_follow_ups(self, client):
        yesterday = START - timedelta(days=1) + timedelta(hours=1)
        in_three_days = START + timedelta(days=3)
        overdue = client.post("/api/prospects", json={
            "name": "Late Lead", "email": "late@alphaco.com",
            "nextFollowUpDate": yesterday.isoformat(),
        }).json()
        upcoming = client.post("/api/prospects", json={
            "name": "Soon Lead", "email": "soon@betaco.com",
            "nextFollowUpDate": in_three_days.isoformat(),
        }).json()

        board = client.get("/api/dashboard/follow-ups").json()

        assert [o["prospect"]["id"] for o in board["overdue"]] == [overdue["id"]]
        assert board["overdue"][0]["daysOverdue"] == 1
        assert [p["id"] for p in board["upcomingThisWeek"]] == [upcoming["id"]]
        assert board["dueToday"] == []

    def test_pending_actions(self, client):
        prospect = client.post("/api/prospects", json={
            "name": "Omar Reid", "email": "omar@reidjoinery.co.uk",
        }).json()
        client.post("/api/interactions", json={
            "prospectId": prospect["id"], "type": "email", "content": "Sent intro",
            "nextAction": "Chase reply",
        })

        pending = client.get("/api/dashboard/pending-actions").json()

        assert pending["count"] == 1
        assert pending["interactions"][0]["nextAction"] == "Chase reply"


class TestTestEmail:

    def test_sends_when_connected(self, client, mailer):
        response = client.post("/api/test-email")

        assert response.json()["success"] is True
        assert mailer.sent[0]["subject"] == "New Consultation Request from Test User"

    def test_reports_connection_failure(self, test_settings, store):
        mailer = FakeMailer(connected=False)
        app = create_app(settings=test_settings, store=store, mailer=mailer)
        with TestClient(app) as client:
            response = client.post("/api/test-email")

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert mailer.sent == []


class TestOptions:

    def test_every_enum_member_listed(self, client):
        options = client.get("/api/options").json()

        assert [o["value"] for o in options["prospectStatuses"]] == [
            "new", "contacted", "qualified", "meeting_scheduled",
            "proposal_sent", "converted", "rejected",
        ]
        assert options["prospectStatuses"][3]["label"] == "Meeting Scheduled"
        assert {o["value"] for o in options["interactionOutcomes"]} == {
            "positive", "negative", "neutral", "follow_up_needed",
        }
        packages = {p["value"]: p["monthlyValue"] for p in options["packages"]}
        assert packages == {"startup": "£750", "growth": "£2,000", "ongoing": "£1,500"}


class TestErrors:

    def test_unhandled_error_is_generic_500(self, test_settings, store, mailer):
        app = create_app(settings=test_settings, store=store, mailer=mailer)

        @app.get("/boom")
        async def boom():
            raise RuntimeError("secret internals")

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/boom")

        assert response.status_code == 500
        assert "secret" not in response.text
        assert response.json()["detail"] == "Internal server error"


class TestSeeding:

    @pytest.fixture
    def seeded_client(self, store, mailer):
        app = create_app(
            settings=Settings(SEED_SAMPLE_DATA=True, ADMIN_PASSWORD="changeme"),
            store=store,
            mailer=mailer,
        )
        with TestClient(app) as client:
            yield client

    def test_sample_data_fills_every_view(self, seeded_client):
        assert len(seeded_client.get("/api/contact-submissions").json()) == 4
        board = seeded_client.get("/api/dashboard/follow-ups").json()
        assert len(board["overdue"]) == 1
        assert len(board["upcomingThisWeek"]) == 1
        assert seeded_client.get("/api/dashboard/pending-actions").json()["count"] == 1
        overview = seeded_client.get("/api/dashboard/overview").json()
        assert overview["activeClients"] == 1
        assert overview["monthlyRevenue"] == 1500.0
        assert overview["newSubmissions"] == 1
