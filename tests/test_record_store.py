"""Record store contract shared by every entity type."""

from datetime import timedelta

from growth_crm.core.database import RecordStore, as_naive_utc
from growth_crm.models.client import ClientStatus
from growth_crm.models.prospect import ProspectPriority, ProspectStatus
from growth_crm.repositories import (
    ClientRepository,
    ProspectRepository,
    SubmissionRepository,
)
from tests.conftest import START


def _submission(repo, email="lena@harbourfoods.co.uk", name="Lena Park"):
    return repo.create(obj_in={
        "name": name,
        "email": email,
        "message": "Looking for help with pricing strategy.",
        "package": "startup",
    })


class TestCreate:

    def test_assigns_unique_ids_and_timestamps(self, db):
        repo = SubmissionRepository(db)
        first = _submission(repo)
        second = _submission(repo)

        assert first.id and second.id
        assert first.id != second.id
        assert first.created_at == START
        assert second.created_at == START + timedelta(seconds=1)

    def test_applies_defaults(self, db):
        prospect = ProspectRepository(db).create(obj_in={
            "name": "Omar Reid",
            "email": "omar@reidjoinery.co.uk",
        })

        assert prospect.status == ProspectStatus.NEW
        assert prospect.priority == ProspectPriority.MEDIUM
        assert prospect.source == "consultation_form"
        assert prospect.created_at == prospect.updated_at


class TestList:

    def test_newest_first(self, db):
        repo = SubmissionRepository(db)
        older = _submission(repo, email="a@firstco.com")
        newer = _submission(repo, email="b@secondco.com")

        assert [s.id for s in repo.list_all()] == [newer.id, older.id]

    def test_empty_store(self, db):
        assert ClientRepository(db).list_all() == []


class TestUpdate:

    def test_merges_fields_and_restamps(self, db):
        repo = ClientRepository(db)
        client = repo.create(obj_in={
            "name": "Nina Cole",
            "email": "nina@colestudio.com",
            "monthly_value": "£750",
        })
        created_at = client.created_at

        updated = repo.update_by_id(client.id, {"status": ClientStatus.PAUSED})

        assert updated.status == ClientStatus.PAUSED
        assert updated.monthly_value == "£750"
        assert updated.name == "Nina Cole"
        assert updated.created_at == created_at
        assert updated.updated_at > created_at

    def test_missing_record_returns_none_and_creates_nothing(self, db):
        repo = ClientRepository(db)
        assert repo.update_by_id("does-not-exist", {"name": "Ghost"}) is None
        assert repo.count() == 0


class TestDelete:

    def test_reports_whether_removed(self, db):
        repo = SubmissionRepository(db)
        submission = _submission(repo)

        assert repo.delete(id=submission.id) is True
        assert repo.get(submission.id) is None
        assert repo.delete(id=submission.id) is False


class TestStore:

    def test_stores_are_isolated(self, clock):
        first = RecordStore(clock=clock)
        second = RecordStore(clock=clock)
        try:
            with first.session() as db:
                _submission(SubmissionRepository(db))
            with second.session() as db:
                assert SubmissionRepository(db).count() == 0
        finally:
            first.dispose()
            second.dispose()

    def test_records_survive_between_sessions(self, store):
        with store.session() as db:
            created = _submission(SubmissionRepository(db))
        with store.session() as db:
            assert SubmissionRepository(db).get(created.id).email == created.email

    def test_aware_datetimes_normalised_to_naive_utc(self):
        from datetime import datetime, timezone

        aware = datetime(2026, 3, 2, 10, 0, tzinfo=timezone(timedelta(hours=1)))
        assert as_naive_utc(aware) == datetime(2026, 3, 2, 9, 0)
        assert as_naive_utc(None) is None
