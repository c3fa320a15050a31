"""
Tests for the CSV seed importer.
"""

from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

import seed as seed_script
from app.models.job import Job
from app.services.seed import SeedResult, parse_timestamp, seed_jobs


HEADER = "id,clerkId,createdAt,updatedAt,position,company,location,status,mode\n"


@pytest.fixture
def write_csv(tmp_path):
    def _write(*rows, header=HEADER):
        path = tmp_path / "Job.csv"
        path.write_text(header + "".join(row + "\n" for row in rows), encoding="utf-8")
        return str(path)
    return _write


class TestSeedJobs:

    def test_creates_jobs(self, db_session, write_csv):
        path = write_csv(
            "job-1,user_alice,2024-11-02 10:00:00,2024-11-03 09:00:00,Engineer,Acme,Berlin,applied,remote",
            "job-2,user_bob,2024-11-04T08:30:00Z,2024-11-04T08:30:00Z,Designer,Globex,,offer,onsite",
        )

        result = seed_jobs(db_session, path)

        assert result == SeedResult(created=2, updated=0, failed=0)
        first = db_session.get(Job, "job-1")
        assert first.clerk_id == "user_alice"
        assert first.location == "Berlin"
        assert first.created_at.replace(tzinfo=None) == datetime(2024, 11, 2, 10, 0, 0)
        assert db_session.get(Job, "job-2").location is None

    def test_rerun_is_idempotent_and_takes_latest_values(self, db_session, write_csv):
        first_path = write_csv(
            "job-1,user_alice,2024-11-02 10:00:00,2024-11-02 10:00:00,Engineer,Acme,Berlin,applied,remote",
        )
        seed_jobs(db_session, first_path)

        second_path = write_csv(
            "job-1,user_alice,2024-11-02 10:00:00,2024-12-01 16:45:00,Staff Engineer,Acme,Munich,interview,hybrid",
        )
        result = seed_jobs(db_session, second_path)

        assert result == SeedResult(created=0, updated=1, failed=0)
        assert db_session.query(Job).count() == 1
        job = db_session.get(Job, "job-1")
        assert job.position == "Staff Engineer"
        assert job.location == "Munich"
        assert job.status == "interview"
        assert job.updated_at.replace(tzinfo=None) == datetime(2024, 12, 1, 16, 45, 0)

    def test_bad_row_does_not_abort_batch(self, db_session, write_csv):
        path = write_csv(
            "job-1,user_alice,not-a-date,2024-11-02 10:00:00,Engineer,Acme,Berlin,applied,remote",
            "job-2,user_alice,2024-11-02 10:00:00,2024-11-02 10:00:00,Designer,Globex,,offer,onsite",
        )

        result = seed_jobs(db_session, path)

        assert result == SeedResult(created=1, updated=0, failed=1)
        assert db_session.get(Job, "job-1") is None
        assert db_session.get(Job, "job-2") is not None

    def test_row_without_id_is_skipped(self, db_session, write_csv):
        path = write_csv(
            ",user_alice,2024-11-02 10:00:00,2024-11-02 10:00:00,Engineer,Acme,Berlin,applied,remote",
        )

        assert seed_jobs(db_session, path).failed == 1
        assert db_session.query(Job).count() == 0

    def test_missing_file_is_skipped(self, db_session, tmp_path):
        result = seed_jobs(db_session, str(tmp_path / "missing.csv"))

        assert result == SeedResult()
        assert db_session.query(Job).count() == 0

    def test_header_only_file_is_skipped(self, db_session, write_csv):
        result = seed_jobs(db_session, write_csv())

        assert result.total == 0

    def test_optional_applied_date_column(self, db_session, write_csv):
        header = HEADER.rstrip("\n") + ",appliedDate\n"
        path = write_csv(
            "job-1,user_alice,2024-11-02 10:00:00,2024-11-02 10:00:00,Engineer,Acme,Berlin,applied,remote,2024-10-30",
            header=header,
        )

        seed_jobs(db_session, path)

        assert db_session.get(Job, "job-1").applied_date.isoformat() == "2024-10-30"


def test_parse_timestamp_accepts_zulu_suffix():
    parsed = parse_timestamp("2024-11-04T08:30:00.000Z")

    assert parsed.utcoffset().total_seconds() == 0
    assert parsed.replace(tzinfo=None) == datetime(2024, 11, 4, 8, 30, 0)


class BrokenSession:
    """Session whose database cannot be reached"""

    def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    def close(self):
        pass


class TestSeedScript:

    def test_connection_failure_exits_non_zero(self, monkeypatch, tmp_path):
        monkeypatch.setattr(seed_script, "SessionLocal", BrokenSession)

        assert seed_script.main([str(tmp_path / "Job.csv")]) == 1

    def test_successful_run_exits_zero(self, monkeypatch, db_session, write_csv):
        path = write_csv(
            "job-1,user_alice,2024-11-02 10:00:00,2024-11-02 10:00:00,Engineer,Acme,Berlin,applied,remote",
        )
        monkeypatch.setattr(seed_script, "SessionLocal", lambda: db_session)

        assert seed_script.main([path]) == 0
        assert db_session.get(Job, "job-1") is not None


def test_parse_timestamp_accepts_short_fraction():
    parsed = parse_timestamp("2024-11-04 08:30:00.12")

    assert parsed == datetime(2024, 11, 4, 8, 30, 0, 120000)
