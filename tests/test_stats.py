"""
Tests for the stats and charts reports.
"""

from datetime import date, datetime, timezone

from app.models.job import Job
from app.services import job_stats


STATUSES = {"applied", "screening", "interview", "offer", "rejected"}


def add_jobs(db_session, *jobs):
    for owner, status, applied_date in jobs:
        db_session.add(Job(
            clerk_id=owner,
            position="Engineer",
            company="Acme",
            status=status,
            mode="remote",
            applied_date=applied_date,
        ))
    db_session.commit()


class TestStatusCounts:

    def test_no_jobs_returns_all_zero(self, client, auth_headers):
        response = client.get("/api/stats", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {status: 0 for status in STATUSES}

    def test_counts_only_callers_jobs(self, client, db_session, auth_headers):
        add_jobs(
            db_session,
            ("user_alice", "interview", None),
            ("user_alice", "interview", None),
            ("user_bob", "offer", None),
        )

        data = client.get("/api/stats", headers=auth_headers).json()

        assert set(data) == STATUSES
        assert data["interview"] == 2
        assert data["offer"] == 0
        assert data["applied"] == 0

    def test_service_counts_every_status(self, db_session):
        add_jobs(
            db_session,
            ("user_alice", "applied", None),
            ("user_alice", "screening", None),
            ("user_alice", "rejected", None),
            ("user_alice", "rejected", None),
        )

        assert job_stats.get_status_counts(db_session, "user_alice") == {
            "applied": 1,
            "screening": 1,
            "interview": 0,
            "offer": 0,
            "rejected": 2,
        }


class TestMonthlyApplications:

    def test_groups_by_month_in_date_order(self, db_session):
        add_jobs(
            db_session,
            ("user_alice", "interview", date(2025, 3, 5)),
            ("user_alice", "applied", date(2025, 1, 22)),
            ("user_alice", "applied", date(2025, 1, 10)),
        )
        now = datetime(2025, 6, 15, tzinfo=timezone.utc)

        result = job_stats.get_monthly_applications(db_session, "user_alice", now=now)

        assert result == [
            {"date": "Jan 25", "count": 2},
            {"date": "Mar 25", "count": 1},
        ]

    def test_excludes_old_undated_and_foreign_jobs(self, db_session):
        add_jobs(
            db_session,
            ("user_alice", "applied", date(2024, 12, 14)),
            ("user_alice", "applied", date(2024, 12, 15)),
            ("user_alice", "applied", None),
            ("user_bob", "applied", date(2025, 5, 1)),
        )
        now = datetime(2025, 6, 15, tzinfo=timezone.utc)

        result = job_stats.get_monthly_applications(db_session, "user_alice", now=now)

        assert result == [{"date": "Dec 24", "count": 1}]

    def test_chronological_across_year_boundary(self):
        dates = [date(2024, 11, 30), date(2024, 12, 1), date(2025, 1, 2), date(2025, 1, 3)]

        assert job_stats.group_applications_by_month(dates) == [
            {"date": "Nov 24", "count": 1},
            {"date": "Dec 24", "count": 1},
            {"date": "Jan 25", "count": 2},
        ]

    def test_charts_endpoint(self, client, db_session, auth_headers):
        today = datetime.now(timezone.utc).date()
        add_jobs(
            db_session,
            ("user_alice", "applied", today),
            ("user_alice", "offer", today),
        )

        response = client.get("/api/charts", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == [{"date": today.strftime("%b %y"), "count": 2}]

    def test_charts_empty(self, client, auth_headers):
        response = client.get("/api/charts", headers=auth_headers)

        assert response.json() == []


class TestSubtractMonths:

    def test_simple(self):
        assert job_stats.subtract_months(date(2025, 6, 15), 6) == date(2024, 12, 15)

    def test_clamps_to_month_end(self):
        assert job_stats.subtract_months(date(2025, 8, 31), 6) == date(2025, 2, 28)
        assert job_stats.subtract_months(date(2024, 8, 31), 6) == date(2024, 2, 29)
