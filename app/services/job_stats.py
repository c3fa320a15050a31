"""
Read-only reports over a user's jobs: status histogram and monthly chart series.
"""

import calendar
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.job import Job, JobStatus

# Trailing window for the applications chart
CHART_WINDOW_MONTHS = 6

# Chart label, e.g. "Jan 25"
MONTH_LABEL_FORMAT = "%b %y"


def subtract_months(moment: date, months: int) -> date:
    """
    Step back a number of calendar months, clamping the day to the target month.

    subtract_months(date(2025, 8, 31), 6) == date(2025, 2, 28)
    """
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def get_status_counts(db: Session, owner_id: str) -> Dict[str, int]:
    """
    Count the caller's jobs per status.

    Every known status is present in the result, zero when the caller has none.
    """
    rows = (
        db.query(Job.status, func.count(Job.id))
        .filter(Job.clerk_id == owner_id)
        .group_by(Job.status)
        .all()
    )

    stats = {job_status.value: 0 for job_status in JobStatus}
    for job_status, count in rows:
        stats[job_status] = count

    return stats


def group_applications_by_month(applied_dates: Iterable[date]) -> List[Dict[str, object]]:
    """
    Fold dates into [{"date": "Mon YY", "count": n}] entries.

    Input must be sorted ascending; entries come out in first-seen order, which
    is then chronological.
    """
    entries: List[Dict[str, object]] = []
    by_label: Dict[str, Dict[str, object]] = {}

    for applied in applied_dates:
        label = applied.strftime(MONTH_LABEL_FORMAT)
        entry = by_label.get(label)
        if entry is None:
            entry = {"date": label, "count": 0}
            by_label[label] = entry
            entries.append(entry)
        entry["count"] += 1

    return entries


def get_monthly_applications(
    db: Session,
    owner_id: str,
    now: Optional[datetime] = None
) -> List[Dict[str, object]]:
    """
    Applications per month over the trailing CHART_WINDOW_MONTHS months.

    Args:
        db: Database session
        owner_id: Caller identity
        now: Reference time (defaults to current UTC time)

    Returns:
        Chronological list of {"date": "Mon YY", "count": int}
    """
    if now is None:
        now = datetime.now(timezone.utc)
    today = now.date() if isinstance(now, datetime) else now
    cutoff = subtract_months(today, CHART_WINDOW_MONTHS)

    rows = (
        db.query(Job.applied_date)
        .filter(Job.clerk_id == owner_id, Job.applied_date >= cutoff)
        .order_by(Job.applied_date.asc())
        .all()
    )

    return group_applications_by_month(applied for (applied,) in rows)
