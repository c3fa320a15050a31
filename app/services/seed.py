"""
CSV import of jobs exported from a previous database.

Rows are upserted by id, so the import can be re-run safely: existing jobs are
overwritten with the file's values and nothing is duplicated.
"""

import csv
import logging
import os
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Optional
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.crud import job as job_crud

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = (
    "id", "clerkId", "createdAt", "updatedAt",
    "position", "company", "location", "status", "mode",
)


@dataclass
class SeedResult:
    """Outcome of one import run"""
    created: int = 0
    updated: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.created + self.updated + self.failed


def parse_timestamp(value: str) -> datetime:
    """Parse an exported timestamp such as "2025-01-10 09:30:00.123" or "2025-01-10T09:30:00Z"."""
    return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))


def parse_date(value: Optional[str]) -> Optional[date]:
    if not value or not value.strip():
        return None
    return parse_timestamp(value).date()


def read_job_rows(csv_path: str) -> List[Dict[str, str]]:
    """
    Read data rows from the CSV file, trimming every cell.

    Returns an empty list (with a warning) when the file is missing or holds
    no data rows.
    """
    if not os.path.exists(csv_path):
        logger.warning(f"CSV file not found: {csv_path}")
        return []

    with open(csv_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = []
        for row in reader:
            cleaned = {
                key.strip(): (value or "").strip()
                for key, value in row.items()
                if key is not None
            }
            # Skip blank lines
            if any(cleaned.values()):
                rows.append(cleaned)

    if not rows:
        logger.warning(f"CSV file is empty: {csv_path}")
        return []

    missing = [column for column in REQUIRED_COLUMNS if column not in rows[0]]
    if missing:
        logger.warning(f"CSV file {csv_path} is missing columns: {', '.join(missing)}")

    return rows


def row_to_values(row: Dict[str, str]) -> Dict[str, Any]:
    """
    Map a CSV row onto Job columns.

    Raises:
        KeyError: If a required column is absent
        ValueError: If a timestamp cannot be parsed
    """
    return {
        "clerk_id": row["clerkId"],
        "position": row["position"],
        "company": row["company"],
        "location": row["location"] or None,
        "status": row["status"],
        "mode": row["mode"],
        "applied_date": parse_date(row.get("appliedDate")),
        "created_at": parse_timestamp(row["createdAt"]),
        "updated_at": parse_timestamp(row["updatedAt"]),
    }


def seed_jobs(db: Session, csv_path: str) -> SeedResult:
    """
    Upsert every job in csv_path.

    A failing row is logged, rolled back and skipped; the rest of the file
    still runs. Connection problems are raised before any row is touched.

    Args:
        db: Database session
        csv_path: Path to the exported Job.csv

    Returns:
        SeedResult with created/updated/failed counts
    """
    logger.info("Seeding jobs...")

    # Fail fast if the database is unreachable
    db.execute(text("SELECT 1"))

    result = SeedResult()
    rows = read_job_rows(csv_path)

    if not rows:
        logger.warning("No jobs to seed")
        return result

    for row in rows:
        job_id = row.get("id")
        try:
            if not job_id:
                raise ValueError("row has no id")
            _, created = job_crud.upsert(db, job_id, row_to_values(row))
        except Exception as e:
            db.rollback()
            result.failed += 1
            logger.error(f"Error seeding job {job_id}: {e}")
            continue

        if created:
            result.created += 1
        else:
            result.updated += 1

    logger.info(
        f"Seeded {result.total} jobs: {result.created} created, "
        f"{result.updated} updated, {result.failed} failed"
    )
    return result
