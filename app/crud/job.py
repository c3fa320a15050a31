"""
CRUD operations for Job model.

Every read and write takes the caller's owner_id and puts it in the WHERE
clause, so a job owned by someone else behaves exactly like a missing one.
"""

from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy import or_
from sqlalchemy.orm import Session
from app.models.job import Job

# Status filter value meaning "every status"
ALL_STATUSES = "all"

# Columns a caller may set through create/update
EDITABLE_FIELDS = ("position", "company", "location", "status", "mode", "applied_date")


def build_job_filters(
    owner_id: str,
    search: Optional[str] = None,
    job_status: Optional[str] = None
) -> list:
    """
    Translate list filters into SQLAlchemy criteria.

    Args:
        owner_id: Caller identity, always applied
        search: Case-insensitive substring matched against position or company
        job_status: Exact status, or "all"/None for no status filter

    Returns:
        List of criteria to pass to Query.filter()
    """
    filters = [Job.clerk_id == owner_id]

    if search:
        filters.append(or_(
            Job.position.icontains(search, autoescape=True),
            Job.company.icontains(search, autoescape=True),
        ))

    if job_status and job_status != ALL_STATUSES:
        filters.append(Job.status == job_status)

    return filters


def create(db: Session, owner_id: str, job_data: Dict[str, Any]) -> Job:
    """
    Create a new job owned by owner_id.

    Args:
        db: Database session
        owner_id: Caller identity (never taken from the payload)
        job_data: Sanitized column values from sanitize_job_input

    Returns:
        Created Job instance with id and timestamps
    """
    db_job = Job(
        clerk_id=owner_id,
        **{field: job_data.get(field) for field in EDITABLE_FIELDS if field in job_data}
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: str, owner_id: str) -> Optional[Job]:
    """
    Retrieve a job by ID if owner_id owns it.

    Returns:
        Job instance if found and owned, None otherwise
    """
    return db.query(Job).filter(Job.id == job_id, Job.clerk_id == owner_id).first()


def get_multi(
    db: Session,
    owner_id: str,
    search: Optional[str] = None,
    job_status: Optional[str] = None,
    page: int = 1,
    limit: int = 10
) -> Tuple[List[Job], int]:
    """
    Retrieve one page of the caller's jobs plus the total match count.

    Page and count are two separate queries over the same filters. They are
    not read in one snapshot, so concurrent writes can make them disagree.

    Args:
        db: Database session
        owner_id: Caller identity
        search: Optional search text for position/company
        job_status: Optional status filter ("all" disables it)
        page: 1-based page number
        limit: Page size

    Returns:
        (jobs newest first, total count matching the filters)
    """
    filters = build_job_filters(owner_id, search, job_status)
    skip = (page - 1) * limit

    jobs = (
        db.query(Job)
        .filter(*filters)
        .order_by(Job.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )
    count = db.query(Job).filter(*filters).count()

    return jobs, count


def get_all_for_download(db: Session, owner_id: str) -> List[Job]:
    """
    All of the caller's jobs for export, most recently applied first.

    Jobs without an applied date come last.
    """
    return (
        db.query(Job)
        .filter(Job.clerk_id == owner_id)
        .order_by(Job.applied_date.desc().nulls_last(), Job.created_at.desc())
        .all()
    )


def update(
    db: Session,
    job_id: str,
    owner_id: str,
    job_data: Dict[str, Any]
) -> Optional[Job]:
    """
    Overwrite the editable fields of an owned job.

    Args:
        db: Database session
        job_id: Job ID to update
        owner_id: Caller identity; must own the job
        job_data: Sanitized column values

    Returns:
        Updated Job instance, or None if no owned job matched
    """
    job = get_by_id(db, job_id, owner_id)
    if not job:
        return None

    for field in EDITABLE_FIELDS:
        if field in job_data:
            setattr(job, field, job_data[field])

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, job_id: str, owner_id: str) -> Optional[Job]:
    """
    Delete an owned job.

    Returns:
        The deleted Job (detached, fields still loaded), or None if no owned job matched
    """
    job = get_by_id(db, job_id, owner_id)
    if not job:
        return None

    db.delete(job)
    db.commit()

    return job


def upsert(db: Session, job_id: str, values: Dict[str, Any]) -> Tuple[Job, bool]:
    """
    Create a job with a fixed id, or overwrite every field of the existing one.

    Used by the seed importer, which trusts the owner in its input file.

    Args:
        db: Database session
        job_id: Primary key from the import source
        values: Column values including clerk_id and timestamps

    Returns:
        (job, created) where created is False when an existing row was overwritten
    """
    job = db.get(Job, job_id)
    created = job is None

    if created:
        job = Job(id=job_id, **values)
        db.add(job)
    else:
        for field, value in values.items():
            setattr(job, field, value)

    db.commit()
    db.refresh(job)

    return job, created
