import logging
from typing import Any, List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_caller
from app.core.security import CallerIdentity
from app.crud import job as job_crud
from app.schemas.job import JobListResponse, JobResponse
from app.services.job_input import sanitize_job_input

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


@router.get("", response_model=JobListResponse)
def list_jobs(
    search: Optional[str] = None,
    job_status: Optional[str] = Query(None, alias="jobStatus"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    caller: CallerIdentity = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    List the caller's jobs, newest first.

    Args:
        search: Case-insensitive match on position or company
        jobStatus: Status to filter by ("all" for every status)
        page: 1-based page number (default: 1)
        limit: Page size (default: 10, max: 100)

    `count` is the total number of matching jobs, independent of page and limit.
    """
    # Oversized pages are capped rather than rejected
    if limit > MAX_PAGE_SIZE:
        limit = MAX_PAGE_SIZE

    try:
        jobs, count = job_crud.get_multi(
            db,
            owner_id=caller.user_id,
            search=search or None,
            job_status=job_status or None,
            page=page,
            limit=limit
        )
    except Exception as e:
        logger.error(f"Error fetching jobs for {caller.user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch jobs")

    return JobListResponse(jobs=[JobResponse.model_validate(job) for job in jobs], count=count)


@router.post("", status_code=201, response_model=JobResponse)
def create_job(
    payload: Any = Body(...),
    caller: CallerIdentity = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Create a job owned by the caller.

    Any owner field in the body is ignored. Empty location/appliedDate become null.
    """
    job_data = sanitize_job_input(payload)

    try:
        new_job = job_crud.create(db, caller.user_id, job_data)
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating job for {caller.user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create job")

    logger.info(f"Created job {new_job.id}: {new_job.position} at {new_job.company}")
    return new_job


@router.get("/download", response_model=List[JobResponse])
def download_jobs(
    caller: CallerIdentity = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Every job the caller owns, for export. No pagination.
    """
    try:
        return job_crud.get_all_for_download(db, caller.user_id)
    except Exception as e:
        logger.error(f"Error fetching jobs for download for {caller.user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch jobs for download")


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: str,
    caller: CallerIdentity = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Retrieve one of the caller's jobs. Jobs owned by others are reported as not found.
    """
    try:
        job = job_crud.get_by_id(db, job_id, caller.user_id)
    except Exception as e:
        logger.error(f"Error fetching job {job_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch job")

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: str,
    payload: Any = Body(...),
    caller: CallerIdentity = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Replace the editable fields of one of the caller's jobs.
    """
    job_data = sanitize_job_input(payload)

    try:
        job = job_crud.update(db, job_id, caller.user_id, job_data)
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating job {job_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update job")

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Updated job {job_id}")
    return job


@router.delete("/{job_id}", response_model=JobResponse)
def delete_job(
    job_id: str,
    caller: CallerIdentity = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Delete one of the caller's jobs and return the deleted record.
    """
    try:
        job = job_crud.delete(db, job_id, caller.user_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting job {job_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete job")

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Deleted job {job_id}")
    return job
