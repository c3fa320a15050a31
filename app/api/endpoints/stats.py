"""
Dashboard reports: status counts and applications per month.
"""

import logging
from typing import Dict, List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_caller
from app.core.security import CallerIdentity
from app.schemas.stats import MonthlyApplications
from app.services import job_stats

router = APIRouter(tags=["Stats"])
logger = logging.getLogger(__name__)


@router.get("/stats", response_model=Dict[str, int])
def get_stats(
    caller: CallerIdentity = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Number of the caller's jobs in each status.

    Always includes applied, screening, interview, offer and rejected.
    """
    try:
        return job_stats.get_status_counts(db, caller.user_id)
    except Exception as e:
        logger.error(f"Error fetching stats for {caller.user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch statistics")


@router.get("/charts", response_model=List[MonthlyApplications])
def get_charts(
    caller: CallerIdentity = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Applications per month over the last six months, oldest month first.
    """
    try:
        return job_stats.get_monthly_applications(db, caller.user_id)
    except Exception as e:
        logger.error(f"Error fetching chart data for {caller.user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch chart data")
