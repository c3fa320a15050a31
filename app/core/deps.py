"""
FastAPI dependencies for authentication.

Every jobs/stats/charts endpoint depends on get_current_caller and passes the
caller's user_id into the CRUD layer, which filters on it.
"""

import logging
from fastapi import HTTPException, Request, status

from app.core.security import CallerIdentity, UnauthenticatedError, resolve_caller_identity

logger = logging.getLogger(__name__)


def get_current_caller(request: Request) -> CallerIdentity:
    """
    Resolve the authenticated caller for this request.

    Raises:
        HTTPException 401: If no identity can be resolved
    """
    try:
        return resolve_caller_identity(request)
    except UnauthenticatedError as e:
        logger.info(f"Rejected unauthenticated request to {request.url.path}: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
