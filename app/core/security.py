"""
Caller identity resolution.

Bearer tokens are JWTs issued by the identity provider. The subject claim
("sub") is the caller identity that owns job records.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Request
from jose import JWTError, jwt
from app.core.config import settings


class UnauthenticatedError(Exception):
    """Raised when a request carries no usable identity."""


@dataclass(frozen=True)
class CallerIdentity:
    """The authenticated end user for the current request."""
    user_id: str


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed token for user_id.

    Production tokens come from the identity provider; this is used for local
    development and tests.

    Args:
        user_id: Identity stored in the "sub" claim
        expires_delta: Optional lifetime (default: ACCESS_TOKEN_EXPIRE_MINUTES)

    Returns:
        Encoded JWT token as a string
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {"sub": user_id, "exp": datetime.now(timezone.utc) + expires_delta}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    """
    Decode and validate a JWT token.

    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def resolve_caller_identity(request: Request) -> CallerIdentity:
    """
    Resolve the caller from the request's Authorization header.

    Raises:
        UnauthenticatedError: Missing header, wrong scheme, bad token or no subject
    """
    authorization = request.headers.get("Authorization")
    if not authorization:
        raise UnauthenticatedError("Missing Authorization header")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise UnauthenticatedError("Expected a Bearer token")

    try:
        payload = decode_token(token.strip())
    except JWTError as e:
        raise UnauthenticatedError(f"Invalid token: {e}") from e

    user_id = payload.get("sub")
    if not user_id or not isinstance(user_id, str):
        raise UnauthenticatedError("Token has no subject")

    return CallerIdentity(user_id=user_id)
