import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Date, DateTime
from app.core.database import Base


class JobStatus(str, enum.Enum):
    """
    Application pipeline stage.

    - APPLIED: application sent
    - SCREENING: recruiter or phone screen
    - INTERVIEW: interviews in progress
    - OFFER: offer received
    - REJECTED: closed without an offer
    """
    APPLIED = "applied"
    SCREENING = "screening"
    INTERVIEW = "interview"
    OFFER = "offer"
    REJECTED = "rejected"


class JobMode(str, enum.Enum):
    """Where the work happens."""
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


def generate_job_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Job(Base):
    """
    A single job application tracked by one user.

    clerk_id is the owner identity from the identity provider. Every query
    filters on it, so it is indexed and never NULL.
    """
    __tablename__ = "jobs"

    id = Column(String, primary_key=True, default=generate_job_id)
    clerk_id = Column(String, nullable=False, index=True)

    position = Column(String, nullable=False)
    company = Column(String, nullable=False)
    location = Column(String, nullable=True)

    # Stored as plain strings; membership is checked by the request schema
    status = Column(String, nullable=False, default=JobStatus.APPLIED.value, index=True)
    mode = Column(String, nullable=False)

    applied_date = Column(Date, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Job(id={self.id}, position='{self.position}', company='{self.company}', status={self.status})>"
