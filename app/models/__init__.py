"""
Database models package.
"""

from app.models.job import Job, JobMode, JobStatus

__all__ = ["Job", "JobMode", "JobStatus"]
