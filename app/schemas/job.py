from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional, Union
from datetime import date, datetime

from app.models.job import JobMode, JobStatus


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True  # Allows conversion from SQLAlchemy models


class JobCreateAndEditRequest(CamelModel):
    """
    Schema for creating or editing a job.

    Shared by create and edit, so every required field must be sent on
    edit too; nothing is filled in from defaults. Optional fields accept
    "" from HTML forms; sanitize_job_input turns those into None before
    anything is stored. Owner fields are not part of the schema and are
    dropped if sent.
    """
    position: str = Field(..., min_length=2, max_length=200)
    company: str = Field(..., min_length=2, max_length=200)
    location: Optional[str] = Field(None, max_length=200)
    status: JobStatus
    mode: JobMode
    applied_date: Union[date, Literal[""], None] = None

    class Config:
        str_strip_whitespace = True
        use_enum_values = True


class JobResponse(CamelModel):
    """Schema for job response"""
    id: str
    clerk_id: str
    position: str
    company: str
    location: Optional[str] = None
    # Plain strings: seeded rows may carry statuses outside the enum
    status: str
    mode: str
    applied_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime


class JobListResponse(BaseModel):
    """One page of jobs plus the total number matching the filters"""
    jobs: List[JobResponse]
    count: int
