"""
Validation and sanitization of job payloads.

sanitize_job_input is a pure transform: untrusted request body in, column
values out. It never touches the database and does not depend on the request.
"""

from typing import Any, Dict, List

from pydantic import ValidationError

from app.schemas.job import JobCreateAndEditRequest

# Optional columns where "" from a form means "not set"
OPTIONAL_FIELDS = ("location", "applied_date")


class JobValidationError(Exception):
    """Raised when a job payload does not match the schema."""

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        self.fields = [error["field"] for error in errors]
        super().__init__(f"Invalid job data: {', '.join(self.fields)}")


def _format_errors(exc: ValidationError) -> List[Dict[str, str]]:
    errors = []
    for error in exc.errors():
        # Union members add their type to the location, keep the field name only
        field = str(error["loc"][0]) if error["loc"] else "body"
        errors.append({"field": field, "message": error["msg"]})
    return errors


def sanitize_job_input(payload: Any) -> Dict[str, Any]:
    """
    Validate a job payload and normalize it for storage.

    Args:
        payload: Decoded JSON body (any shape)

    Returns:
        Dict of column values (position, company, location, status, mode, applied_date)

    Raises:
        JobValidationError: If the payload is not an object or a field is invalid
    """
    if not isinstance(payload, dict):
        raise JobValidationError([{"field": "body", "message": "Expected a JSON object"}])

    try:
        request = JobCreateAndEditRequest.model_validate(payload)
    except ValidationError as e:
        raise JobValidationError(_format_errors(e)) from e

    data = request.model_dump()
    for field in OPTIONAL_FIELDS:
        if data[field] == "":
            data[field] = None

    return data
