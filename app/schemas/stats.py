from pydantic import BaseModel


class MonthlyApplications(BaseModel):
    """Applications counted for one calendar month, e.g. {"date": "Jan 25", "count": 2}"""
    date: str
    count: int
