from pydantic import BaseModel, Field
from datetime import datetime

class TimelineEntry(BaseModel):
    date: datetime
    ip_address: str = Field(..., alias="ipAddress")
    user_agent: str = Field(..., alias="userAgent")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_visit(cls, visit) -> "TimelineEntry":
        return cls(date=visit.created_at, ip_address=visit.ip_address, user_agent=visit.user_agent)
