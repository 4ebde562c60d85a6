from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from linkshort.utils.timewindow import window_start


class TimelineFilters(BaseModel):
    """Optional "last N units" window for a visit timeline.

    A field that is present (zero included) takes part in the cutoff; when every
    field is None the timeline is unbounded.
    """

    last_years: Optional[int] = Field(None, ge=0, alias="lastYears")
    last_months: Optional[int] = Field(None, ge=0, alias="lastMonths")
    last_days: Optional[int] = Field(None, ge=0, alias="lastDays")
    last_hours: Optional[int] = Field(None, ge=0, alias="lastHours")
    last_minutes: Optional[int] = Field(None, ge=0, alias="lastMinutes")

    model_config = {"populate_by_name": True}

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.last_years, self.last_months, self.last_days, self.last_hours, self.last_minutes)
        )

    def cutoff(self, now: datetime) -> Optional[datetime]:
        return window_start(
            now,
            years=self.last_years,
            months=self.last_months,
            days=self.last_days,
            hours=self.last_hours,
            minutes=self.last_minutes,
        )
