"""Relative time windows ("last N years/months/...") for visit timelines.

Years and months are calendar units: the day of month is kept and clamped to
the last day of the target month, so 31 March minus one month is the last day
of February. Days, hours and minutes are fixed-length. A window reaching
further back than year 1 starts at ``datetime.min``.
"""
import calendar
from datetime import datetime, timedelta
from typing import Optional


def subtract_months(moment: datetime, months: int) -> datetime:
    if months == 0:
        return moment
    total = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return moment.replace(year=year, month=month, day=min(moment.day, last_day))


def window_start(
    now: datetime,
    years: Optional[int] = None,
    months: Optional[int] = None,
    days: Optional[int] = None,
    hours: Optional[int] = None,
    minutes: Optional[int] = None,
) -> Optional[datetime]:
    """Cutoff for a window ending at ``now``, or None when no unit is given.

    Units are applied in a fixed order: years, months, days, hours, minutes.
    """
    units = (years, months, days, hours, minutes)
    if all(unit is None for unit in units):
        return None
    if any(unit is not None and unit < 0 for unit in units):
        raise ValueError("time window units must be non-negative")

    start = now
    try:
        if years:
            start = subtract_months(start, years * 12)
        if months:
            start = subtract_months(start, months)
        if days:
            start -= timedelta(days=days)
        if hours:
            start -= timedelta(hours=hours)
        if minutes:
            start -= timedelta(minutes=minutes)
    except (OverflowError, ValueError):
        # Window reaches past year 1, so it covers every representable moment
        return datetime.min
    return start
