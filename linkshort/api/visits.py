from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
import logging

from linkshort.api.deps import get_visit_service
from linkshort.core.errors import LinkNotFoundError
from linkshort.schemas.TimelineEntry import TimelineEntry
from linkshort.schemas.TimelineFilters import TimelineFilters
from linkshort.schemas.VisitStats import VisitStats
from linkshort.services.visits import VisitService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/visits", tags=["visits"])


def _not_found(link_id: int):
    logger.warning(f"Visits 404: Link not found: {link_id}")
    return HTTPException(status_code=404, detail="Link not found")


@router.get("/data", response_model=VisitStats)
def get_visits_endpoint(
    link_id: int = Query(..., alias="linkId"),
    service: VisitService = Depends(get_visit_service),
):
    """Number of visits and the distinct IP address / user agent pairs for a link."""
    try:
        return service.get_visits(link_id)
    except LinkNotFoundError:
        raise _not_found(link_id)


@router.get("/timeline", response_model=List[TimelineEntry])
def get_visits_timeline_endpoint(
    link_id: int = Query(..., alias="linkId"),
    last_years: Optional[int] = Query(None, ge=0, alias="lastYears"),
    last_months: Optional[int] = Query(None, ge=0, alias="lastMonths"),
    last_days: Optional[int] = Query(None, ge=0, alias="lastDays"),
    last_hours: Optional[int] = Query(None, ge=0, alias="lastHours"),
    last_minutes: Optional[int] = Query(None, ge=0, alias="lastMinutes"),
    service: VisitService = Depends(get_visit_service),
):
    """Visits for a link in time order, optionally limited to the last N years/months/days/hours/minutes."""
    filters = TimelineFilters(
        last_years=last_years,
        last_months=last_months,
        last_days=last_days,
        last_hours=last_hours,
        last_minutes=last_minutes,
    )
    try:
        return service.get_visits_timeline(link_id, filters)
    except LinkNotFoundError:
        raise _not_found(link_id)


@router.get("/filter", response_model=List[TimelineEntry])
def get_visits_filter_endpoint(
    link_id: int = Query(..., alias="linkId"),
    ip_address: str = Query(..., alias="ipAddress"),
    user_agent: str = Query("", alias="userAgent"),
    service: VisitService = Depends(get_visit_service),
):
    try:
        return service.get_visits_filter(link_id, ip_address, user_agent)
    except LinkNotFoundError:
        raise _not_found(link_id)
