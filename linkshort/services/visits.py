from datetime import datetime
from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from linkshort.core.errors import LinkNotFoundError
from linkshort.db import repository
from linkshort.db.models import Link, utcnow
from linkshort.schemas.TimelineEntry import TimelineEntry
from linkshort.schemas.TimelineFilters import TimelineFilters
from linkshort.schemas.VisitStats import VisitStats

logger = logging.getLogger(__name__)


class VisitService:
    """Read-only aggregates over the visits of a single link."""

    def __init__(self, db: Session):
        self.db = db

    def _require_link(self, link_id: int) -> Link:
        link = repository.get_link_by_id(self.db, link_id)
        if link is None:
            raise LinkNotFoundError(link_id)
        return link

    def get_visits(self, link_id: int) -> VisitStats:
        """Total visit count plus the distinct (ip, user agent) pairs as parallel lists."""
        link = self._require_link(link_id)
        count = repository.count_visits(self.db, link.id)
        visitors = repository.distinct_visitors(self.db, link.id)
        return VisitStats(
            count=count,
            ip_addresses=[ip for ip, _ in visitors],
            user_agents=[ua for _, ua in visitors],
        )

    def get_visits_timeline(
        self,
        link_id: int,
        filters: Optional[TimelineFilters] = None,
        now: Optional[datetime] = None,
    ) -> List[TimelineEntry]:
        """Visits in ascending time order, optionally limited to a recent window.

        An existing link with no matching visits yields an empty list.
        """
        link = self._require_link(link_id)
        since = None
        if filters is not None and not filters.is_empty:
            since = filters.cutoff(now or utcnow())
            logger.debug(f"Timeline for link {link.id} since {since.isoformat()}")
        visits = repository.list_visits(self.db, link.id, since=since)
        return [TimelineEntry.from_visit(v) for v in visits]

    def get_visits_filter(self, link_id: int, ip_address: str, user_agent: str) -> List[TimelineEntry]:
        link = self._require_link(link_id)
        visits = repository.list_visits_matching(self.db, link.id, ip_address, user_agent)
        return [TimelineEntry.from_visit(v) for v in visits]
