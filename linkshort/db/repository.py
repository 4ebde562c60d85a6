from datetime import datetime
from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from linkshort.db.models import Link, Visit

logger = logging.getLogger(__name__)


def get_link_by_short_url(db: Session, short_url: str) -> Optional[Link]:
    return db.query(Link).filter(Link.short_url == short_url).first()

def get_link_by_id(db: Session, link_id: int) -> Optional[Link]:
    return db.get(Link, link_id)

def short_url_exists(db: Session, short_url: str) -> bool:
    return db.query(Link.id).filter(Link.short_url == short_url).first() is not None


def _commit_and_refresh(db: Session, instance):
    try:
        db.add(instance)
        db.commit()
        db.refresh(instance)
        return instance
    except IntegrityError as e:
        db.rollback()
        logger.warning("IntegrityError persisting %r: %s", instance, str(e.orig) if hasattr(e, "orig") else str(e))
        raise

def create_link(db: Session, url: str, short_url: str) -> Link:
    return _commit_and_refresh(db, Link(url=url, short_url=short_url))

def create_visit(db: Session, link_id: int, ip_address: str, user_agent: str) -> Visit:
    return _commit_and_refresh(
        db, Visit(link_id=link_id, ip_address=ip_address, user_agent=user_agent)
    )


def count_visits(db: Session, link_id: int) -> int:
    return db.query(func.count(Visit.id)).filter(Visit.link_id == link_id).scalar() or 0

def distinct_visitors(db: Session, link_id: int) -> List[Tuple[str, str]]:
    """(ip_address, user_agent) pairs seen for a link, in order of first visit."""
    rows = (
        db.query(Visit.ip_address, Visit.user_agent)
        .filter(Visit.link_id == link_id)
        .group_by(Visit.ip_address, Visit.user_agent)
        .order_by(func.min(Visit.id))
        .all()
    )
    return [(ip, ua) for ip, ua in rows]

def list_visits(db: Session, link_id: int, since: Optional[datetime] = None) -> List[Visit]:
    query = db.query(Visit).filter(Visit.link_id == link_id)
    if since is not None:
        query = query.filter(Visit.created_at >= since)
    return query.order_by(Visit.created_at.asc(), Visit.id.asc()).all()

def list_visits_matching(db: Session, link_id: int, ip_address: str, user_agent: str) -> List[Visit]:
    return (
        db.query(Visit)
        .filter(
            Visit.link_id == link_id,
            Visit.ip_address == ip_address,
            Visit.user_agent == user_agent,
        )
        .order_by(Visit.created_at.asc(), Visit.id.asc())
        .all()
    )
