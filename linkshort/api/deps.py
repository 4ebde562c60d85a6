from fastapi import Depends
from sqlalchemy.orm import Session

from linkshort.db import database
from linkshort.services.resolver import LinkResolver
from linkshort.services.shortener import LinkService
from linkshort.services.visits import VisitService


def get_link_service(db: Session = Depends(database.get_db)) -> LinkService:
    return LinkService(db)


def get_link_resolver(db: Session = Depends(database.get_db)) -> LinkResolver:
    return LinkResolver(db)


def get_visit_service(db: Session = Depends(database.get_db)) -> VisitService:
    return VisitService(db)
