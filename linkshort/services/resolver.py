from typing import Optional
import logging

from sqlalchemy.orm import Session

from linkshort.core.errors import LinkNotFoundError
from linkshort.db import repository
from linkshort.utils.encoding import is_valid_short_code

logger = logging.getLogger(__name__)


class LinkResolver:

    def __init__(self, db: Session):
        self.db = db

    def resolve(self, short_url: str, ip_address: str, user_agent: Optional[str] = None) -> str:
        """Return the target URL for a short code and record the visit.

        Raises LinkNotFoundError, without recording anything, for unknown codes.
        """
        link = None
        if is_valid_short_code(short_url):
            link = repository.get_link_by_short_url(self.db, short_url)
        if link is None:
            raise LinkNotFoundError(short_url)

        repository.create_visit(self.db, link.id, ip_address, user_agent or "")
        logger.debug(f"Visit recorded for {short_url} from {ip_address}")
        return link.url
