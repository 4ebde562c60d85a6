from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import Optional
import logging

from linkshort.core.errors import LinkNotFoundError, ShortCodeExhaustedError
from linkshort.db import repository
from linkshort.db.models import Link
from linkshort.schemas.ShortLinkResponse import ShortLinkResponse
from linkshort.services.codes import ShortCodeGenerator


logger = logging.getLogger(__name__)


class LinkService:

    def __init__(self, db: Session, code_generator: Optional[ShortCodeGenerator] = None):
        self.db = db
        self.code_generator = code_generator or ShortCodeGenerator(db)

    @staticmethod
    def build_short_link(link: Link, base_url: str) -> ShortLinkResponse:
        return ShortLinkResponse(url=f"{base_url}/{link.short_url}", link_id=link.id)

    def shorten(self, url: str, base_url: str) -> ShortLinkResponse:
        max_attempts = self.code_generator.max_attempts

        for attempt in range(1, max_attempts + 1):
            short_url = self.code_generator.generate()
            try:
                link = repository.create_link(self.db, url, short_url)
            except IntegrityError:
                # Another request claimed the code between the check and the insert
                logger.info(f"Short code {short_url} taken at insert, retrying ({attempt}/{max_attempts})")
                continue

            logger.info(f"Shortened {url[:50]}... to {link.short_url} (link {link.id})")
            return self.build_short_link(link, base_url)

        raise ShortCodeExhaustedError(max_attempts)

    def get_short_url(self, link_id: int, base_url: str) -> ShortLinkResponse:
        link = repository.get_link_by_id(self.db, link_id)
        if link is None:
            raise LinkNotFoundError(link_id)
        return self.build_short_link(link, base_url)
