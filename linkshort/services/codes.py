from typing import Callable, Optional
import logging

from sqlalchemy.orm import Session

from linkshort.core.config import MAX_SHORT_CODE_LENGTH, settings
from linkshort.core.errors import ShortCodeExhaustedError
from linkshort.db import repository
from linkshort.utils.encoding import generate_short_code

logger = logging.getLogger(__name__)


class ShortCodeGenerator:
    """Draws random short codes until one is not used by any Link."""

    def __init__(
        self,
        db: Session,
        length: Optional[int] = None,
        max_attempts: Optional[int] = None,
        random_code: Callable[[int], str] = generate_short_code,
    ):
        self.db = db
        self.length = length if length is not None else settings.SHORT_CODE_LENGTH
        self.max_attempts = max_attempts if max_attempts is not None else settings.SHORT_CODE_MAX_ATTEMPTS
        if not 1 <= self.length <= MAX_SHORT_CODE_LENGTH:
            raise ValueError(f"short code length must be between 1 and {MAX_SHORT_CODE_LENGTH}")
        self._random_code = random_code

    def generate(self) -> str:
        for attempt in range(1, self.max_attempts + 1):
            code = self._random_code(self.length)
            if not repository.short_url_exists(self.db, code):
                return code
            logger.info(f"Short code collision on attempt {attempt}/{self.max_attempts}")

        logger.error(f"Gave up generating a short code after {self.max_attempts} attempts")
        raise ShortCodeExhaustedError(self.max_attempts)
