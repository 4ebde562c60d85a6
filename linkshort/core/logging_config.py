import logging
import sys

from linkshort.core.config import settings

LOGGER_NAME = "linkshort"
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s'

# Third-party loggers that would otherwise drown the service's own records
QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "httpx": logging.WARNING,
}


def configure_logging(level=None):
    """Send records to stdout and return the package logger.

    Module loggers are created with ``logging.getLogger(__name__)`` and so are
    children of ``linkshort``; its level comes from ``LOG_LEVEL``. Third-party
    loggers stay at WARNING.
    """
    level = (level or settings.LOG_LEVEL).upper()

    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Uvicorn errors go through the root handler; access lines are redundant
    # with the per-request logs in the routers.
    logging.getLogger("uvicorn.error").propagate = True
    logging.getLogger("uvicorn.access").disabled = True

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)

    return logger
