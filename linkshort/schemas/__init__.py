# re-export common schemas for simpler imports
from .ShortenRequest import ShortenRequest
from .ShortLinkResponse import ShortLinkResponse
from .VisitStats import VisitStats
from .TimelineEntry import TimelineEntry
from .TimelineFilters import TimelineFilters

__all__ = [
    "ShortenRequest",
    "ShortLinkResponse",
    "VisitStats",
    "TimelineEntry",
    "TimelineFilters",
]
