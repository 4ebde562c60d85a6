from fastapi import APIRouter, Depends, HTTPException, status, Query, Request
import logging

from linkshort.api.deps import get_link_service
from linkshort.core.errors import LinkNotFoundError, ShortCodeExhaustedError
from linkshort.schemas.ShortenRequest import ShortenRequest
from linkshort.schemas.ShortLinkResponse import ShortLinkResponse
from linkshort.services.shortener import LinkService
from linkshort.utils.request import get_public_base_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shortener", tags=["shortener"])

@router.post("/shorten", response_model=ShortLinkResponse, status_code=status.HTTP_201_CREATED)
def shorten_url_endpoint(
    shorten_request: ShortenRequest,
    request: Request,
    service: LinkService = Depends(get_link_service),
):
    try:
        short_link = service.shorten(shorten_request.url, get_public_base_url(request))
    except ShortCodeExhaustedError as e:
        logger.error(f"Failed to create short URL for {shorten_request.url[:50]}... due to: {str(e)}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    logger.info(f"API success: Shortened {shorten_request.url[:50]}... to {short_link.url}")
    return short_link

@router.get("/data", response_model=ShortLinkResponse)
def get_short_url_endpoint(
    request: Request,
    link_id: int = Query(..., alias="linkId"),
    service: LinkService = Depends(get_link_service),
):
    """Rebuild the public short link for an existing link id."""
    try:
        return service.get_short_url(link_id, get_public_base_url(request))
    except LinkNotFoundError:
        logger.warning(f"Short URL 404: Link not found: {link_id}")
        raise HTTPException(status_code=404, detail="Link not found")
