from fastapi import APIRouter, Depends, HTTPException, status, Request
from fastapi.responses import RedirectResponse
import logging

from linkshort.api.deps import get_link_resolver
from linkshort.core.errors import LinkNotFoundError
from linkshort.services.resolver import LinkResolver
from linkshort.utils.request import get_client_ip, get_user_agent

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/{short_code}", tags=["redirect"])
def redirect_to_url_endpoint(
    short_code: str,
    request: Request,
    resolver: LinkResolver = Depends(get_link_resolver),
):
    """
    Access the shortened URL and get redirected to the original long URL.
    """
    try:
        url = resolver.resolve(short_code, get_client_ip(request), get_user_agent(request))
    except LinkNotFoundError:
        logger.warning(f"Redirect 404: Short code not found: {short_code}")
        raise HTTPException(status_code=404, detail="Link not found")

    logger.info(f"Redirect {short_code} -> {url[:50]}...")
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
