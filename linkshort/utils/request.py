from fastapi import Request

from linkshort.core.config import settings


def get_client_ip(request: Request) -> str:
    if settings.TRUST_FORWARDED_FOR:
        xff = request.headers.get("x-forwarded-for")
        if xff:
            return xff.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def get_user_agent(request: Request) -> str:
    return request.headers.get("user-agent") or ""


def get_public_base_url(request: Request) -> str:
    if settings.BASE_URL:
        return settings.BASE_URL.rstrip("/")
    return f"https://{request.headers.get('host', request.url.netloc)}"
