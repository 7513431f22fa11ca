"""
Rate limiting using SlowAPI
"""
from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from flight_booking.core.config import settings


def get_identifier(request: Request) -> str:
    """
    Get identifier for rate limiting
    Uses the X-User-Id header when present, otherwise the client IP
    """
    user_id = request.headers.get('X-User-Id')
    if user_id:
        return f"user:{user_id}"
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_identifier,
    default_limits=["100/minute"],
    storage_uri=settings.RATE_LIMIT_STORAGE_URL,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)
