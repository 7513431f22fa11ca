"""
Request identity resolution

Every caller gets its own key; anonymous callers are never pooled under a
single shared guest identity.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Header, HTTPException, Request
from slowapi.util import get_remote_address

from flight_booking.core.config import settings


@dataclass(frozen=True)
class Identity:
    user_key: str
    is_admin: bool = False


def resolve_user_key(
    user_id: Optional[str],
    session_id: Optional[str],
    client_ip: Optional[str],
) -> str:
    """X-User-Id, then X-Session-Id, then the client IP"""
    if user_id:
        return f"user:{user_id}"
    if session_id:
        return f"guest:session:{session_id}"
    return f"guest:ip:{client_ip or 'unknown'}"


async def get_identity(
    request: Request,
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
    x_session_id: Optional[str] = Header(None, alias="X-Session-Id"),
) -> Identity:
    return Identity(
        user_key=resolve_user_key(x_user_id, x_session_id, get_remote_address(request)),
        is_admin=bool(x_user_id) and x_user_id in settings.ADMIN_USER_IDS,
    )


async def require_admin(
    request: Request,
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
    x_session_id: Optional[str] = Header(None, alias="X-Session-Id"),
) -> Identity:
    identity = await get_identity(request, x_user_id, x_session_id)
    if not identity.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return identity
