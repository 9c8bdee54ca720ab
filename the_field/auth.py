# the_field/auth.py
from datetime import datetime, timezone
from typing import Optional

from pymongo.errors import PyMongoError

from the_field import settings
from the_field.db import session_repo
from the_field.errors import Unauthenticated, Unauthorized

BEARER_PREFIX = "Bearer "


def bearer_session_id(auth_header: Optional[str]) -> str:
    """
    Pull the opaque session id out of `Authorization: Bearer <sessionId>`.
    The prefix is case-sensitive and the id must be non-empty.
    """
    if not auth_header or len(auth_header) <= len(BEARER_PREFIX) or not auth_header.startswith(BEARER_PREFIX):
        raise Unauthorized()
    return auth_header[len(BEARER_PREFIX):]


def _expired(session: dict) -> bool:
    expires_at = session.get("expires_at")
    if not settings.SESSION_TTL_CHECK or expires_at is None:
        return False
    # mongo hands back naive datetimes in UTC
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return expires_at <= datetime.now(timezone.utc)


def get_session(session_id: str) -> dict:
    try:
        session = session_repo.get_session(session_id)
    except PyMongoError as e:
        raise Unauthenticated(str(e))

    if not session:
        raise Unauthenticated("session not found")
    if _expired(session):
        raise Unauthenticated("session expired")
    return session
