# the_field/utils/audit.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from the_field import db


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_audit_indexes() -> None:
    """
    Call this once at app startup (NOT at import time).
    """
    db.audit_events.create_index([("ts", 1)])
    db.audit_events.create_index([("action", 1)])
    db.audit_events.create_index([("request.request_id", 1)])


def write_audit_event(
    *,
    action: str,
    ok: bool,
    err: Optional[str] = None,
    request_ctx: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Write one normalized audit event. Best-effort (never raises).

    Event schema:
    {
      ts, action, ok, err,
      request: {request_id, method, path, ip, ua}
    }
    """
    try:
        db.audit_events.insert_one({
            "ts": _utcnow(),
            "action": action,
            "ok": ok,
            "err": err,
            "request": request_ctx or {},
        })
    except Exception:
        # Never block requests due to audit failure.
        pass
