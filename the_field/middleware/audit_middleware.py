# the_field/middleware/audit_middleware.py
from __future__ import annotations

import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from the_field.utils.audit import write_audit_event


def _client_ip(request: Request) -> str:
    # Prefer X-Forwarded-For if present (proxies)
    xff = request.headers.get("x-forwarded-for")
    if xff:
        return xff.split(",")[0].strip()
    return request.client.host if request.client else ""


def _request_ctx(request: Request, request_id: str) -> dict:
    return {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "ip": _client_ip(request),
        "ua": request.headers.get("user-agent", ""),
    }


class AuditMiddleware(BaseHTTPMiddleware):
    """
    Adds request_id and writes an audit record for denied or failed requests.
    Successful requests are not audited; mutations write to activity_logs instead.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as e:
            write_audit_event(
                action="server_error",
                ok=False,
                err=repr(e),
                request_ctx=_request_ctx(request, request_id),
            )
            raise

        response.headers["x-request-id"] = request_id

        if response.status_code in (401, 403):
            write_audit_event(
                action="permission_denied" if response.status_code == 403 else "auth_missing_or_invalid",
                ok=False,
                err=f"HTTP {response.status_code}",
                request_ctx=_request_ctx(request, request_id),
            )
        elif response.status_code >= 500:
            write_audit_event(
                action="request_failed",
                ok=False,
                err=f"HTTP {response.status_code}",
                request_ctx=_request_ctx(request, request_id),
            )

        return response
