from __future__ import annotations

import logging
import re
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,128}$")
_LOG = logging.getLogger("app.http")


def request_id_for(request: Request) -> str:
    """Reuse a well-formed caller supplied id, otherwise mint one."""
    supplied = (request.headers.get(REQUEST_ID_HEADER) or "").strip()
    if _REQUEST_ID_RE.fullmatch(supplied):
        return supplied
    return uuid4().hex


def install_http_hardening(app: FastAPI) -> None:
    @app.middleware("http")
    async def _list_request_middleware(request: Request, call_next):
        request.state.request_id = request_id_for(request)
        started_at = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            _LOG.exception("%s %s failed request_id=%s", request.method, request.url.path, request.state.request_id)
            raise

        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        # pages are cut from a snapshot taken for this request only
        response.headers["Cache-Control"] = "no-store"
        response.headers[REQUEST_ID_HEADER] = request.state.request_id

        _LOG.info(
            "%s %s?%s status=%s duration_ms=%.2f request_id=%s",
            request.method,
            request.url.path,
            request.url.query,
            response.status_code,
            (perf_counter() - started_at) * 1000.0,
            request.state.request_id,
        )
        return response
