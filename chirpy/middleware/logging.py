"""
Chirpy Backend — Access Log Middleware
=======================================

What:  One access-log line per HTTP request, with fileserver traffic tagged.
How:   Sits between RequestID and FileserverHits, so by the time the response
       comes back a counted /app/ request has already been added to the
       counter; the line for it carries the running total.

Example lines:
    POST /api/validate_chirp → 400 in 1.3ms [a1b2c3d4]
    GET /app/index.html → 200 in 0.8ms [e5f6a7b8] static hits=42

Quiet paths (the health check) are not logged at all. Request bodies are
never logged: chirps and emails are user content.
"""

import logging
import time
from typing import Any, Dict, Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from chirpy.middleware.request_id import request_id_var
from chirpy.services.hit_counter import HitCounter

logger = logging.getLogger("chirpy.access")

DEFAULT_QUIET_PATHS = frozenset({"/api/healthz"})


def level_for_status(status: int) -> int:
    """Server faults are errors, client faults warnings."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class AccessLogMiddleware(BaseHTTPMiddleware):

    def __init__(
        self,
        app: ASGIApp,
        counter: HitCounter,
        static_prefix: str = "/app",
        quiet_paths: Iterable[str] = DEFAULT_QUIET_PATHS,
    ):
        super().__init__(app)
        self.counter = counter
        self.static_prefix = static_prefix.rstrip("/") + "/"
        self.quiet_paths = frozenset(quiet_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.quiet_paths:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        entry: Dict[str, Any] = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": path,
            "status": response.status_code,
            "elapsed_ms": round(elapsed_ms, 2),
            "static": path.startswith(self.static_prefix),
        }
        suffix = ""
        if entry["static"]:
            entry["hits"] = self.counter.snapshot()
            suffix = f" static hits={entry['hits']}"

        logger.log(
            level_for_status(response.status_code),
            "%s %s → %d in %.1fms [%s]%s",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
            entry["request_id"],
            suffix,
            extra=entry,
        )
        return response
