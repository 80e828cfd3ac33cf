"""
Chirpy Backend — Request ID Middleware
=======================================

What:  Assigns a short ID to each incoming request and echoes it back.
Why:   Every log line written while serving a request, and the error response
       the client sees, can be correlated through the same ID.
How:   Reuses a client-sent X-Request-ID header or generates one, stores it
       in a ContextVar and request.state, and sets it on the response.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    header_name = "X-Request-ID"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 hex chars are enough to correlate log lines and stay readable
        rid = request.headers.get(self.header_name) or uuid.uuid4().hex[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[self.header_name] = rid
        return response
