"""
Chirpy Backend — Fileserver Hits Middleware
============================================

What:  Counts every request under the static-file prefix (/app/).
Why:   GET /admin/metrics reports how often the site was visited.
How:   Increments the app's HitCounter before handing the request on, so a
       request is counted whether or not the static server finds the file.

Only paths below the prefix are counted. API, admin and health requests
pass through untouched.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from chirpy.services.hit_counter import HitCounter


class FileserverHitsMiddleware(BaseHTTPMiddleware):
    """Increment `counter` for each request whose path starts with `prefix`/."""

    def __init__(self, app: ASGIApp, counter: HitCounter, prefix: str = "/app"):
        super().__init__(app)
        self.counter = counter
        self.prefix = prefix.rstrip("/") + "/"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path.startswith(self.prefix):
            self.counter.increment()
        return await call_next(request)
