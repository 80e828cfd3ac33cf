"""
Chirpy Backend — Health Check Route
====================================

What:  Liveness probe for load balancers and container health checks.
How:   Answers 200 with the fixed plain-text body "OK". It does not touch the
       database: a liveness probe should only say the process is serving.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="/api", tags=["Health"])


@router.get(
    "/healthz",
    response_class=PlainTextResponse,
    summary="Service health check",
)
async def health_check() -> PlainTextResponse:
    return PlainTextResponse("OK")
