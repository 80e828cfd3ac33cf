"""
Chirpy Backend — Admin Route Handlers
======================================

What:  GET /admin/metrics (HTML hit count) and POST /admin/reset.
Who:   Operators. There is no authentication; the reset endpoint is guarded
       only by the PLATFORM setting (dev guard).
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.config import Settings
from chirpy.database import get_db_session
from chirpy.dependencies import get_hit_counter, get_settings
from chirpy.services.admin_service import admin_service
from chirpy.services.hit_counter import HitCounter

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get(
    "/metrics",
    response_class=HTMLResponse,
    responses={500: {"description": "Metrics template could not be read"}},
    summary="Fileserver hit count",
)
async def metrics(
    app_settings: Settings = Depends(get_settings),
    counter: HitCounter = Depends(get_hit_counter),
) -> HTMLResponse:
    page = await admin_service.render_metrics(app_settings.admin_template_path, counter)
    return HTMLResponse(page)


@router.post(
    "/reset",
    response_class=PlainTextResponse,
    responses={
        403: {"description": "Not a development deployment"},
        500: {"description": "Users could not be deleted (hit counter already reset)"},
    },
    summary="Reset hit counter and delete all users (dev only)",
)
async def reset(
    app_settings: Settings = Depends(get_settings),
    counter: HitCounter = Depends(get_hit_counter),
    db: AsyncSession = Depends(get_db_session),
) -> PlainTextResponse:
    """
    Error responses (handled by global exception handlers):
        HTTP 403: ForbiddenError
        HTTP 500: PersistenceError
    """
    await admin_service.reset_all(
        platform=app_settings.platform,
        counter=counter,
        db=db,
    )
    return PlainTextResponse("Hits and users reset to 0")
