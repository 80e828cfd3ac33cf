"""
Chirpy Backend — Admin Service
===============================

What:  The admin metrics page and the development-only reset of the hit
       counter and the user store.
Who:   Called by GET /admin/metrics and POST /admin/reset.

Metrics page:
    The HTML template is read on every request (aiofiles, so the event loop
    is not blocked) and rendered with Jinja2; {{ hits }} is a snapshot of the
    counter. Editing the template takes effect without a restart. Undefined
    variables are errors rather than empty strings.

Reset sequence:
    1. Dev guard: platform must be "dev", otherwise ForbiddenError and
       nothing is touched.
    2. Counter reset to 0.
    3. Users deleted through UserService.

    Steps 2 and 3 are not transactional. If step 3 fails the counter is
    already 0 while the users are still present; the request answers 500
    and a second reset repairs the state. The counter cannot be rolled back
    because concurrent /app/ requests may have incremented it in between.

The platform is passed in by the caller (from the app's Settings) instead of
being read from the environment here.
"""

import logging

import aiofiles
from jinja2 import Environment, StrictUndefined, TemplateError, select_autoescape
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.exceptions import ForbiddenError, TemplateReadError
from chirpy.services.hit_counter import HitCounter
from chirpy.services.user_service import user_service

logger = logging.getLogger(__name__)

DEV_PLATFORM = "dev"

_jinja_env = Environment(
    autoescape=select_autoescape(["html", "xml"]),
    undefined=StrictUndefined,
)


class AdminService:

    async def render_metrics(self, template_path: str, counter: HitCounter) -> str:
        """
        Render the admin metrics page.

        Raises:
            TemplateReadError: the template is missing or unreadable, fails to
                parse, or uses a variable other than hits.
        """
        try:
            async with aiofiles.open(template_path, mode="r", encoding="utf-8") as f:
                template = await f.read()
        except OSError as e:
            logger.error("Cannot read metrics template %s: %s", template_path, str(e))
            raise TemplateReadError(context={"template_path": template_path}) from e

        try:
            return _jinja_env.from_string(template).render(hits=counter.snapshot())
        except TemplateError as e:
            logger.error("Cannot render metrics template %s: %s", template_path, str(e))
            raise TemplateReadError(context={"template_path": template_path}) from e

    async def reset_all(
        self,
        platform: str,
        counter: HitCounter,
        db: AsyncSession,
    ) -> None:
        """
        Reset the hit counter and delete all users.

        Raises:
            ForbiddenError: platform is not "dev" (counter left unchanged).
            PersistenceError: the user reset failed (counter already reset).
        """
        if platform != DEV_PLATFORM:
            logger.warning("Reset refused: platform is '%s'", platform or "<unset>")
            raise ForbiddenError(context={"platform": platform})

        previous = counter.reset()
        logger.info("Hit counter reset (was %d)", previous)

        await user_service.reset_users(db)


admin_service = AdminService()
