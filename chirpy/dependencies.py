"""
Chirpy Backend — Shared Dependencies
=====================================

What:  FastAPI dependencies for per-application resources, and the JSON body
       decoder used by the POST routes.
Why:   The hit counter and the settings belong to the app instance built by
       create_app(), not to module globals. Handlers receive them through
       Depends(), so a test app with its own Settings and a fresh counter
       never leaks state into another.

Body decoding:
    Clients post JSON with whatever Content-Type their tool picks
    (`curl -d` sends application/x-www-form-urlencoded). The raw bytes are
    decoded as JSON regardless of the header; anything that is not a JSON
    object matching the schema raises RequestDecodeError (400).
"""

import logging
from typing import Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from chirpy.config import Settings
from chirpy.exceptions import RequestDecodeError
from chirpy.services.hit_counter import HitCounter

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def get_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


def get_hit_counter(request: Request) -> HitCounter:
    """The app's fileserver hit counter."""
    return request.app.state.hit_counter


async def decode_json_body(request: Request, schema: Type[SchemaT]) -> SchemaT:
    """
    Decode the request body into `schema`, ignoring Content-Type.

    Raises:
        RequestDecodeError: invalid JSON, not an object, or a field of the
            wrong type.
    """
    raw = await request.body()
    try:
        return schema.model_validate_json(raw)
    except PydanticValidationError as e:
        logger.debug("Body rejected by %s: %s", schema.__name__, str(e))
        raise RequestDecodeError(
            context={
                "schema": schema.__name__,
                "content_type": request.headers.get("content-type", ""),
                "error_count": e.error_count(),
            }
        ) from e
