"""
Chirpy Backend — User Route Handlers
=====================================

What:  POST /api/users: create a user from an email address.
How:   Decodes UserCreateRequest from the raw body (any Content-Type), delegates to UserService, returns 201.
"""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.database import get_db_session
from chirpy.dependencies import decode_json_body
from chirpy.schemas.user import UserCreateRequest, UserResponse
from chirpy.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])


@router.post(
    "/users",
    status_code=201,
    response_model=UserResponse,
    responses={
        201: {"description": "User created", "model": UserResponse},
        400: {"description": "Malformed request body"},
        500: {"description": "User could not be stored"},
    },
    summary="Create a user",
)
async def create_user(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    """
    Create a user.

    Error responses (handled by global exception handlers):
        HTTP 400: RequestDecodeError
        HTTP 500: PersistenceError (e.g. the email is already registered)
    """
    payload = await decode_json_body(request, UserCreateRequest)
    return await user_service.create_user(db=db, email=payload.email)
