"""
Chirpy Backend — User Service (Persistence Collaborator)
=========================================================

What:  The two user-store operations the API needs: create and reset.
Who:   create_user ← POST /api/users; reset_users ← AdminService.reset_all.
How:   Works on the request's AsyncSession. Changes are flushed here and
       committed by get_db_session when the request succeeds.

Error Handling Strategy:
    Any SQLAlchemy error (unique email violation, lost connection, missing
    table) is wrapped in PersistenceError with a fixed message. The driver's
    own message goes to the log and to the exception context only.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.exceptions import PersistenceError
from chirpy.models.user import User
from chirpy.schemas.user import UserResponse

logger = logging.getLogger(__name__)


class UserService:
    """Stateless; receives the session for each call."""

    async def create_user(self, db: AsyncSession, email: str) -> UserResponse:
        """
        Insert a user and return its public representation.

        Raises:
            PersistenceError: the insert failed (including duplicate email).
        """
        now = datetime.now(timezone.utc)
        user = User(email=email, created_at=now, updated_at=now)
        try:
            db.add(user)
            # Flush assigns the id and surfaces constraint errors before commit
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to create user: %s", str(e))
            raise PersistenceError(
                message="Failed to create user",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("User created: %s", user.id)
        return UserResponse.model_validate(user)

    async def reset_users(self, db: AsyncSession) -> int:
        """
        Delete every user. Returns the number of rows removed.

        Raises:
            PersistenceError: the delete failed.
        """
        try:
            result = await db.execute(delete(User))
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to reset users: %s", str(e))
            raise PersistenceError(
                message="Failed to reset users",
                context={"error_type": type(e).__name__},
            ) from e

        deleted = result.rowcount or 0
        logger.info("Users table reset: %d rows deleted", deleted)
        return deleted


user_service = UserService()
