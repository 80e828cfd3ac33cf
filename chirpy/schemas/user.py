"""
Chirpy Backend — User Request/Response Schemas
===============================================

What:  Pydantic models for POST /api/users.
Why:   The response model controls exactly which columns leave the server;
       it is populated straight from the ORM row (from_attributes).
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


class UserCreateRequest(BaseModel):
    """
    Email is free text; format validation is deliberately absent.
    An absent or null email decodes to "".
    """
    email: str = Field(default="", description="Email address of the new user")

    @field_validator("email", mode="before")
    @classmethod
    def null_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class UserResponse(BaseModel):
    """
    What:  Public representation of a stored user.
    Who:   Returned by POST /api/users with HTTP 201 Created.
    """
    id: uuid.UUID = Field(description="Unique user identifier (UUID)")
    created_at: datetime = Field(description="When the user was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the user was last updated (UTC ISO 8601)")
    email: str = Field(description="Email address")

    model_config = {"from_attributes": True}
