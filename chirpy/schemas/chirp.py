"""
Chirpy Backend — Chirp Request/Response Schemas
================================================

What:  Pydantic models for POST /api/validate_chirp.
Why:   The route decodes the raw body into ChirpRequest whatever its
       Content-Type; a body that does not fit never reaches the validator
       and is answered with 400 "Invalid request body".
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class ChirpRequest(BaseModel):
    """
    What:  The submitted chirp. Transient, never stored.

    `body` may be empty, absent or null; the last two decode to "". Its
    length rule (140 code points) is enforced by the validator service
    rather than by a Field constraint, so an over-long chirp produces
    "Chirp is too long" instead of a generic decode error.
    """
    body: str = Field(default="", description="Chirp text to validate and clean")

    @field_validator("body", mode="before")
    @classmethod
    def null_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class ChirpResponse(BaseModel):
    """Accepted chirp. `cleaned_body` equals the input when nothing was masked."""
    cleaned_body: str = Field(description="Chirp text with banned words replaced by ****")
