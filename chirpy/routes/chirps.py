"""
Chirpy Backend — Chirp Validation Route
========================================

What:  POST /api/validate_chirp: checks a chirp and returns its cleaned text.
How:   The raw body is decoded as JSON into ChirpRequest whatever the
       Content-Type (decode failures are answered 400 by the global handler),
       then ChirpValidator applies the length and masking rules.

Request Flow:
    {"body": "..."} → ChirpRequest → chirp_validator.validate() → {"cleaned_body": "..."}
"""

from fastapi import APIRouter, Request

from chirpy.dependencies import decode_json_body
from chirpy.schemas.chirp import ChirpRequest, ChirpResponse
from chirpy.services.chirp_validator import chirp_validator

router = APIRouter(prefix="/api", tags=["Chirps"])


@router.post(
    "/validate_chirp",
    response_model=ChirpResponse,
    responses={
        200: {"description": "Chirp accepted; banned words masked"},
        400: {"description": "Chirp is too long, or the body is malformed"},
    },
    summary="Validate and clean a chirp",
)
async def validate_chirp(request: Request) -> ChirpResponse:
    """
    Validate a chirp.

    Error responses (handled by global exception handlers):
        HTTP 400 "Chirp is too long": ChirpTooLongError
        HTTP 400 "Invalid request body": RequestDecodeError
    """
    payload = await decode_json_body(request, ChirpRequest)
    cleaned = chirp_validator.validate(payload.body)
    return ChirpResponse(cleaned_body=cleaned)
