"""Response envelope construction.

Every endpoint answers with {Status, Message, Data}. The HTTP status
is derived from the Outcome's error kind through STATUS_BY_ERROR.
"""

from __future__ import annotations

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from movieapi.models.domain import ErrorKind, Outcome
from movieapi.models.types import ResponseEnvelope

STATUS_BY_ERROR: dict[ErrorKind | None, int] = {
    None: 200,
    "validation": 400,
    "not_found": 400,
    "fault": 400,
}


def build_envelope(outcome: Outcome) -> ResponseEnvelope:
    """Wrap an Outcome, serializing model payloads with wire aliases."""
    data = outcome.data
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True, mode="json")
    return ResponseEnvelope(status=outcome.ok, message=outcome.message, data=data)


def envelope_response(outcome: Outcome) -> JSONResponse:
    """Turn an Outcome into a JSON response."""
    envelope = build_envelope(outcome)
    return JSONResponse(
        status_code=STATUS_BY_ERROR[outcome.error],
        content=envelope.model_dump(by_alias=True, mode="json"),
    )
