"""Unified API response wrapper.

The ledger API returns this format for every endpoint:
{
    "code": 0,           // 0=success, non-0=error code
    "message": "success",
    "data": ...,         // null on error
    "timestamp": "...",
    "request_id": "..."
}

The server builds it with success_response / error_response;
HttpTransport takes it apart with unwrap_envelope.
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from src.lr_common.errors import EnvelopeDecodeError, TransportError


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    request_id: str = Field(default_factory=lambda: f"req_{uuid.uuid4().hex[:12]}")


def success_response(data: Any = None) -> ApiResponse:
    return ApiResponse(code=0, message="success", data=data)


def error_response(code: int, message: str) -> ApiResponse:
    return ApiResponse(code=code, message=message, data=None)


def unwrap_envelope(payload: Any) -> Any:
    """Validate an ApiResponse payload and return its data.

    Raises EnvelopeDecodeError for anything that is not an envelope and
    TransportError carrying the server message for a non-zero code.
    """
    if not isinstance(payload, dict) or "code" not in payload:
        raise EnvelopeDecodeError("expected an object with a 'code' field")
    try:
        envelope = ApiResponse.model_validate(payload)
    except ValidationError as exc:
        raise EnvelopeDecodeError(str(exc.errors()[0]["msg"])) from exc
    if envelope.code != 0:
        raise TransportError(envelope.message, code=envelope.code)
    return envelope.data
