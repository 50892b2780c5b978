"""
Response envelope. Every endpoint wraps its payload in
{ "success": bool, "id": str, "data": <payload|null>, "errors": <ApiError[]|null> }.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

FAILED_API_REQUEST = "failed-api-request"
INTERNAL_ERROR_CODE = 500


class ApiError(BaseModel):
    """Error reported by the remote service."""
    model_config = {"frozen": True}

    type: str
    code: int = Field(ge=0, le=65535)
    message: str


class NormalizedError(BaseModel):
    """Single error shape surfaced to callers.

    ``internal`` is True when the failure happened locally (transport or
    decoding) and False when the service reported it.
    """
    model_config = {"frozen": True}

    type: str
    code: int = Field(ge=0, le=65535)
    message: str
    internal: bool

    @classmethod
    def from_api_error(cls, error: ApiError) -> "NormalizedError":
        return cls(type=error.type, code=error.code, message=error.message, internal=False)

    @classmethod
    def failed_request(cls, message: str) -> "NormalizedError":
        return cls(type=FAILED_API_REQUEST, code=INTERNAL_ERROR_CODE, message=message, internal=True)


class Envelope(BaseModel, Generic[T]):
    model_config = {"frozen": True}

    success: bool
    id: str
    data: Optional[T] = None
    errors: Optional[list[ApiError]] = None
