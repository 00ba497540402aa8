"""
Error types and JSON error responses for the chat API.

Every error the handler can surface derives from ``ChatError`` and carries the
HTTP status it maps to. ``MalformedUpstreamPayload`` is the exception: it is
raised while decoding classifier output and always recovered locally.

Usage:
    from clarifychat.errors import InvalidRequest, error_response

    raise InvalidRequest("Invalid request format")

    # In exception handler:
    return error_response(message=exc.message, status_code=exc.status_code, details=exc.details)
"""

from __future__ import annotations

from typing import Optional

from fastapi.responses import JSONResponse

from clarifychat.schemas import ErrorBody

NO_DETAILS = "No additional details"


class ChatError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details


class InvalidRequest(ChatError):
    """Request body is missing, not JSON, or has no usable messages."""

    status_code = 400


class ConfigurationError(ChatError):
    """Service is missing required configuration (e.g. the OpenAI key)."""

    status_code = 500


class UpstreamFailure(ChatError):
    """An LLM call failed; carries the upstream status when one is known."""

    status_code = 500


class MalformedUpstreamPayload(Exception):
    """Classifier output could not be decoded into the expected JSON shape."""


def error_response(message: str, status_code: int, details: Optional[str] = None) -> JSONResponse:
    """
    Create a JSON error response of the shape ``{"error": ..., "details": ...}``.

    Args:
        message: Human-readable error message
        status_code: HTTP status code
        details: Optional extra detail text (omitted when None)

    Returns:
        JSONResponse with the error body
    """
    body = ErrorBody(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def chat_error_response(exc: ChatError) -> JSONResponse:
    return error_response(exc.message, exc.status_code, exc.details)
