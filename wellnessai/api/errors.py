"""Exceptions raised by the API layer."""

from typing import Any

import httpx
from pydantic import BaseModel


class ApiError(Exception):
    """Raised when a request fails.

    Attributes:
        message: Human readable description (server ``message`` when present).
        status_code: HTTP status, or None when no response was received.
        payload: Decoded response body, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        payload = _decode_body(response)
        return cls(
            _extract_message(payload) or f"API Error: {response.status_code}",
            status_code=response.status_code,
            payload=payload,
        )


class NetworkError(ApiError):
    """Raised when the server could not be reached."""


class UnauthorizedError(ApiError):
    """Raised on 401 after stored credentials have been cleared."""


class ResponseFormatError(ApiError):
    """Raised when a successful response body does not match the expected model."""


class DocumentValidationError(BaseModel):
    """A single field-level validation failure."""

    field: str
    message: str
    code: str


class DocumentApiError(ApiError):
    """Structured error for the documents API.

    Carries a machine-readable ``code`` and optional field-level
    ``validation_errors``.
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int | None = None,
        validation_errors: list[DocumentValidationError] | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.code = code
        self.validation_errors = validation_errors or []

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _extract_message(payload: Any) -> str | None:
    """Pull the server ``message`` out of an error body.

    NestJS-style validation errors send a list of messages; they are joined.
    """
    if not isinstance(payload, dict):
        return None
    message = payload.get("message") or payload.get("detail")
    if isinstance(message, list):
        return ", ".join(str(m) for m in message)
    if message is None:
        return None
    return str(message)
