"""Exceptions raised by the API client and the edit workflow."""
from __future__ import annotations

from typing import Dict, Optional


class ApiError(Exception):
    """Base class for failures talking to the CDMS API."""


class NetworkError(ApiError):
    """The request never produced an HTTP response (refused, DNS, timeout)."""


class HttpStatusError(ApiError):
    """The server answered with a 4xx/5xx status."""

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.message = message or f"HTTP error! status: {status_code}"
        super().__init__(self.message)


class MalformedResponseError(ApiError):
    """The response body was not JSON or lacked the expected shape."""


class EditValidationError(ValueError):
    """Draft edits failed local validation; nothing was sent."""

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = dict(errors)
        summary = "; ".join(f"{field}: {message}" for field, message in self.errors.items())
        super().__init__(summary or "invalid edits")
