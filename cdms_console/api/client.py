"""Thin requests-based client for the CDMS REST API."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from cdms_console.core.config import Settings
from cdms_console.core.errors import HttpStatusError, MalformedResponseError, NetworkError

logger = logging.getLogger(__name__)


class ApiClient:
    """Issue single-attempt requests and translate failures into ``ApiError``.

    A bearer token is attached when configured; without one the request goes
    out with no ``Authorization`` header.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings, session: Optional[requests.Session] = None) -> "ApiClient":
        return cls(
            settings.api_base_url,
            token=settings.api_token,
            timeout=settings.timeout,
            session=session,
        )

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def patch(self, path: str, body: Dict[str, Any]) -> Any:
        return self.request("PATCH", path, json=body)

    def post_file(self, path: str, field_name: str, file_name: str, payload: bytes) -> Any:
        """POST a single file as multipart form data."""

        return self.request("POST", path, files={field_name: (file_name, payload)})

    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send one request and return the decoded JSON body (``None`` for empty bodies)."""

        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(),
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            logger.warning("API request failed: %s %s (%s)", method, path, exc)
            raise NetworkError(str(exc)) from exc

        if not response.ok:
            message = _error_message(response)
            logger.warning("API request failed: %s %s -> %s %s", method, path, response.status_code, message)
            raise HttpStatusError(response.status_code, message)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("API response for %s %s was not JSON", method, path)
            raise MalformedResponseError(f"{method} {path} returned a non-JSON body") from exc

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers


def _error_message(response: requests.Response) -> str:
    """Prefer the server's ``{"message": ...}`` body over a generic status line."""

    fallback = f"HTTP error! status: {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return fallback
