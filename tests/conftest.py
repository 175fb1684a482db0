"""Pytest configuration to make the local package importable without installation."""
import json
import sys
from pathlib import Path

import pytest
import requests

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import cdms_console.api.client as client_module
import cdms_console.core.config as config_module
from cdms_console.api.client import ApiClient
from cdms_console.cli import main as cli_main

BASE_URL = "http://cdms.test"


class FakeResponse:
    """Just enough of ``requests.Response`` for the API client."""

    def __init__(self, status_code: int = 200, payload=None, text: str | None = None) -> None:
        self.status_code = status_code
        if text is not None:
            self.content = text.encode("utf-8")
            self._payload = None
            self._is_json = False
        elif payload is None:
            self.content = b""
            self._payload = None
            self._is_json = False
        else:
            self.content = json.dumps(payload).encode("utf-8")
            self._payload = payload
            self._is_json = True

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if not self._is_json:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Replay queued responses (or raise queued exceptions) and record every call."""

    def __init__(self) -> None:
        self.responses: list = []
        self.calls: list[dict] = []

    def queue(self, *responses) -> "FakeSession":
        self.responses.extend(responses)
        return self

    def request(self, method, url, headers=None, timeout=None, **kwargs):
        self.calls.append({"method": method, "url": url, "headers": headers or {}, "timeout": timeout, **kwargs})
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep developer env vars and secrets files out of the tests."""

    for key in ("CDMS_API_BASE_URL", "CDMS_API_TOKEN", "CDMS_API_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("CDMS_ENV_FILE", str(tmp_path / "missing.env"))
    monkeypatch.setattr(config_module, "_ENV_LOADED", False)


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(fake_session: FakeSession) -> ApiClient:
    """API client wired to the fake session with a bearer token."""

    return ApiClient(BASE_URL, token="secret-token", timeout=5.0, session=fake_session)


@pytest.fixture
def page_of():
    """Build a list response with ``count`` numbered records."""

    def _page(count: int, start: int = 1, total_count: int | None = None, **fields) -> dict:
        data = [{"id": start + offset, **fields} for offset in range(count)]
        body = {"data": data}
        if total_count is not None:
            body["total_count"] = total_count
        return body

    return _page


@pytest.fixture
def run_cli(monkeypatch: pytest.MonkeyPatch, fake_session: FakeSession):
    """Helper to invoke the CLI against the fake session inside tests.

    Returns the exit code (0 when ``main`` returns normally).
    """

    monkeypatch.setenv("CDMS_API_BASE_URL", BASE_URL)
    monkeypatch.setattr(client_module.requests, "Session", lambda: fake_session)

    def _run(args: list[str]) -> int:
        monkeypatch.setattr(sys, "argv", ["cdms-console", *args])
        try:
            cli_main()
        except SystemExit as exc:
            return exc.code if isinstance(exc.code, int) else 1
        return 0

    return _run


@pytest.fixture
def network_error() -> requests.ConnectionError:
    return requests.ConnectionError("Connection refused")
