"""Tests for the requests-based API client."""
import pytest
import requests

from cdms_console.api.client import ApiClient
from cdms_console.core.config import Settings
from cdms_console.core.errors import HttpStatusError, MalformedResponseError, NetworkError

from conftest import BASE_URL, FakeResponse, FakeSession


def test_get_sends_bearer_token_params_and_timeout(client, fake_session):
    fake_session.queue(FakeResponse(payload={"data": []}))

    body = client.get("/api/chargebacks", params={"limit": 500, "page": 2})

    assert body == {"data": []}
    call = fake_session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == f"{BASE_URL}/api/chargebacks"
    assert call["params"] == {"limit": 500, "page": 2}
    assert call["headers"]["Authorization"] == "Bearer secret-token"
    assert call["timeout"] == 5.0


def test_no_token_means_no_authorization_header(fake_session):
    client = ApiClient(BASE_URL + "/", session=fake_session)
    fake_session.queue(FakeResponse(payload={}))

    client.get("/api/me")

    assert "Authorization" not in fake_session.calls[0]["headers"]
    assert fake_session.calls[0]["url"] == f"{BASE_URL}/api/me"


def test_from_settings_copies_connection_values(fake_session):
    settings = Settings(api_base_url=BASE_URL, api_token="abc", timeout=12.5)
    client = ApiClient.from_settings(settings, session=fake_session)

    assert client.base_url == BASE_URL
    assert client.token == "abc"
    assert client.timeout == 12.5
    assert client.session is fake_session


def test_patch_sends_json_body(client, fake_session):
    fake_session.queue(FakeResponse(payload={"id": 7, "current_status": "Open"}))

    body = client.patch("/api/chargebacks/7", {"current_status": "Open"})

    assert body["id"] == 7
    assert fake_session.calls[0]["method"] == "PATCH"
    assert fake_session.calls[0]["json"] == {"current_status": "Open"}


def test_post_file_sends_multipart_field(client, fake_session):
    fake_session.queue(FakeResponse(status_code=201, payload={"status": "queued"}))

    client.post_file("/api/upload/BC1300", "report_file", "bc1300.txt", b"rows")

    assert fake_session.calls[0]["files"] == {"report_file": ("bc1300.txt", b"rows")}


def test_server_message_is_preferred_for_http_errors(client, fake_session):
    fake_session.queue(FakeResponse(status_code=400, payload={"message": "Invalid status"}))

    with pytest.raises(HttpStatusError) as excinfo:
        client.patch("/api/chargebacks/1", {"current_status": "Bogus"})

    assert excinfo.value.status_code == 400
    assert str(excinfo.value) == "Invalid status"


def test_http_error_without_message_uses_status_line(client, fake_session):
    fake_session.queue(FakeResponse(status_code=502, text="<html>Bad gateway</html>"))

    with pytest.raises(HttpStatusError, match="HTTP error! status: 502"):
        client.get("/api/chargebacks")


def test_connection_failures_become_network_errors(client, fake_session, network_error):
    fake_session.queue(network_error)

    with pytest.raises(NetworkError, match="Connection refused"):
        client.get("/api/chargebacks")


def test_timeouts_become_network_errors(client, fake_session):
    fake_session.queue(requests.Timeout("read timed out"))

    with pytest.raises(NetworkError):
        client.get("/api/chargebacks")


def test_non_json_success_body_is_malformed(client, fake_session):
    fake_session.queue(FakeResponse(text="not json"))

    with pytest.raises(MalformedResponseError):
        client.get("/api/chargebacks")


def test_empty_body_returns_none():
    session = FakeSession().queue(FakeResponse(status_code=204))
    client = ApiClient(BASE_URL, session=session)

    assert client.patch("/api/delinquencies/3", {"gsa_poc": "x"}) is None


def test_failed_requests_are_logged(client, fake_session, caplog):
    fake_session.queue(FakeResponse(status_code=500, payload={"message": "boom"}))
    caplog.set_level("WARNING")

    with pytest.raises(HttpStatusError):
        client.get("/api/uploads")

    assert "GET /api/uploads -> 500 boom" in caplog.text
