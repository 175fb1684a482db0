"""Upload form validation and submission."""
import pytest

from cdms_console.uploads.submitter import (
    SELECT_FILE_MESSAGE,
    SELECT_REPORT_TYPE_MESSAGE,
    SUCCESS_MESSAGE,
    UploadSubmitter,
    validate_upload,
)

from conftest import BASE_URL, FakeResponse


@pytest.mark.parametrize(
    "report_type, file_name, payload, expected",
    [
        (None, "bc1300.txt", b"x", SELECT_REPORT_TYPE_MESSAGE),
        ("BC1300", None, None, SELECT_FILE_MESSAGE),
        ("BC9999", "x.txt", b"x", "Unsupported report type: 'BC9999'"),
        ("VENDOR_CODE", "codes.csv", b"", None),
    ],
)
def test_validate_upload(report_type, file_name, payload, expected):
    assert validate_upload(report_type, file_name, payload) == expected


def test_missing_file_blocks_without_a_request(client, fake_session):
    outcome = UploadSubmitter(client).submit("BC1300", None, None)

    assert outcome.ok is False
    assert outcome.sent is False
    assert outcome.message == "Please select a file to upload."
    assert fake_session.calls == []


def test_successful_upload_posts_one_multipart_request(client, fake_session):
    fake_session.queue(FakeResponse(status_code=201, payload={"id": 12}))
    submitter = UploadSubmitter(client)

    outcome = submitter.submit("OUTSTANDING_BILLS", "bills.xlsx", b"\x50\x4b")

    assert outcome.ok is True
    assert outcome.message == SUCCESS_MESSAGE
    assert submitter.uploading is False
    assert len(fake_session.calls) == 1
    call = fake_session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == f"{BASE_URL}/api/upload/OUTSTANDING_BILLS"
    assert call["files"] == {"report_file": ("bills.xlsx", b"\x50\x4b")}


def test_server_rejection_shows_server_message(client, fake_session):
    fake_session.queue(FakeResponse(status_code=422, payload={"message": "Unrecognised file layout"}))

    outcome = UploadSubmitter(client).submit("BC1048", "bc1048.txt", b"rows")

    assert outcome.ok is False
    assert outcome.sent is True
    assert outcome.message == "Upload failed: Unrecognised file layout"


def test_network_failure_is_reported(client, fake_session, network_error):
    fake_session.queue(network_error)

    outcome = UploadSubmitter(client).submit("BC1048", "bc1048.txt", b"rows")

    assert outcome.ok is False
    assert outcome.message == "Network error: Connection refused"


def test_unreadable_success_body_still_counts_as_uploaded(client, fake_session, caplog):
    fake_session.queue(FakeResponse(status_code=200, text="OK"))
    caplog.set_level("WARNING")

    outcome = UploadSubmitter(client).submit("BC1300", "bc1300.txt", b"rows")

    assert outcome.ok is True
    assert "unexpected response" in caplog.text
