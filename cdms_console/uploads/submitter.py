"""Submit report files to the upload endpoint."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from cdms_console.api.client import ApiClient
from cdms_console.core.errors import ApiError, HttpStatusError, NetworkError

logger = logging.getLogger(__name__)

REPORT_TYPES = ("BC1300", "BC1048", "OUTSTANDING_BILLS", "VENDOR_CODE")
FILE_FIELD = "report_file"

SELECT_REPORT_TYPE_MESSAGE = "Please select a report type."
SELECT_FILE_MESSAGE = "Please select a file to upload."
SUCCESS_MESSAGE = "Upload successful!"


@dataclass(frozen=True)
class UploadOutcome:
    ok: bool
    message: str
    sent: bool = False


def validate_upload(report_type: Optional[str], file_name: Optional[str], payload: Optional[bytes]) -> Optional[str]:
    """Return the first validation message, or ``None`` when the form is complete."""

    if not report_type:
        return SELECT_REPORT_TYPE_MESSAGE
    if report_type not in REPORT_TYPES:
        return f"Unsupported report type: '{report_type}'"
    if not file_name or payload is None:
        return SELECT_FILE_MESSAGE
    return None


class UploadSubmitter:
    """One multipart POST per submission, no chunking and no retries."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client
        self.uploading = False

    def submit(self, report_type: Optional[str], file_name: Optional[str], payload: Optional[bytes]) -> UploadOutcome:
        problem = validate_upload(report_type, file_name, payload)
        if problem:
            logger.info("Upload blocked: %s", problem)
            return UploadOutcome(ok=False, message=problem)

        self.uploading = True
        try:
            self.client.post_file(f"/api/upload/{report_type}", FILE_FIELD, file_name, payload)
        except HttpStatusError as exc:
            logger.error("Upload of %s as %s failed: %s", file_name, report_type, exc)
            return UploadOutcome(ok=False, message=f"Upload failed: {exc.message}", sent=True)
        except NetworkError as exc:
            logger.error("Upload of %s as %s failed: %s", file_name, report_type, exc)
            return UploadOutcome(ok=False, message=f"Network error: {exc}", sent=True)
        except ApiError as exc:
            # A 2xx with an unreadable body still means the server took the file.
            logger.warning("Upload of %s accepted with an unexpected response: %s", file_name, exc)
        finally:
            self.uploading = False

        logger.info("Uploaded %s as %s", file_name, report_type)
        return UploadOutcome(ok=True, message=SUCCESS_MESSAGE, sent=True)
