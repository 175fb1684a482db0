"""Report file uploads."""
from cdms_console.uploads.submitter import (
    REPORT_TYPES,
    UploadOutcome,
    UploadSubmitter,
    validate_upload,
)

__all__ = ["REPORT_TYPES", "UploadOutcome", "UploadSubmitter", "validate_upload"]
