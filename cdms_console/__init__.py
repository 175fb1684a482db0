"""Operator console for the CDMS chargeback and delinquency API."""
from cdms_console.api import ApiClient
from cdms_console.core import (
    PAGE_SIZE,
    ApiError,
    Settings,
    configure_logging,
    load_settings,
)
from cdms_console.records import RECORD_TYPES, RecordListController, get_record_type
from cdms_console.reporting import fetch_dashboard_report, write_csv, write_excel
from cdms_console.review import EditSession, commit_edit, fetch_status_history
from cdms_console.uploads import UploadSubmitter

__all__ = [
    "PAGE_SIZE",
    "RECORD_TYPES",
    "ApiClient",
    "ApiError",
    "EditSession",
    "RecordListController",
    "Settings",
    "UploadSubmitter",
    "commit_edit",
    "configure_logging",
    "fetch_dashboard_report",
    "fetch_status_history",
    "get_record_type",
    "load_settings",
    "write_csv",
    "write_excel",
]
