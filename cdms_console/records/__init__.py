"""Record collections: configuration, pagination, and row building."""
from cdms_console.records.controller import RecordListController, change_page
from cdms_console.records.registry import (
    RECORD_TYPES,
    STATUS_OPTIONS,
    RecordTypeConfig,
    get_record_type,
)
from cdms_console.records.table import build_rows, selected_record

__all__ = [
    "RECORD_TYPES",
    "STATUS_OPTIONS",
    "RecordListController",
    "RecordTypeConfig",
    "build_rows",
    "change_page",
    "get_record_type",
    "selected_record",
]
