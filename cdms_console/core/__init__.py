"""Core building blocks for the console package."""
from cdms_console.core.config import Settings, load_settings
from cdms_console.core.errors import (
    ApiError,
    EditValidationError,
    HttpStatusError,
    MalformedResponseError,
    NetworkError,
)
from cdms_console.core.logging import configure_logging
from cdms_console.core.models import (
    PAGE_SIZE,
    ColumnDescriptor,
    FieldManifest,
    FieldSpec,
    PageResult,
    PageState,
    Record,
    SelectionState,
    StatusHistoryEntry,
)

__all__ = [
    "PAGE_SIZE",
    "ApiError",
    "ColumnDescriptor",
    "EditValidationError",
    "FieldManifest",
    "FieldSpec",
    "HttpStatusError",
    "MalformedResponseError",
    "NetworkError",
    "PageResult",
    "PageState",
    "Record",
    "SelectionState",
    "Settings",
    "StatusHistoryEntry",
    "configure_logging",
    "load_settings",
]
