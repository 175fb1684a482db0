"""Static configuration for every record collection the console knows about.

Each collection is described once here: where it lives on the API, which
columns the table shows, and which fields the detail panel groups into its
"main", "status", and "comments" sections. Pages look their configuration up
by tag instead of declaring their own literals.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from cdms_console.core.formatting import format_currency
from cdms_console.core.models import ColumnDescriptor, FieldManifest, FieldSpec

MANIFEST_SECTIONS = ("main", "status", "comments")

STATUS_OPTIONS: Tuple[str, ...] = (
    "Open",
    "Hold Pending External Action",
    "Hold Pending Internal Action",
    "In Research",
    "Passed to PFS",
    "Completed by PFS",
    "PFS Return to GSA",
    "New",
)


@dataclass(frozen=True)
class RecordTypeConfig:
    """Everything a records page needs to know about one collection."""

    tag: str
    title: str
    singular: str
    description: str
    path: str
    columns: Tuple[ColumnDescriptor, ...]
    manifest: FieldManifest = field(default_factory=dict)
    history: bool = False

    @property
    def editable_fields(self) -> List[FieldSpec]:
        return [spec for section in self.manifest.values() for spec in section if spec.editable]

    @property
    def editable(self) -> bool:
        return bool(self.editable_fields)

    def item_path(self, record_id: int) -> str:
        return f"{self.path}/{record_id}"

    def history_path(self, record_id: int) -> str:
        return f"{self.path}/history/{record_id}"


CHARGEBACKS = RecordTypeConfig(
    tag="chargebacks",
    title="Chargebacks",
    singular="Chargeback",
    description="A list of recent chargebacks from the live API.",
    path="/api/chargebacks",
    columns=(
        ColumnDescriptor("current_status", "Status"),
        ColumnDescriptor("bd_doc_num", "Document Number"),
        ColumnDescriptor("customer_name", "Customer Name"),
        ColumnDescriptor("region", "Region"),
        ColumnDescriptor("vendor", "Vendor"),
        ColumnDescriptor("alc", "ALC"),
        ColumnDescriptor("customer_tas", "Customer TAS"),
        ColumnDescriptor("org_code", "Org Code"),
        ColumnDescriptor("chargeback_amount", "Chargeback Amount", format_currency),
    ),
    manifest={
        "main": (
            FieldSpec("id", "ID"),
            FieldSpec("bd_doc_num", "Document Number"),
            FieldSpec("customer_name", "Customer Name"),
            FieldSpec("region", "Region"),
            FieldSpec("vendor", "Vendor"),
            FieldSpec("alc", "ALC"),
            FieldSpec("customer_tas", "Customer TAS"),
            FieldSpec("org_code", "Org Code"),
            FieldSpec("chargeback_amount", "Chargeback Amount", kind="currency", editable=True),
        ),
        "status": (
            FieldSpec("current_status", "Current Status", options=STATUS_OPTIONS, editable=True),
            FieldSpec("gsa_poc", "GSA POC", editable=True),
            FieldSpec("pfs_poc", "PFS POC", editable=True),
        ),
        "comments": (
            FieldSpec("special_instruction", "Special Instruction", editable=True),
        ),
    },
    history=True,
)

DELINQUENCIES = RecordTypeConfig(
    tag="delinquencies",
    title="Delinquencies",
    singular="Delinquency",
    description="A list of recent delinquencies from the live API.",
    path="/api/delinquencies",
    columns=(
        ColumnDescriptor("business_line", "Business Line"),
        ColumnDescriptor("document_number", "Document Number"),
        ColumnDescriptor("vendor_code", "Vendor Code"),
        ColumnDescriptor("current_status", "Status"),
        ColumnDescriptor("billed_total_amount", "Billed Total Amount", format_currency),
        ColumnDescriptor("debit_outstanding_amount", "Debit Outstanding Amount", format_currency),
        ColumnDescriptor("credit_outstanding_amount", "Credit Outstanding Amount", format_currency),
    ),
    manifest={
        "main": (
            FieldSpec("id", "ID"),
            FieldSpec("business_line", "Business Line"),
            FieldSpec("document_number", "Document Number"),
            FieldSpec("vendor_code", "Vendor Code"),
            FieldSpec("billed_total_amount", "Billed Total Amount", kind="currency"),
            FieldSpec("debit_outstanding_amount", "Debit Outstanding Amount", kind="currency"),
            FieldSpec("credit_outstanding_amount", "Credit Outstanding Amount", kind="currency"),
        ),
        "status": (
            FieldSpec("current_status", "Status", options=STATUS_OPTIONS, editable=True),
            FieldSpec("gsa_poc", "GSA POC", editable=True),
            FieldSpec("pfs_poc", "PFS POC", editable=True),
        ),
        "comments": (),
    },
    history=True,
)

UPLOADS = RecordTypeConfig(
    tag="uploads",
    title="Uploads",
    singular="Upload",
    description="Report files received by the server and their processing status.",
    path="/api/uploads",
    columns=(
        ColumnDescriptor("report_type", "Report Type"),
        ColumnDescriptor("filename", "File"),
        ColumnDescriptor("status", "Status"),
        ColumnDescriptor("uploaded_at", "Uploaded At"),
        ColumnDescriptor("processed_at", "Processed At"),
        ColumnDescriptor("error_details", "Error Details"),
    ),
    manifest={
        "main": (
            FieldSpec("id", "ID"),
            FieldSpec("report_type", "Report Type"),
            FieldSpec("filename", "File"),
            FieldSpec("status", "Status"),
            FieldSpec("uploaded_at", "Uploaded At"),
            FieldSpec("processed_at", "Processed At"),
        ),
        "comments": (
            FieldSpec("error_details", "Error Details"),
        ),
    },
)

RECORD_TYPES: Dict[str, RecordTypeConfig] = {
    config.tag: config for config in (CHARGEBACKS, DELINQUENCIES, UPLOADS)
}


def get_record_type(tag: str) -> RecordTypeConfig:
    """Return the configuration for ``tag`` or raise ``KeyError`` with the known tags."""

    try:
        return RECORD_TYPES[tag]
    except KeyError:
        known = ", ".join(sorted(RECORD_TYPES))
        raise KeyError(f"Unknown record type {tag!r}; expected one of {known}") from None
