"""Edit state behind the record detail panel."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from cdms_console.api.client import ApiClient
from cdms_console.core.errors import ApiError, EditValidationError
from cdms_console.core.formatting import parse_currency
from cdms_console.core.models import FieldSpec, Record, SelectionState
from cdms_console.records.controller import RecordListController
from cdms_console.records.registry import RecordTypeConfig

logger = logging.getLogger(__name__)


def apply_edits(record: Mapping[str, Any], updates: Mapping[str, Any]) -> Record:
    """Return a copy of ``record`` with the user-provided field updates laid over it."""

    merged = dict(record)
    merged.update(updates)
    return merged


class EditSession:
    """Draft edits for one selected record.

    Drafts survive a failed save so the user can retry; ``cancel`` throws
    them away without touching the server.
    """

    def __init__(self, record_type: RecordTypeConfig, record: Mapping[str, Any]) -> None:
        self.record_type = record_type
        self.record: Record = dict(record)
        self.drafts: Dict[str, Any] = {}
        self.error: Optional[str] = None
        self.field_errors: Dict[str, str] = {}
        self.saving = False
        self.saved_record: Optional[Record] = None
        self._specs: Dict[str, FieldSpec] = {spec.key: spec for spec in record_type.editable_fields}

    @property
    def record_id(self) -> Any:
        return self.record.get("id")

    @property
    def dirty(self) -> bool:
        return any(self.record.get(key) != value for key, value in self.drafts.items())

    def value(self, key: str) -> Any:
        return self.drafts.get(key, self.record.get(key))

    def set_value(self, key: str, value: Any) -> None:
        if key not in self._specs:
            raise KeyError(f"{key!r} is not an editable {self.record_type.tag} field")
        if isinstance(value, str) and not value.strip() and self._specs[key].options is None:
            value = None
        self.drafts[key] = value

    def validate(self) -> Dict[str, str]:
        """Return field errors for the current drafts (empty when valid)."""

        errors: Dict[str, str] = {}
        for key, spec in self._specs.items():
            value = self.value(key)
            if spec.options is not None and value is None:
                errors[key] = f"Select a {spec.label.lower()}"
            elif spec.options is not None and value not in spec.options:
                errors[key] = f"{value!r} is not an allowed {spec.label.lower()}"
            elif spec.kind == "currency":
                try:
                    parse_currency(value)
                except ValueError as exc:
                    errors[key] = str(exc)
        return errors

    def build_payload(self) -> Record:
        """Collect every editable field, drafts over originals, ready to PATCH."""

        errors = self.validate()
        if errors:
            raise EditValidationError(errors)

        payload: Record = {}
        for key, spec in self._specs.items():
            value = self.value(key)
            if spec.kind == "currency":
                value = parse_currency(value)
            payload[key] = value
        return payload

    def save(self, client: ApiClient) -> bool:
        """Validate and PATCH the record; on failure keep drafts and record the error."""

        record_id = self.record_id
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            self.error = f"Invalid ID for {self.record_type.tag} update: {record_id!r}"
            logger.error(self.error)
            return False

        try:
            payload = self.build_payload()
        except EditValidationError as exc:
            self.field_errors = exc.errors
            self.error = f"Fix the highlighted fields before saving: {exc}"
            logger.warning("Rejected %s %s edit: %s", self.record_type.tag, record_id, exc)
            return False

        self.saving = True
        try:
            response = client.patch(self.record_type.item_path(record_id), payload)
        except ApiError as exc:
            self.error = f"Failed to save: {exc}"
            logger.error("Failed to save %s %s: %s", self.record_type.tag, record_id, exc)
            return False
        finally:
            self.saving = False

        self.saved_record = response if isinstance(response, dict) else apply_edits(self.record, payload)
        self.error = None
        self.field_errors = {}
        self.drafts.clear()
        logger.info("Saved %s %s", self.record_type.tag, record_id)
        return True

    def cancel(self) -> None:
        self.drafts.clear()
        self.error = None
        self.field_errors = {}


def commit_edit(
    session: EditSession,
    client: ApiClient,
    controller: RecordListController,
    selection: SelectionState,
) -> bool:
    """Save the session; on success re-fetch the owning page once and close the panel."""

    if not session.save(client):
        return False
    controller.refresh()
    selection.clear()
    return True
