"""Read-only status history for chargebacks and delinquencies."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from cdms_console.api.client import ApiClient
from cdms_console.core.errors import ApiError, HttpStatusError, MalformedResponseError
from cdms_console.core.models import StatusHistoryEntry
from cdms_console.records.registry import RecordTypeConfig

logger = logging.getLogger(__name__)

NO_HISTORY_MESSAGE = "No status history available."


@dataclass
class HistoryResult:
    entries: List[StatusHistoryEntry] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def empty(self) -> bool:
        return not self.entries and self.error is None


def fetch_status_history(client: ApiClient, record_type: RecordTypeConfig, record_id: int) -> HistoryResult:
    """Fetch history entries in the order the server returns them.

    The server answers 404 when a record has no history yet, which is
    reported as an empty result rather than an error.
    """

    if not record_type.history:
        raise ValueError(f"{record_type.tag} records do not keep a status history")

    try:
        body = client.get(record_type.history_path(record_id))
        if body is None:
            body = []
        if not isinstance(body, list):
            raise MalformedResponseError("status history response was not a list")
    except HttpStatusError as exc:
        if exc.status_code == 404:
            return HistoryResult()
        logger.error("Failed to fetch status history for %s %s: %s", record_type.tag, record_id, exc)
        return HistoryResult(error=str(exc))
    except ApiError as exc:
        logger.error("Failed to fetch status history for %s %s: %s", record_type.tag, record_id, exc)
        return HistoryResult(error=str(exc))

    entries = [StatusHistoryEntry.from_api(row) for row in body if isinstance(row, dict)]
    logger.info("Fetched %d history entries for %s %s", len(entries), record_type.tag, record_id)
    return HistoryResult(entries=entries)
