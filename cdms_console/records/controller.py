"""Paginated fetch state for one record collection."""
from __future__ import annotations

import logging
from typing import Any, List, Optional

from cdms_console.api.client import ApiClient
from cdms_console.core.errors import ApiError, MalformedResponseError
from cdms_console.core.models import PAGE_SIZE, PageResult, PageState, Record, SelectionState
from cdms_console.records.registry import RecordTypeConfig

logger = logging.getLogger(__name__)


class RecordListController:
    """Fetch pages of one collection and keep the last page on hand.

    A successful fetch replaces ``records`` wholesale. A failed fetch leaves
    the last good page on display with ``has_more`` off, so the pager stops
    offering a next page until the user navigates again.
    """

    def __init__(self, client: ApiClient, record_type: RecordTypeConfig, page_size: int = PAGE_SIZE) -> None:
        self.client = client
        self.record_type = record_type
        self.state = PageState(page=1, page_size=page_size)
        self.records: List[Record] = []
        self.total_count: Optional[int] = None
        self.error: Optional[str] = None
        self.loaded = False

    @property
    def page(self) -> int:
        return self.state.page

    @property
    def has_more(self) -> bool:
        return self.state.has_more

    def load(self, page: int) -> PageResult:
        """Fetch ``page`` (1-based) and make it the displayed page.

        Network and HTTP failures keep the previously displayed page (records
        and page number) and switch ``has_more`` off. A body without a
        ``data`` array clears the records.
        """

        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")

        displayed_page = self.state.page
        self.state.page = page
        params = {"limit": self.state.page_size, "page": page}
        try:
            body = self.client.get(self.record_type.path, params=params)
            result = self._parse(body)
        except MalformedResponseError as exc:
            logger.error("Discarding %s page %d: %s", self.record_type.tag, page, exc)
            result = PageResult(records=[], has_more=False, error=str(exc))
            self.records = []
            self.total_count = None
        except ApiError as exc:
            logger.error("Failed to fetch %s page %d: %s", self.record_type.tag, page, exc)
            result = PageResult(records=[], has_more=False, error=str(exc))
            if self.loaded:
                self.state.page = displayed_page
        else:
            logger.info(
                "Fetched %d %s on page %d (has_more=%s)",
                len(result.records),
                self.record_type.tag,
                page,
                result.has_more,
            )
            self.records = result.records
            self.total_count = result.total_count

        self.state.has_more = result.has_more
        self.error = result.error
        self.loaded = True
        return result

    def ensure_loaded(self) -> None:
        """Fetch the current page once; later calls are no-ops until state changes."""

        if not self.loaded:
            self.load(self.state.page)

    def refresh(self) -> PageResult:
        """Re-fetch the current page, e.g. after an update was saved."""

        return self.load(self.state.page)

    def next_page(self) -> PageResult:
        return self.load(self.state.page + 1)

    def previous_page(self) -> PageResult:
        return self.load(max(self.state.page - 1, 1))

    def go_to(self, page: int) -> PageResult:
        return self.load(page)

    def reset(self) -> PageResult:
        """Start over at page 1, used when the record type changes."""

        self.state = PageState(page=1, page_size=self.state.page_size)
        return self.load(1)

    def _parse(self, body: Any) -> PageResult:
        if not isinstance(body, dict) or not isinstance(body.get("data"), list):
            raise MalformedResponseError(
                f"{self.record_type.path} response did not contain a 'data' array"
            )

        records = [row for row in body["data"] if isinstance(row, dict)]
        total = body.get("total_count")
        return PageResult(
            records=records,
            has_more=len(body["data"]) == self.state.page_size,
            total_count=total if isinstance(total, int) else None,
        )


def change_page(controller: RecordListController, selection: SelectionState, page: int) -> PageResult:
    """Close the detail panel, then move the list to ``page``.

    The open record belongs to the page being left, so the selection never
    carries over to the new one.
    """

    selection.clear()
    return controller.go_to(max(page, 1))
