"""Data models shared by the fetch, review, and rendering layers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

Scalar = Union[str, int, float, None]
Record = Dict[str, Scalar]

PAGE_SIZE = 500


@dataclass(frozen=True)
class ColumnDescriptor:
    """One displayed table column."""

    key: str
    label: str
    formatter: Optional[Callable[[Any], str]] = None

    def render(self, record: Mapping[str, Any]) -> Any:
        value = record.get(self.key)
        if self.formatter is None:
            return value
        return self.formatter(value)


@dataclass(frozen=True)
class FieldSpec:
    """One field shown in the detail panel.

    ``kind`` is a value-type hint (``"currency"`` turns on decimal input and
    formatting). ``options`` closes the field to an enumerated vocabulary.
    """

    key: str
    label: str
    kind: Optional[str] = None
    options: Optional[Tuple[str, ...]] = None
    editable: bool = False


FieldManifest = Dict[str, Tuple[FieldSpec, ...]]


@dataclass
class PageState:
    """Pagination state for one record collection."""

    page: int = 1
    page_size: int = PAGE_SIZE
    has_more: bool = True


@dataclass
class SelectionState:
    """Which record, if any, the detail panel is showing."""

    record: Optional[Record] = None
    drawer_open: bool = False

    def select(self, record: Record) -> None:
        self.record = record
        self.drawer_open = True

    def clear(self) -> None:
        self.record = None
        self.drawer_open = False


@dataclass
class PageResult:
    """Outcome of a single page fetch."""

    records: List[Record] = field(default_factory=list)
    has_more: bool = False
    total_count: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class StatusHistoryEntry:
    """A single status change recorded by the server."""

    status: str
    status_date: Optional[str] = None
    user_name: str = ""
    user_email: Optional[str] = None
    notes: Optional[str] = None
    entry_id: Optional[int] = None

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "StatusHistoryEntry":
        """Build an entry from the history endpoint's JSON row."""

        first = raw.get("user_first_name") or ""
        last = raw.get("user_last_name") or ""
        return cls(
            status=str(raw.get("status") or ""),
            status_date=raw.get("status_date"),
            user_name=f"{first} {last}".strip(),
            user_email=raw.get("user_email"),
            notes=raw.get("notes"),
            entry_id=raw.get("status_history_id"),
        )
