"""Turn records into display rows for tables and exports."""
from typing import Any, Dict, Iterable, List, Optional, Sequence

from cdms_console.core.models import ColumnDescriptor, Record


def build_rows(columns: Sequence[ColumnDescriptor], records: Iterable[Record]) -> List[Dict[str, Any]]:
    """Return one dict per record, keyed by column label in column order."""

    def _sanitize(value: Any) -> Any:
        if isinstance(value, str):
            return " ".join(value.split())
        return value

    rows = []
    for record in records:
        rows.append({column.label: _sanitize(column.render(record)) for column in columns})
    return rows


def selected_record(records: Sequence[Record], selected_rows: Sequence[int]) -> Optional[Record]:
    """Map a table selection (row positions) back to the full record.

    Returns ``None`` when nothing is selected or the position is stale, e.g.
    the selection outlived a re-fetch that returned fewer rows.
    """

    if not selected_rows:
        return None
    index = selected_rows[0]
    if not 0 <= index < len(records):
        return None
    return records[index]
