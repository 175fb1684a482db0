"""Detail panel helpers: edit sessions and status history."""
from cdms_console.review.history import NO_HISTORY_MESSAGE, HistoryResult, fetch_status_history
from cdms_console.review.workflow import EditSession, apply_edits, commit_edit

__all__ = [
    "NO_HISTORY_MESSAGE",
    "EditSession",
    "HistoryResult",
    "apply_edits",
    "commit_edit",
    "fetch_status_history",
]
