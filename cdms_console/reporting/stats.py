"""Dashboard report: server-computed chargeback statistics plus the delinquency total."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from cdms_console.api.client import ApiClient
from cdms_console.core.errors import ApiError, MalformedResponseError
from cdms_console.core.formatting import (
    format_count,
    format_currency,
    format_decimal,
    format_percentage,
    to_number,
)
from cdms_console.records.registry import DELINQUENCIES

logger = logging.getLogger(__name__)

STATS_PATH = "/api/dashboard/chargeback-stats"

TIME_WINDOWS = ("7d", "14d", "21d", "28d")
TIME_WINDOW_LABELS = {
    "7d": "Last 7 Days",
    "14d": "8-14 Days Ago",
    "21d": "15-21 Days Ago",
    "28d": "22-28 Days Ago",
}

# (row label, field, formatter)
TREND_METRICS = (
    ("New Items", "new_items_count", format_count),
    ("Value of New Items", "new_items_value", format_currency),
    ("Passed to PFS", "passed_to_pfs", format_count),
    ("Completed by PFS", "completed_by_pfs", format_count),
    ("Avg Days to PFS", "avg_days_to_pfs", format_decimal),
    ("Avg PFS Completion", "avg_days_for_pfs_complete", format_decimal),
)

STATUS_HEADERS = ["Status", "Count", "Total Value", "% of Total"]


@dataclass
class ReportTable:
    title: str
    headers: List[str]
    rows: List[List[str]]

    def as_records(self) -> List[Dict[str, str]]:
        return [dict(zip(self.headers, row)) for row in self.rows]


@dataclass
class DashboardReport:
    status_summary: Optional[ReportTable] = None
    trends: Optional[ReportTable] = None
    delinquency_total: Optional[int] = None
    error: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


def status_summary_table(stats: Mapping[str, Any]) -> Optional[ReportTable]:
    """Format status rows and append a Total row summing counts and values."""

    summary = stats.get("status_summary")
    if not isinstance(summary, list):
        return None

    rows: List[List[str]] = []
    total_count = 0
    total_value = 0.0
    for item in summary:
        if not isinstance(item, dict):
            continue
        count = to_number(item.get("status_count")) or 0
        value = to_number(item.get("total_value")) or 0.0
        total_count += int(count)
        total_value += value
        rows.append(
            [
                str(item.get("current_status") or ""),
                format_count(count),
                format_currency(value),
                format_percentage(item.get("percentage_of_total")),
            ]
        )

    rows.append(["Total", format_count(total_count), format_currency(total_value), "100%"])
    return ReportTable(title="Active Chargebacks by Status", headers=list(STATUS_HEADERS), rows=rows)


def time_window_table(stats: Mapping[str, Any]) -> Optional[ReportTable]:
    """Lay the four rolling windows out as columns, one metric per row."""

    windows = stats.get("time_windows")
    if not isinstance(windows, dict):
        return None

    headers = ["Metric", *(TIME_WINDOW_LABELS[window] for window in TIME_WINDOWS)]
    rows = []
    for label, key, formatter in TREND_METRICS:
        cells = [formatter((windows.get(window) or {}).get(key)) for window in TIME_WINDOWS]
        rows.append([label, *cells])
    return ReportTable(title="Chargeback Trends", headers=headers, rows=rows)


def fetch_delinquency_total(client: ApiClient) -> Optional[int]:
    body = client.get(DELINQUENCIES.path, params={"limit": 1, "page": 1})
    if not isinstance(body, dict):
        raise MalformedResponseError("delinquency list response was not an object")
    total = body.get("total_count")
    return int(total) if isinstance(total, (int, float)) else 0


def fetch_dashboard_report(client: ApiClient) -> DashboardReport:
    """Fetch both dashboard sources; any failure becomes ``report.error``."""

    try:
        stats = client.get(STATS_PATH)
        if not isinstance(stats, dict):
            raise MalformedResponseError("chargeback stats response was not an object")
        delinquency_total = fetch_delinquency_total(client)
    except ApiError as exc:
        logger.error("Failed to fetch dashboard data: %s", exc)
        return DashboardReport(error=str(exc) or "An unknown error occurred.")

    logger.info("Fetched dashboard stats (%d delinquencies)", delinquency_total or 0)
    return DashboardReport(
        status_summary=status_summary_table(stats),
        trends=time_window_table(stats),
        delinquency_total=delinquency_total,
        raw=stats,
    )
