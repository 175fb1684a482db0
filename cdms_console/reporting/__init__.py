"""Dashboard statistics and file exports."""
from cdms_console.reporting.sinks import rows_to_csv_text, write_csv, write_excel
from cdms_console.reporting.stats import (
    DashboardReport,
    ReportTable,
    fetch_dashboard_report,
    status_summary_table,
    time_window_table,
)

__all__ = [
    "DashboardReport",
    "ReportTable",
    "fetch_dashboard_report",
    "rows_to_csv_text",
    "status_summary_table",
    "time_window_table",
    "write_csv",
    "write_excel",
]
