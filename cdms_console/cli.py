"""Command line access to the CDMS API: list, export, stats, history, upload."""
import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence

from cdms_console.api.client import ApiClient
from cdms_console.core.config import load_settings
from cdms_console.core.logging import configure_logging
from cdms_console.records.controller import RecordListController
from cdms_console.records.registry import RECORD_TYPES, get_record_type
from cdms_console.records.table import build_rows
from cdms_console.reporting.sinks import write_csv, write_excel
from cdms_console.reporting.stats import ReportTable, fetch_dashboard_report
from cdms_console.review.history import NO_HISTORY_MESSAGE, fetch_status_history
from cdms_console.uploads.submitter import REPORT_TYPES, UploadSubmitter

HISTORY_TYPES = sorted(tag for tag, config in RECORD_TYPES.items() if config.history)


class CommandFailed(Exception):
    """Raised by a subcommand when the API surfaced an error."""


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"page must be >= 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per operation."""

    parser = argparse.ArgumentParser(description="Browse and update CDMS records from the command line")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Print one page of a record collection")
    list_parser.add_argument("record_type", choices=sorted(RECORD_TYPES))
    list_parser.add_argument("--page", type=_positive_int, default=1, help="1-based page number")

    export_parser = subparsers.add_parser("export", help="Write one page of a record collection to a file")
    export_parser.add_argument("record_type", choices=sorted(RECORD_TYPES))
    export_parser.add_argument("--page", type=_positive_int, default=1, help="1-based page number")
    export_parser.add_argument("--output", type=Path, required=True, help="File to write")
    export_parser.add_argument(
        "--format",
        choices=["csv", "excel"],
        default="csv",
        help="Output format for the exported rows",
    )

    subparsers.add_parser("stats", help="Print the chargeback dashboard tables")

    history_parser = subparsers.add_parser("history", help="Print the status history of one record")
    history_parser.add_argument("record_type", choices=HISTORY_TYPES)
    history_parser.add_argument("record_id", type=int)

    upload_parser = subparsers.add_parser("upload", help="Upload a report file")
    upload_parser.add_argument("report_type", choices=REPORT_TYPES)
    upload_parser.add_argument("file", type=Path)

    return parser


def _format_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> str:
    cells = [[str(value) for value in row] for row in rows]
    widths = [len(header) for header in headers]
    for row in cells:
        for index, value in enumerate(row):
            widths[index] = max(widths[index], len(value))
    lines = ["  ".join(header.ljust(width) for header, width in zip(headers, widths))]
    lines.append("  ".join("-" * width for width in widths))
    for row in cells:
        lines.append("  ".join(value.ljust(width) for value, width in zip(row, widths)))
    return "\n".join(lines)


def _print_report_table(table: ReportTable) -> None:
    print(table.title)
    print(_format_table(table.headers, table.rows))
    print()


def _load_rows(client: ApiClient, tag: str, page: int) -> List[Dict[str, Any]]:
    record_type = get_record_type(tag)
    controller = RecordListController(client, record_type)
    result = controller.load(page)
    if result.error:
        raise CommandFailed(f"Failed to fetch {tag}: {result.error}")
    return build_rows(record_type.columns, result.records)


def run_list(client: ApiClient, args: argparse.Namespace) -> None:
    rows = _load_rows(client, args.record_type, args.page)
    if not rows:
        print(f"No {args.record_type} on page {args.page}.")
        return
    headers = list(rows[0].keys())
    print(_format_table(headers, [[row[header] for header in headers] for row in rows]))
    print(f"\nPage {args.page} · {len(rows)} records")


def run_export(client: ApiClient, args: argparse.Namespace) -> None:
    rows = _load_rows(client, args.record_type, args.page)
    if args.format == "excel":
        output = write_excel(rows, args.output, sheet_title=args.record_type)
    else:
        output = write_csv(rows, args.output)
    print(f"Wrote {len(rows)} rows to {output}")


def run_stats(client: ApiClient, args: argparse.Namespace) -> None:
    report = fetch_dashboard_report(client)
    if report.error:
        raise CommandFailed(f"Error: {report.error}")
    for table in (report.status_summary, report.trends):
        if table:
            _print_report_table(table)
    total = report.delinquency_total if report.delinquency_total is not None else 0
    print(f"Total Active Delinquencies: {total:,}")


def run_history(client: ApiClient, args: argparse.Namespace) -> None:
    result = fetch_status_history(client, get_record_type(args.record_type), args.record_id)
    if result.error:
        raise CommandFailed(f"Failed to load status history: {result.error}")
    if result.empty:
        print(NO_HISTORY_MESSAGE)
        return
    rows = [
        [entry.status_date or "", entry.status or "", entry.user_name or "", entry.notes or ""]
        for entry in result.entries
    ]
    print(_format_table(["Date", "Status", "User", "Notes"], rows))


def run_upload(client: ApiClient, args: argparse.Namespace) -> None:
    path: Path = args.file
    if not path.is_file():
        raise CommandFailed(f"File not found: {path}")
    outcome = UploadSubmitter(client).submit(args.report_type, path.name, path.read_bytes())
    if not outcome.ok:
        raise CommandFailed(outcome.message)
    print(outcome.message)


COMMANDS = {
    "list": run_list,
    "export": run_export,
    "stats": run_stats,
    "history": run_history,
    "upload": run_upload,
}


def main() -> None:
    """Entrypoint for the ``cdms-console`` command."""

    args = build_parser().parse_args()
    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        raise SystemExit(1) from None
    configure_logging(settings.log_level)
    client = ApiClient.from_settings(settings)
    try:
        COMMANDS[args.command](client, args)
    except CommandFailed as exc:
        print(exc, file=sys.stderr)
        raise SystemExit(1) from None


if __name__ == "__main__":
    main()
