"""Write table rows to CSV or Excel files."""
from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

logger = logging.getLogger(__name__)


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def rows_to_csv_text(rows: Iterable[Dict[str, Any]]) -> str:
    """Render rows as CSV text, e.g. for a browser download."""

    rows = list(rows)
    buffer = io.StringIO()
    if rows:
        writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue()


def write_csv(rows: Iterable[Dict[str, Any]], output_path: Path) -> Path:
    """Write rows to ``output_path`` using the first row's keys as headers."""

    ensure_output_dir(output_path)
    output_path.write_text(rows_to_csv_text(rows), encoding="utf-8", newline="")
    logger.info("Wrote CSV output to %s", output_path)
    return output_path


def write_excel(rows: Iterable[Dict[str, Any]], output_path: Path, sheet_title: str = "records") -> Path:
    """Write rows to an Excel workbook using openpyxl."""

    from openpyxl import Workbook

    rows = list(rows)
    ensure_output_dir(output_path)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_title[:31]
    if rows:
        headers: List[str] = list(rows[0].keys())
        sheet.append(headers)
        for row in rows:
            sheet.append([row.get(header, "") for header in headers])
    workbook.save(output_path)
    logger.info("Wrote Excel output to %s", output_path)
    return output_path
