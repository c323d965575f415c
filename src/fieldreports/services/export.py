"""Archive export renderers: Excel workbook, printable HTML and JSON backup."""

from __future__ import annotations

import io
import json
from datetime import date, datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font

from fieldreports.models.enums import status_label
from fieldreports.models.report import ReportResponse
from fieldreports.services import archive

_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

SHEET_TITLE = "التقارير"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
        keep_trailing_newline=True,
    )
    env.filters["status_label"] = status_label
    env.filters["timestamp"] = archive.format_timestamp
    env.globals["map_url"] = archive.map_url
    env.globals["has_location"] = archive.has_location
    return env


def spreadsheet_filename(today: date | None = None) -> str:
    today = today or datetime.now(timezone.utc).date()
    return f"تقارير_المتابعة_{today.isoformat()}.xlsx"


def backup_filename(today: date | None = None) -> str:
    today = today or datetime.now(timezone.utc).date()
    return f"backup_reports_{today.isoformat()}.json"


def render_spreadsheet(reports: list[ReportResponse]) -> bytes:
    """Build a right-to-left workbook with one row per report."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    sheet.sheet_view.rightToLeft = True

    sheet.append(archive.spreadsheet_headers())
    for cell in sheet[1]:
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center")

    for row in archive.spreadsheet_rows(reports):
        sheet.append(row)

    sheet.freeze_panes = "A2"

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def render_archive_html(reports: list[ReportResponse], generated_at: datetime | None = None) -> str:
    """Render the printable archive table."""
    template = _environment().get_template("archive_print.html.j2")
    return template.render(
        reports=reports,
        generated_at=generated_at or datetime.now(timezone.utc),
    )


def render_report_html(report: ReportResponse) -> str:
    """Render the printable sheet for a single report."""
    template = _environment().get_template("report_print.html.j2")
    image_src = report.image_url if (report.image_url or "").startswith("data:image/") else None
    return template.render(report=report, image_src=image_src)


def render_backup(reports: list[ReportResponse]) -> str:
    return json.dumps(
        [r.model_dump(mode="json") for r in reports],
        ensure_ascii=False,
        indent=2,
    )
