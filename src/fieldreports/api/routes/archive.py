"""Archive export routes: spreadsheet, printable HTML, JSON backup."""

from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from fieldreports.dependencies import get_db
from fieldreports.errors.exceptions import NotFoundError
from fieldreports.models.report import ReportResponse
from fieldreports.repositories.report_repo import ReportRepository
from fieldreports.services import archive, export

router = APIRouter(tags=["Archive"])


def _attachment(filename: str, ascii_fallback: str) -> dict[str, str]:
    return {
        "Content-Disposition": f"attachment; filename=\"{ascii_fallback}\"; filename*=UTF-8''{quote(filename)}",
    }


async def _load_reports(db: AsyncSession, q: str | None = None) -> list[ReportResponse]:
    rows = await ReportRepository(db).list_all()
    reports = [ReportResponse.model_validate(r) for r in rows]
    return archive.filter_reports(reports, q)


@router.get("/reports/export.xlsx")
async def export_spreadsheet(q: str | None = None, db: AsyncSession = Depends(get_db)):
    """Download the (optionally filtered) archive as an Excel workbook."""
    reports = await _load_reports(db, q)
    filename = export.spreadsheet_filename()
    return Response(
        content=export.render_spreadsheet(reports),
        media_type=export.XLSX_MEDIA_TYPE,
        headers=_attachment(filename, "reports.xlsx"),
    )


@router.get("/reports/export.html", response_class=HTMLResponse)
async def export_printable(q: str | None = None, db: AsyncSession = Depends(get_db)):
    """Printable archive table, meant to be saved as PDF from the browser."""
    reports = await _load_reports(db, q)
    return HTMLResponse(export.render_archive_html(reports))


@router.get("/reports/backup.json")
async def download_backup(db: AsyncSession = Depends(get_db)):
    reports = await _load_reports(db)
    filename = export.backup_filename()
    return Response(
        content=export.render_backup(reports),
        media_type="application/json",
        headers=_attachment(filename, filename),
    )


@router.get("/reports/{report_id}/print", response_class=HTMLResponse)
async def print_report(report_id: int, db: AsyncSession = Depends(get_db)):
    row = await ReportRepository(db).get(report_id)
    if row is None:
        raise NotFoundError("Report", report_id)
    return HTMLResponse(export.render_report_html(ReportResponse.model_validate(row)))
