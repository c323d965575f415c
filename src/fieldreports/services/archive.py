"""Archive search and tabular row formatting shared by the export formats."""

from datetime import datetime

from fieldreports.models.enums import status_label
from fieldreports.models.report import ReportResponse

SEARCH_FIELDS = ("teacher_name", "details", "school_name", "school_id")

NOT_SPECIFIED = "غير محدد"
NOT_AVAILABLE = "غير متوفر"

# (header, value builder) in spreadsheet column order
SPREADSHEET_COLUMNS = (
    ("المعرف", lambda r: r.id),
    ("اسم مدير المدرسة", lambda r: r.teacher_name),
    ("هاتف المدير", lambda r: r.principal_phone or ""),
    ("تاريخ الزيارة", lambda r: r.visit_date or ""),
    ("المحافظة", lambda r: r.governorate or ""),
    ("الإدارة التعليمية", lambda r: r.educational_admin or ""),
    ("اسم المدرسة", lambda r: r.school_name or ""),
    ("كود المدرسة", lambda r: r.school_id or ""),
    ("القسم", lambda r: r.department),
    ("ما تم إنجازه", lambda r: r.accomplishments or ""),
    ("سلبيات", lambda r: r.negatives or ""),
    ("مخالفات", lambda r: r.violations or ""),
    ("الحالة", lambda r: status_label(r.status)),
    ("التاريخ", lambda r: format_timestamp(r.created_at)),
    ("الموقع (خط العرض)", lambda r: r.location_lat if r.location_lat is not None else NOT_SPECIFIED),
    ("الموقع (خط الطول)", lambda r: r.location_lng if r.location_lng is not None else NOT_SPECIFIED),
)


def matches(report: ReportResponse, term: str) -> bool:
    return any(term in (getattr(report, name) or "") for name in SEARCH_FIELDS)


def filter_reports(reports: list[ReportResponse], term: str | None) -> list[ReportResponse]:
    """Keep reports containing ``term`` in any searchable field; a blank term keeps all."""
    term = (term or "").strip()
    if not term:
        return list(reports)
    return [r for r in reports if matches(r, term)]


def format_timestamp(value: datetime) -> str:
    return value.strftime("%Y/%m/%d %H:%M")


def has_location(report: ReportResponse) -> bool:
    return report.location_lat is not None and report.location_lng is not None


def map_url(report: ReportResponse) -> str | None:
    if not has_location(report):
        return None
    return f"https://www.google.com/maps?q={report.location_lat},{report.location_lng}"


def spreadsheet_rows(reports: list[ReportResponse]) -> list[list]:
    return [[build(r) for _, build in SPREADSHEET_COLUMNS] for r in reports]


def spreadsheet_headers() -> list[str]:
    return [header for header, _ in SPREADSHEET_COLUMNS]
