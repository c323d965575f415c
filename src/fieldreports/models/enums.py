"""String enums and fixed catalogues for field reports."""

from enum import StrEnum


class ReportStatus(StrEnum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    REJECTED = "rejected"


class LiveEventType(StrEnum):
    CONNECTED = "CONNECTED"
    NEW_REPORT = "NEW_REPORT"
    UPDATE_REPORT = "UPDATE_REPORT"


# Administrative follow-up categories offered by the submission wizard
DEPARTMENTS: tuple[str, ...] = (
    "متابعة شئون العاملين",
    "متابعة شئون الطلاب",
    "متابعة سجل التكليفات",
    "متابعة الوحدة المنتجة",
    "متابعة الجمعية التعاونية المدرسية",
    "متابعة المشاركة المجتمعية",
    "متابعة لائحة الانضباط المدرسي",
    "متابعة الصيانة الدورية",
    "متابعة الامن والسلامة المهنية",
    "متابعة المكتبة",
    "متابعة التقيمات",
    "متابعة الرواكد الخشبية والمعدنية",
    "متابعة تسلم الكتب والتابلت",
)

STATUS_LABELS: dict[str, str] = {
    ReportStatus.PENDING: "قيد الانتظار",
    ReportStatus.IN_PROGRESS: "قيد التنفيذ",
    ReportStatus.RESOLVED: "تم الحل",
    ReportStatus.REJECTED: "مرفوض",
}


def status_label(status: str) -> str:
    """Arabic display label for a status; unknown values are returned as-is."""
    return STATUS_LABELS.get(status, status)
