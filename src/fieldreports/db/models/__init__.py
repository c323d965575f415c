"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from fieldreports.db.models.report import ReportRow

__all__ = [
    "ReportRow",
]
