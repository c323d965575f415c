"""Report table."""

from datetime import datetime

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fieldreports.db.base import Base, UTCDateTime, utcnow
from fieldreports.models.enums import ReportStatus


class ReportRow(Base):
    __tablename__ = "reports"
    # ids of rows removed by hand are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    teacher_name: Mapped[str] = mapped_column(Text, nullable=False)
    department: Mapped[str] = mapped_column(Text, nullable=False)
    details: Mapped[str] = mapped_column(Text, nullable=False, default="")
    governorate: Mapped[str | None] = mapped_column(Text, nullable=True)
    educational_admin: Mapped[str | None] = mapped_column(Text, nullable=True)
    school_id: Mapped[str | None] = mapped_column(Text, nullable=True)
    school_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    principal_phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    visit_date: Mapped[str | None] = mapped_column(Text, nullable=True)
    accomplishments: Mapped[str | None] = mapped_column(Text, nullable=True)
    negatives: Mapped[str | None] = mapped_column(Text, nullable=True)
    violations: Mapped[str | None] = mapped_column(Text, nullable=True)
    file_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    location_lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    location_lng: Mapped[float | None] = mapped_column(Float, nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default=ReportStatus.PENDING.value)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
