"""Pydantic models for Report payloads and responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from fieldreports.models.enums import ReportStatus

REQUIRED_FIELDS = ("teacher_name", "department")


class ReportCreate(BaseModel):
    """Payload assembled by the submission wizard.

    Required fields are checked by :meth:`missing_required_fields` rather than
    by the schema so that an absent and an empty value produce the same error.
    """

    model_config = ConfigDict(extra="ignore")

    teacher_name: str | None = None
    department: str | None = None
    details: str | None = None
    governorate: str | None = None
    educational_admin: str | None = None
    school_id: str | None = None
    school_name: str | None = None
    principal_phone: str | None = None
    visit_date: str | None = None
    accomplishments: str | None = None
    negatives: str | None = None
    violations: str | None = None
    file_url: str | None = None
    image_url: str | None = None
    location_lat: float | None = None
    location_lng: float | None = None

    def missing_required_fields(self) -> list[str]:
        return [
            name
            for name in REQUIRED_FIELDS
            if not (getattr(self, name) or "").strip()
        ]

    def to_row_fields(self) -> dict:
        """Column values for insertion.

        Required fields are stored trimmed, matching the check in
        :meth:`missing_required_fields`; ``details`` defaults to an empty string.
        """
        fields = self.model_dump()
        for name in REQUIRED_FIELDS:
            fields[name] = fields[name].strip()
        fields["details"] = self.details or ""
        return fields


class ReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    teacher_name: str
    department: str
    details: str
    governorate: str | None = None
    educational_admin: str | None = None
    school_id: str | None = None
    school_name: str | None = None
    principal_phone: str | None = None
    visit_date: str | None = None
    accomplishments: str | None = None
    negatives: str | None = None
    violations: str | None = None
    file_url: str | None = None
    image_url: str | None = None
    location_lat: float | None = None
    location_lng: float | None = None
    status: str
    created_at: datetime


class StatusUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: ReportStatus
