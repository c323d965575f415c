"""Report list / create / status update routes."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fieldreports.dependencies import get_db, get_live_channel
from fieldreports.errors.exceptions import ValidationError
from fieldreports.events.live_channel import LiveUpdateChannel
from fieldreports.events.report_events import publish_event, report_created_event, report_updated_event
from fieldreports.models.common import SuccessResponse
from fieldreports.models.report import ReportCreate, ReportResponse, StatusUpdate
from fieldreports.repositories.report_repo import ReportRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Reports"])


@router.get("/reports", response_model=list[ReportResponse])
async def list_reports(db: AsyncSession = Depends(get_db)) -> list[ReportResponse]:
    """List every stored report, newest first."""
    repo = ReportRepository(db)
    rows = await repo.list_all()
    return [ReportResponse.model_validate(r) for r in rows]


@router.post("/reports", status_code=201, response_model=ReportResponse)
async def create_report(
    payload: ReportCreate,
    db: AsyncSession = Depends(get_db),
    channel: LiveUpdateChannel | None = Depends(get_live_channel),
) -> ReportResponse:
    missing = payload.missing_required_fields()
    if missing:
        raise ValidationError("Missing required fields", details={"missing": missing})

    repo = ReportRepository(db)
    row = await repo.insert(**payload.to_row_fields())
    await db.commit()

    report = ReportResponse.model_validate(row)
    logger.info("Report %d created (department=%s)", report.id, report.department)

    await publish_event(channel, report_created_event(report.model_dump(mode="json")))
    return report


@router.patch("/reports/{report_id}", response_model=SuccessResponse)
async def update_report_status(
    report_id: int,
    body: StatusUpdate,
    db: AsyncSession = Depends(get_db),
    channel: LiveUpdateChannel | None = Depends(get_live_channel),
) -> SuccessResponse:
    """Set a report's status. An unknown id is acknowledged without changes."""
    repo = ReportRepository(db)
    status = body.status.value
    matched = await repo.update_status(report_id, status)
    await db.commit()

    if matched:
        logger.info("Report %d status set to %s", report_id, status)
    else:
        logger.info("Status update for unknown report %d ignored", report_id)

    await publish_event(channel, report_updated_event(report_id, status))
    return SuccessResponse()
