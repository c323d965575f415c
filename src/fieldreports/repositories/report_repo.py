"""Report repository."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fieldreports.db.base import utcnow
from fieldreports.db.models.report import ReportRow
from fieldreports.models.enums import ReportStatus
from fieldreports.repositories.base import BaseRepository

# Largest value a SQLite INTEGER primary key can hold
MAX_REPORT_ID = 2**63 - 1


def is_storable_id(report_id: int) -> bool:
    """Whether ``report_id`` could belong to a stored row at all."""
    return 1 <= report_id <= MAX_REPORT_ID


class ReportRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ReportRow)

    async def get(self, report_id: int) -> ReportRow | None:
        if not is_storable_id(report_id):
            return None
        return await self.get_by_id("id", report_id)

    async def insert(self, **fields) -> ReportRow:
        """Persist a new report; id, status and created_at are always store-assigned."""
        for key in ("id", "status", "created_at"):
            fields.pop(key, None)
        return await self.create(
            **fields,
            status=ReportStatus.PENDING.value,
            created_at=utcnow(),
        )

    async def list_all(self) -> list[ReportRow]:
        stmt = select(ReportRow).order_by(ReportRow.created_at.desc(), ReportRow.id.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update_status(self, report_id: int, status: str) -> bool:
        """Set the status of one report. Returns False when no row matched."""
        if not is_storable_id(report_id):
            return False
        stmt = (
            update(ReportRow)
            .where(ReportRow.id == report_id)
            .values(status=status)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
