"""Schema creation and additive migrations applied at startup.

Older deployments created the ``reports`` table with fewer columns. Each
entry in ``MIGRATIONS`` lists the columns a release introduced; on every
start the missing ones are added as nullable TEXT columns. Nothing is ever
dropped or rewritten, so running :func:`initialize` repeatedly is safe.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncEngine

from fieldreports.db.base import Base
import fieldreports.db.models  # noqa: F401 (register all ORM models)

logger = logging.getLogger(__name__)

REPORTS_TABLE = "reports"


@dataclass(frozen=True)
class AdditiveMigration:
    version: int
    description: str
    columns: tuple[str, ...]


MIGRATIONS: tuple[AdditiveMigration, ...] = (
    AdditiveMigration(
        version=2,
        description="school identity and visit sections",
        columns=(
            "governorate",
            "educational_admin",
            "school_id",
            "school_name",
            "principal_phone",
            "visit_date",
            "accomplishments",
            "negatives",
            "violations",
            "file_url",
        ),
    ),
)


def _existing_columns(sync_conn) -> set[str]:
    return {col["name"] for col in inspect(sync_conn).get_columns(REPORTS_TABLE)}


async def initialize(engine: AsyncEngine) -> list[str]:
    """Ensure the reports table exists with every known column.

    Returns the names of columns added by this call.
    """
    added: list[str] = []
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        existing = await conn.run_sync(_existing_columns)

        for migration in MIGRATIONS:
            for column in migration.columns:
                if column in existing:
                    continue
                await conn.execute(text(f"ALTER TABLE {REPORTS_TABLE} ADD COLUMN {column} TEXT"))
                existing.add(column)
                added.append(column)
                logger.info(
                    "Added column %s.%s (migration %d: %s)",
                    REPORTS_TABLE,
                    column,
                    migration.version,
                    migration.description,
                )

    return added
