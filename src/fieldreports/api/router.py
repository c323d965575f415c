"""Master API router mounted at /api/v1."""

from fastapi import APIRouter
from fieldreports.api.routes import (
    archive,
    health,
    reports,
    stream,
)

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(archive.router)
api_router.include_router(reports.router)
api_router.include_router(stream.router)

# Unversioned paths used by the submission wizard and archive browser clients
client_api_router = APIRouter(prefix="/api", include_in_schema=False)
client_api_router.include_router(reports.router)
