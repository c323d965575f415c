"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fieldreports.config import settings
from fieldreports.db.engine import create_db_engine, create_session_factory
from fieldreports.db.schema import initialize
from fieldreports.events.live_channel import LiveUpdateChannel
from fieldreports.logging_config import configure_logging

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=settings.json_logs)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown resources."""
    engine = create_db_engine(app.state.database_url)

    added = await initialize(engine)
    if added:
        logger.info("Schema upgraded, added %d column(s)", len(added))

    app.state.db_engine = engine
    app.state.db_session_factory = create_session_factory(engine)
    app.state.live_channel = LiveUpdateChannel(queue_size=settings.live_queue_size)

    logger.info("Field reports API started (db=%s)", engine.url.render_as_string(hide_password=True))
    yield

    # Shutdown
    await engine.dispose()
    logger.info("Field reports API shutdown complete")


def create_app(database_url: str | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Field Reports API",
        version="1.0.0",
        description="School field-visit report submission, archive export and live updates.",
        lifespan=lifespan,
    )
    app.state.database_url = database_url or settings.database_url

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add middleware (order matters: last added = first executed)
    from fieldreports.api.middleware.request_size import RequestSizeLimitMiddleware
    from fieldreports.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.max_request_bytes)
    app.add_middleware(TraceIdMiddleware)

    # Register error handlers
    from fieldreports.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    # Import and mount routers
    from fieldreports.api.router import api_router, client_api_router
    from fieldreports.api.routes.stream import ws_router
    app.include_router(api_router)
    app.include_router(client_api_router)
    app.include_router(ws_router)

    return app


app = create_app()
