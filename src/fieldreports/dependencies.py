"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator

from fastapi import Request

from fieldreports.events.live_channel import LiveUpdateChannel


async def get_db(request: Request) -> AsyncGenerator:
    """Yield a database session from the app's session factory."""
    session_factory = request.app.state.db_session_factory
    async with session_factory() as session:
        yield session


def get_live_channel(request: Request) -> LiveUpdateChannel | None:
    """Return the live update channel from app state."""
    return getattr(request.app.state, "live_channel", None)
