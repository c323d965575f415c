"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from fieldreports.db.schema import initialize
from fieldreports.events.live_channel import LiveUpdateChannel


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///", echo=False)
    await initialize(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Create a test database session."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def live_channel():
    return LiveUpdateChannel(queue_size=10)


@pytest.fixture
def app(db_engine, live_channel):
    """Create a test application instance with in-memory DB."""
    from fieldreports.main import create_app

    _app = create_app()
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    _app.state.db_engine = db_engine
    _app.state.db_session_factory = session_factory
    _app.state.live_channel = live_channel
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def subscription(live_channel):
    """A live subscriber registered for the duration of the test."""
    async with live_channel.subscribe() as sub:
        yield sub


@pytest.fixture
def drain():
    """Return a helper popping every event currently queued for a subscription."""

    def _drain(subscription) -> list[dict]:
        events = []
        while not subscription.queue.empty():
            events.append(subscription.queue.get_nowait())
        return events

    return _drain
