"""
Community Garden Backend — Test Configuration (conftest.py)
============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh for each test):
    ├── test_settings:  Settings pointing at a per-test SQLite file
    ├── database:       Database handle with the schema created
    ├── db_session:     AsyncSession on that database
    ├── plot_repository: PlotRepository over db_session
    ├── test_client:    HTTPX AsyncClient with the admin credentials
    └── anonymous_client: HTTPX AsyncClient without credentials
"""

import os

# Override settings for testing BEFORE any garden imports
# The module-level `settings` and `app` are built at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["DB_AUTO_CREATE_SCHEMA"] = "false"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from garden.config import Settings
from garden.database import Database
from garden.main import create_app
from garden.repositories.plot_repository import PlotRepository

ADMIN_AUTH = ("admin", "admin")


@pytest.fixture
def test_settings(tmp_path):
    """Settings for an isolated SQLite database file under tmp_path."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'garden.db'}",
        admin_username="admin",
        admin_password="admin",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(test_settings):
    """A real Database handle with all tables created; disposed after the test."""
    db = Database(test_settings)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture
def plot_repository(db_session):
    return PlotRepository(db_session)


def _make_app(settings, database):
    # ASGITransport does not run the lifespan, so the handle is attached directly
    app = create_app(settings)
    app.state.database = database
    return app


@pytest_asyncio.fixture
async def test_client(test_settings, database):
    """
    HTTPX AsyncClient routed straight into the app, authenticated as admin.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/plots")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=_make_app(test_settings, database))
    async with AsyncClient(transport=transport, base_url="http://test", auth=ADMIN_AUTH) as client:
        yield client


@pytest_asyncio.fixture
async def anonymous_client(test_settings, database):
    transport = ASGITransport(app=_make_app(test_settings, database))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
