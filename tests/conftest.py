"""
This file contains shared fixtures and configuration for the test suite.

Every test gets its own SQLite database file under ``tmp_path``, so tests are
isolated from each other and from any DATABASE_URL in the environment.
"""

import asyncio
import uuid
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskboard.config import Settings
from taskboard.db import (
    close_db,
    create_engine_from_settings,
    create_session_factory,
    init_db,
)


def make_settings(db_path, **overrides) -> Settings:
    values = {
        "DATABASE_URL": f"sqlite+aiosqlite:///{db_path}",
        "ADMIN_ENABLED": True,
        "METRICS_ENABLED": True,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings_factory(tmp_path):
    """Build settings for a fresh database file; keyword arguments override by env name."""

    def _factory(**overrides) -> Settings:
        return make_settings(tmp_path / f"taskboard_{uuid.uuid4().hex}.db", **overrides)

    return _factory


@pytest.fixture
def app_settings(tmp_path) -> Settings:
    return make_settings(tmp_path / "taskboard_test.db")


@pytest.fixture
def app(app_settings: Settings) -> FastAPI:
    """
    Create a new application instance bound to the per-test database.
    """
    # Import the factory function here to ensure it's fresh for each test.
    from main import create_app

    return create_app(app_settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Fixture to get a test client for making API requests.
    The TestClient runs the application's lifespan (engine setup and teardown).
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def session_factory(
    app_settings: Settings,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_engine_from_settings(app_settings)
    await init_db(engine)
    yield create_session_factory(engine)
    await close_db(engine)


@pytest.fixture
def run_against_db(app_settings: Settings):
    """Run ``coro_factory(session_factory)`` on a short-lived engine and return its result."""

    def _runner(coro_factory):
        return asyncio.run(_run(coro_factory))

    async def _run(coro_factory):
        engine = create_engine_from_settings(app_settings)
        try:
            await init_db(engine)
            return await coro_factory(create_session_factory(engine))
        finally:
            await close_db(engine)

    return _runner
