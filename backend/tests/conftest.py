"""
Pytest fixtures for the Sleeper league dashboard tests.

Upstream services are replaced by small in-memory fakes; the database is
a fresh temp-file SQLite per test.
"""
import os
import tempfile
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import sleeperboard.models  # noqa: F401  registers all models with Base
from sleeperboard.database import Base, get_db
from sleeperboard.dependencies import get_sleeper_client, get_text_generator
from sleeperboard.main import app
from league_data import FakeSleeperClient, FakeTextGenerator


@pytest.fixture
def fake_sleeper():
    return FakeSleeperClient()


@pytest.fixture
def fake_generator():
    return FakeTextGenerator()


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

@pytest.fixture
async def db_session(tmp_path):
    """Async session on a fresh temp-file SQLite DB."""
    db_path = str(tmp_path / "test_sleeperboard.db")

    sync_engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    async_engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}")
    AsyncSessionLocal = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
    async with AsyncSessionLocal() as session:
        yield session

    await async_engine.dispose()


# ---------------------------------------------------------------------------
# API client
# ---------------------------------------------------------------------------

@pytest.fixture
def api(fake_sleeper, fake_generator):
    """TestClient wired to the fakes and a temp-file SQLite DB."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    sync_engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    client_engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}")
    ClientSession = async_sessionmaker(client_engine, expire_on_commit=False, class_=AsyncSession)

    async def override_get_db():
        async with ClientSession() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_sleeper_client] = lambda: fake_sleeper
    app.dependency_overrides[get_text_generator] = lambda: fake_generator

    with patch("sleeperboard.main.init_db", new=AsyncMock()):
        with TestClient(app) as c:
            yield c

    app.dependency_overrides.clear()
    try:
        os.unlink(db_path)
    except OSError:
        pass
