# tests/conftest.py
# Test configuration: environment is set before the app is imported, because
# settings and the engine are built at import time.

import os
import tempfile
from pathlib import Path

_TMP_DIR = Path(tempfile.mkdtemp(prefix="second-brain-tests-"))
DB_PATH = _TMP_DIR / "test.db"

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from second_brain.database import Base, set_sqlite_pragma  # noqa: E402
from second_brain import models  # noqa: E402,F401



def _remove_db_files():
    for suffix in ("", "-wal", "-shm"):
        path = Path(f"{DB_PATH}{suffix}")
        if path.exists():
            path.unlink()


@pytest.fixture
def client():
    """App client on a fresh database file; runs startup and shutdown."""
    from second_brain.main import app

    _remove_db_files()
    with TestClient(app) as c:
        yield c
    _remove_db_files()


@pytest.fixture
def register_and_login(client):
    """Sign up and log in a user, returning the token."""
    def _register_and_login(username: str = "alice", password: str = "secret1") -> str:
        resp = client.post("/signin", json={"username": username, "password": password})
        assert resp.status_code == 201, resp.text
        resp = client.post("/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        return resp.json()["token"]
    return _register_and_login


@pytest_asyncio.fixture
async def db_session():
    """Session on a private in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(engine.sync_engine, "connect", set_sqlite_pragma)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
