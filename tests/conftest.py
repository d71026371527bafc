import os

os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("SQLITE_URI", ":memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.app import models  # noqa: F401
from src.app.core.db.database import Base, async_get_db
from src.app.main import app


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[async_get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def user_payload():
    return {"username": "alice", "password": "secret"}


@pytest.fixture
def model_payload():
    return {
        "name": "chair.glb",
        "fileUrl": "https://x/chair.glb",
        "fileType": "model/gltf-binary",
        "fileSize": 1024.0,
        "uploadedBy": "user-1",
    }


@pytest.fixture
def annotation_payload():
    return {
        "roomId": "room-42",
        "title": "Loose cable",
        "description": "Behind the desk, left corner",
        "position": {"x": 1.5, "y": 0.0, "z": -2.25},
        "createdBy": "alice",
    }
