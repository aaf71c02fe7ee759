import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("AUTH_PROVIDER_SECRET", "provider-secret")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from hacklog.core.security import create_access_token
from hacklog.db.base import Base
from hacklog.db.session import get_session
from hacklog.main import app
from hacklog.users.repository import upsert_user


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def session_maker(anyio_backend):
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    async def _override_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = _override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session_maker):
    """Crea (o actualiza) un usuario y devuelve headers con su bearer token."""

    async def _make(user_id: str, **fields) -> dict:
        async with session_maker() as session:
            await upsert_user(session, {"id": user_id, **fields})
            await session.commit()
        return {"Authorization": f"Bearer {create_access_token(sub=user_id)}"}

    return _make


@pytest.fixture
def project_payload():
    def _payload(**overrides) -> dict:
        data = {
            "hackathonName": "HackMIT",
            "projectTitle": "EcoTrack",
            "description": "Carbon footprint tracker",
            "date": "2024-09-01",
        }
        data.update(overrides)
        return data

    return _payload
