import os
from types import SimpleNamespace

# 測試用設定 (必須在匯入 app 之前)
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ["LOG_LEVEL"] = "WARNING"

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import create_tables, get_db
from app.main import app


@pytest_asyncio.fixture
async def engine():
    """每個測試一個全新的 in-memory SQLite"""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def register(client, name: str, email: str, password: str = "secret123"):
    """註冊並回傳 {user_id, name, headers}"""
    response = await client.post(
        "/api/users", json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 201, response.text
    headers = {"Authorization": f"Bearer {response.json()['token']}"}
    me = await client.get("/api/auth", headers=headers)
    return SimpleNamespace(user_id=me.json()["user_id"], name=name, headers=headers)


@pytest_asyncio.fixture
async def alice(client):
    return await register(client, "Alice", "alice@example.com")


@pytest_asyncio.fixture
async def bob(client):
    return await register(client, "Bob", "bob@example.com")


@pytest_asyncio.fixture
async def make_user(client):
    """註冊其他使用者用的工廠"""
    async def _make_user(name: str, email: str, password: str = "secret123"):
        return await register(client, name, email, password)
    return _make_user
