"""Fixtures wiring the FastAPI app to an in-memory SQLite database."""

from datetime import datetime

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.infrastructure.database import ArticleModel, Base, get_db_session
from app.main import app

SEED_TIME = datetime(2024, 1, 1, 12, 0, 0)

SEED_ARTICLES = [
    {
        "id": 100001,
        "title": "title1",
        "description": "description1",
        "body": "body1",
        "published": True,
    },
    {
        "id": 100002,
        "title": "title2",
        "description": "description2",
        "body": "body2",
        "published": False,
    },
]


@pytest_asyncio.fixture
async def session_factory():
    # StaticPool keeps one connection so every session sees the same :memory: database
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def seeded(session_factory):
    async with session_factory() as session:
        session.add_all(
            [
                ArticleModel(**data, created_at=SEED_TIME, updated_at=SEED_TIME)
                for data in SEED_ARTICLES
            ]
        )
        await session.commit()
    return SEED_ARTICLES


@pytest_asyncio.fixture
async def client(session_factory):
    async def _override_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client
    app.dependency_overrides.clear()
