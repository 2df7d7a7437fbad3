"""Tests for SQLAlchemyArticleRepository against an in-memory SQLite database."""

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateTable

from app.domain.entities import Article
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.database.models import ArticleModel
from app.infrastructure.database.repositories import SQLAlchemyArticleRepository


@pytest.mark.asyncio
async def test_create_assigns_id_and_persists(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        created = await repo.create(Article(title="First post", body="Hello"))
        await session.commit()

    assert created.id is not None

    async with session_factory() as session:
        loaded = await SQLAlchemyArticleRepository(session).get_by_id(created.id)

    assert loaded is not None
    assert loaded.title == "First post"
    assert loaded.published is False
    assert loaded.description is None


@pytest.mark.asyncio
async def test_ids_are_unique(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        first = await repo.create(Article(title="First post", body="a"))
        second = await repo.create(Article(title="Second post", body="b"))

    assert first.id != second.id


@pytest.mark.asyncio
async def test_list_by_published_splits_collection(session_factory, seeded):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        published = await repo.list_by_published(True)
        drafts = await repo.list_by_published(False)

    assert [a.id for a in published] == [100001]
    assert [a.id for a in drafts] == [100002]


@pytest.mark.asyncio
async def test_update_writes_back_fields(session_factory, seeded):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        article = await repo.get_by_id(100002)
        article.update(title="title2 revised", published=True)
        await repo.update(article)
        await session.commit()

    async with session_factory() as session:
        reloaded = await SQLAlchemyArticleRepository(session).get_by_id(100002)

    assert reloaded.title == "title2 revised"
    assert reloaded.published is True
    assert reloaded.body == "body2"


@pytest.mark.asyncio
async def test_update_unknown_article_raises(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        with pytest.raises(EntityNotFoundError):
            await repo.update(Article(id=42, title="Ghost article", body="..."))


@pytest.mark.asyncio
async def test_count(session_factory, seeded):
    async with session_factory() as session:
        assert await SQLAlchemyArticleRepository(session).count() == len(seeded)


def test_postgres_ddl_leaves_title_unbounded():
    ddl = str(CreateTable(ArticleModel.__table__).compile(dialect=postgresql.dialect()))

    assert "title TEXT NOT NULL" in ddl
    assert "VARCHAR(255)" not in ddl
    assert "description VARCHAR(300)" in ddl
