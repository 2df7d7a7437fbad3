"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ArticleRepository
from app.domain.entities import Article
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.database.models import ArticleModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            description=model.description,
            body=model.body,
            published=model.published,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            description=entity.description,
            body=entity.body,
            published=entity.published,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def list_by_published(self, published: bool) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.published == published)
            .order_by(ArticleModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise EntityNotFoundError("Article", article.id)
        model.title = article.title
        model.description = article.description
        model.body = article.body
        model.published = article.published
        model.updated_at = article.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def count(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(ArticleModel)
        )
        return result.scalar_one()
