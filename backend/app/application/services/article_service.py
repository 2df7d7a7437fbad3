"""Application service (use case) for Article operations."""

import logging
import re

from app.application.interfaces import ArticleRepository
from app.application.schemas import ArticleCreate, ArticleUpdate
from app.domain.entities import Article
from app.domain.exceptions import EntityNotFoundError, InvalidIdentifierError

logger = logging.getLogger(__name__)

_INTEGER_ID = re.compile(r"-?\d+")

# Ids are 32-bit serials; anything outside this range cannot match a row.
MIN_ARTICLE_ID = 1
MAX_ARTICLE_ID = 2**31 - 1


def parse_article_id(raw_id: int | str) -> int:
    """Turn a path parameter into an article ID.

    Raises:
        InvalidIdentifierError: if ``raw_id`` is not integer-shaped.
    """
    if isinstance(raw_id, int) and not isinstance(raw_id, bool):
        return raw_id
    if isinstance(raw_id, str) and _INTEGER_ID.fullmatch(raw_id):
        return int(raw_id)
    raise InvalidIdentifierError("Article", raw_id)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int | str) -> Article:
        article_id = parse_article_id(article_id)
        article = None
        if MIN_ARTICLE_ID <= article_id <= MAX_ARTICLE_ID:
            article = await self._repository.get_by_id(article_id)
        if article is None:
            logger.debug("Article %s not found", article_id)
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self, published: bool = True) -> list[Article]:
        return await self._repository.list_by_published(published)

    async def create_article(self, data: ArticleCreate) -> Article:
        article = Article(
            title=data.title,
            description=data.description,
            body=data.body,
            published=data.published,
        )
        created = await self._repository.create(article)
        logger.info("Created article %s (published=%s)", created.id, created.published)
        return created

    async def update_article(self, article_id: int | str, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)
        changes = data.model_dump(exclude_unset=True)
        article.update(**changes)
        updated = await self._repository.update(article)
        logger.info("Updated article %s fields=%s", updated.id, sorted(changes))
        return updated

    async def count_articles(self) -> int:
        return await self._repository.count()
