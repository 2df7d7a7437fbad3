"""Health check endpoint."""

from fastapi import APIRouter, Depends

from app.application.services import ArticleService
from app.config import get_settings
from app.infrastructure.dependencies import get_article_service

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    service: ArticleService = Depends(get_article_service),
) -> dict:
    """Returns the application health status and the number of stored articles.

    A failing database surfaces as a 500 here rather than a false "healthy".
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "articles": await service.count_articles(),
    }
