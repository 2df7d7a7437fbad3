"""Article endpoints — list, drafts, get, create and partial update."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.application.schemas import ArticleCreate, ArticleUpdate, ArticleResponse
from app.application.services import ArticleService, parse_article_id
from app.domain.exceptions import (
    ArticleValidationError,
    EntityNotFoundError,
    InvalidIdentifierError,
)
from app.domain.validation import validate_create, validate_update
from app.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])

_CREATE_EXAMPLE = {
    "title": "Getting Started",
    "description": "A short introduction.",
    "body": "This is the article body.",
    "published": False,
}


@router.get("", response_model=list[ArticleResponse])
async def list_published_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every published article."""
    articles = await service.list_articles(published=True)
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/drafts", response_model=list[ArticleResponse])
async def list_draft_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every unpublished article."""
    articles = await service.list_articles(published=False)
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    payload: Any = Body(..., examples=[_CREATE_EXAMPLE]),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article. ``published`` defaults to false."""
    try:
        data = ArticleCreate(**validate_create(payload))
    except ArticleValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_detail())
    article = await service.create_article(data)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.patch("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: str,
    payload: Any = Body(..., examples=[{"title": "A better title"}]),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Partially update an article — only supplied fields change."""
    try:
        parsed_id = parse_article_id(article_id)
        data = ArticleUpdate(**validate_update(payload))
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ArticleValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_detail())

    try:
        article = await service.update_article(parsed_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)
