"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field


class ArticleCreate(BaseModel):
    """Schema for creating a new article (already checked against the rule table)."""

    title: str = Field(..., examples=["Getting Started"])
    description: str | None = Field(None, examples=["A short introduction."])
    body: str = Field(..., examples=["This is the article body."])
    published: bool = False


class ArticleUpdate(BaseModel):
    """Schema for a partial update — only fields in ``model_fields_set`` change."""

    title: str | None = None
    description: str | None = None
    body: str | None = None
    published: bool | None = None


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    description: str | None
    body: str
    published: bool
    # accepts both names: FastAPI re-validates the aliased dump of returned models
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    model_config = {"from_attributes": True}
