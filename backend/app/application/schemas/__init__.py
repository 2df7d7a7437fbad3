from .article import ArticleCreate, ArticleUpdate, ArticleResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
]
