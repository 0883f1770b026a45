"""
Data Transfer Objects for the articles application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.domain.articles.entities import Article


@dataclass(frozen=True)
class GetArticleQuery:
    """Input DTO for retrieving a single article.

    Attributes:
        article_id: Identifier of the article.
    """

    article_id: int


@dataclass(frozen=True)
class ListArticlesQuery:
    """Input DTO for listing articles.

    Attributes:
        limit: Maximum number of articles to return (1-100).
        tag: Optional tag name filter.
    """

    limit: int = 20
    tag: Optional[str] = None


@dataclass(frozen=True)
class ArticleResult:
    """Output DTO for an article.

    Attributes:
        id: Article identifier.
        title: Article title.
        slug: URL-friendly form of the title.
        content: Article body.
        tags: Tag names attached to the article.
        created_at: When the article was created.
        updated_at: When the article was last modified.
    """

    id: int
    title: str
    slug: str
    content: str
    tags: list[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_entity(cls, article: Article) -> "ArticleResult":
        return cls(
            id=article.id,
            title=article.title,
            slug=article.slug,
            content=article.content,
            tags=list(article.tags),
            created_at=article.created_at,
            updated_at=article.updated_at,
        )
