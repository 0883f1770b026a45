"""
Use case: List the most recent articles.

Input: ListArticlesQuery (limit, optional tag)
Output: list[ArticleResult]
Side effects: None.
Failure cases: ValueError for a limit outside 1-100.
"""

import logging

from app.application.articles.dtos import ArticleResult, ListArticlesQuery
from app.domain.articles.ports import ArticleRepository

logger = logging.getLogger(__name__)

MAX_LIMIT = 100


class ListArticlesUseCase:
    """Returns the newest articles, optionally filtered by tag."""

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    def execute(self, query: ListArticlesQuery) -> list[ArticleResult]:
        """Run the article listing use case.

        Args:
            query: Page size and optional tag filter.

        Returns:
            Articles ordered newest first.
        """
        if not 1 <= query.limit <= MAX_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_LIMIT}")

        tag = query.tag.strip() if query.tag else None
        logger.debug("Listing articles, limit=%d, tag=%s", query.limit, tag)

        articles = self._article_repo.list_recent(limit=query.limit, tag=tag or None)
        return [ArticleResult.from_entity(a) for a in articles]
