"""
Use case: Retrieve a single article.

Input: GetArticleQuery (article_id)
Output: ArticleResult
Side effects: None.
Failure cases: ArticleNotFoundError.
"""

import logging

from app.application.articles.dtos import ArticleResult, GetArticleQuery
from app.domain.articles.errors import ArticleNotFoundError
from app.domain.articles.ports import ArticleRepository

logger = logging.getLogger(__name__)


class GetArticleUseCase:
    """Looks an article up by id and maps it to an application DTO."""

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    def execute(self, query: GetArticleQuery) -> ArticleResult:
        """Run the article retrieval use case.

        Args:
            query: Contains the id of the article to fetch.

        Returns:
            The article as an ArticleResult.

        Raises:
            ArticleNotFoundError: If no article has the given id.
        """
        article = self._article_repo.get_by_id(query.article_id)
        if article is None:
            logger.info("Article %d not found.", query.article_id)
            raise ArticleNotFoundError(query.article_id)
        return ArticleResult.from_entity(article)
