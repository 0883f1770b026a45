"""
Tests for the articles read use cases.

Tests use cases with mocked ports. No real infrastructure needed.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from app.application.articles.dtos import GetArticleQuery, ListArticlesQuery
from app.application.articles.get_article import GetArticleUseCase
from app.application.articles.list_articles import ListArticlesUseCase
from app.domain.articles.entities import Article
from app.domain.articles.errors import ArticleNotFoundError
from app.domain.articles.ports import ArticleRepository

CREATED = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


def _article(article_id: int = 1, tags: tuple[str, ...] = ("python",)) -> Article:
    return Article(
        id=article_id,
        title=f"Article {article_id}",
        slug=f"article-{article_id}",
        content="Body",
        tags=tags,
        created_at=CREATED,
        updated_at=CREATED,
    )


class TestGetArticleUseCase:
    """Tests for the GetArticleUseCase."""

    def test_existing_article_is_mapped_to_dto(self) -> None:
        repo = MagicMock(spec=ArticleRepository)
        repo.get_by_id.return_value = _article(7, tags=("laravel", "python"))

        result = GetArticleUseCase(repo).execute(GetArticleQuery(article_id=7))

        repo.get_by_id.assert_called_once_with(7)
        assert result.id == 7
        assert result.slug == "article-7"
        assert result.tags == ["laravel", "python"]
        assert result.created_at == CREATED

    def test_missing_article_raises_error(self) -> None:
        repo = MagicMock(spec=ArticleRepository)
        repo.get_by_id.return_value = None

        with pytest.raises(ArticleNotFoundError) as exc_info:
            GetArticleUseCase(repo).execute(GetArticleQuery(article_id=999))
        assert exc_info.value.article_id == 999


class TestListArticlesUseCase:
    """Tests for the ListArticlesUseCase."""

    def test_lists_articles_in_repository_order(self) -> None:
        repo = MagicMock(spec=ArticleRepository)
        repo.list_recent.return_value = [_article(2), _article(1)]

        results = ListArticlesUseCase(repo).execute(ListArticlesQuery(limit=5))

        repo.list_recent.assert_called_once_with(limit=5, tag=None)
        assert [r.id for r in results] == [2, 1]

    def test_tag_filter_is_trimmed(self) -> None:
        repo = MagicMock(spec=ArticleRepository)
        repo.list_recent.return_value = []

        ListArticlesUseCase(repo).execute(ListArticlesQuery(tag="  python "))

        repo.list_recent.assert_called_once_with(limit=20, tag="python")

    def test_blank_tag_means_no_filter(self) -> None:
        repo = MagicMock(spec=ArticleRepository)
        repo.list_recent.return_value = []

        ListArticlesUseCase(repo).execute(ListArticlesQuery(tag="   "))

        repo.list_recent.assert_called_once_with(limit=20, tag=None)

    @pytest.mark.parametrize("limit", [0, 101])
    def test_limit_out_of_range_raises_error(self, limit: int) -> None:
        repo = MagicMock(spec=ArticleRepository)
        with pytest.raises(ValueError):
            ListArticlesUseCase(repo).execute(ListArticlesQuery(limit=limit))
        repo.list_recent.assert_not_called()
