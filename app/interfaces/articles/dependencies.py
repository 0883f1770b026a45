"""
Dependency injection for the articles bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the articles context.
Form services are built per request so no validation state is
shared between requests.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.application.articles.form_service import FormService
from app.application.articles.get_article import GetArticleUseCase
from app.application.articles.list_articles import ListArticlesUseCase
from app.core.config import settings
from app.domain.articles.ports import ArticleRepository
from app.infrastructure.articles.article_repository import (
    ArticleRepositoryAdapter,
)
from app.infrastructure.articles.article_validator import ArticleFormValidator


@lru_cache
def get_db_engine() -> Engine:
    """Build a SQLAlchemy engine from application settings, once per process."""
    return create_engine(settings.get_database_dsn(), pool_pre_ping=True)


def get_article_repository(
    engine: Engine = Depends(get_db_engine),
) -> ArticleRepository:
    """Build the article repository adapter."""
    return ArticleRepositoryAdapter(engine=engine)


def get_create_article_form_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> FormService:
    """Build a FormService that validates and creates articles."""
    return FormService(
        validator=ArticleFormValidator(mode="create"),
        repository=repository,
    )


def get_update_article_form_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> FormService:
    """Build a FormService that validates and updates articles."""
    return FormService(
        validator=ArticleFormValidator(mode="update"),
        repository=repository,
    )


def get_article_use_case(
    repository: ArticleRepository = Depends(get_article_repository),
) -> GetArticleUseCase:
    """Build GetArticleUseCase with its infrastructure dependencies."""
    return GetArticleUseCase(article_repo=repository)


def get_list_articles_use_case(
    repository: ArticleRepository = Depends(get_article_repository),
) -> ListArticlesUseCase:
    """Build ListArticlesUseCase with its infrastructure dependencies."""
    return ListArticlesUseCase(article_repo=repository)
