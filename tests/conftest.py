"""
Shared pytest configuration.

Environment defaults are set before the application is imported so
settings, the rate limiter and the engine factory pick them up.
"""

import os
from collections.abc import Iterator

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.infrastructure.articles.article_repository import (  # noqa: E402
    ArticleRepositoryAdapter,
)
from app.infrastructure.articles.tables import create_schema  # noqa: E402


@pytest.fixture
def engine() -> Iterator[Engine]:
    """In-memory SQLite engine shared across threads, with the schema created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine: Engine) -> ArticleRepositoryAdapter:
    return ArticleRepositoryAdapter(engine=engine)
