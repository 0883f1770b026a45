"""
Relational schema for the articles bounded context.

Defined with SQLAlchemy Core so the same metadata works on PostgreSQL
(production) and SQLite (tests).
"""

import logging

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

TITLE_MAX_LEN = 255
TAG_MAX_LEN = 50

metadata = MetaData()

articles_table = Table(
    "articles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(TITLE_MAX_LEN), nullable=False),
    Column("slug", String(TITLE_MAX_LEN), nullable=False, unique=True),
    Column("content", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

tags_table = Table(
    "tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(TAG_MAX_LEN), nullable=False, unique=True),
)

article_tag_table = Table(
    "article_tag",
    metadata,
    Column(
        "article_id",
        Integer,
        ForeignKey("articles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


def create_schema(engine: Engine) -> None:
    """Create the articles tables if they do not exist yet."""
    metadata.create_all(engine)
    logger.info("Articles schema ensured on %s.", engine.url.get_backend_name())
