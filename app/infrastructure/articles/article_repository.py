"""
Adapter: Article repository.

Implements ArticleRepository port.
Persists articles and their tag associations with SQLAlchemy Core.
"""

import logging
import re
import unicodedata
from datetime import datetime, timezone
from typing import Any, Iterable, Optional
from uuid import uuid4

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError

from app.domain.articles.entities import Article
from app.domain.articles.ports import ArticleRepository, FormInput
from app.infrastructure.articles.tables import (
    TAG_MAX_LEN,
    TITLE_MAX_LEN,
    article_tag_table,
    articles_table,
    tags_table,
)

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


class ArticleRepositoryAdapter(ArticleRepository):
    """Reads and writes articles in a relational database.

    Implements the ArticleRepository port defined in the domain layer.
    Tags live in their own table and are linked through article_tag;
    the links are rewritten on every create/update that carries tags.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, data: FormInput) -> bool:
        """Insert a new article and link its tags in one transaction.

        Args:
            data: Validated form input with title, content and optional tags.

        Returns:
            True on success, False if the derived slug is already taken.
        """
        now = _utcnow()
        title = str(data["title"]).strip()
        slug = slugify(title)

        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    insert(articles_table).values(
                        title=title,
                        slug=slug,
                        content=str(data["content"]).strip(),
                        created_at=now,
                        updated_at=now,
                    )
                )
                article_id = result.inserted_primary_key[0]
                if "tags" in data:
                    self._sync_tags(conn, article_id, parse_tags(data["tags"]))
        except IntegrityError:
            logger.warning("Could not create article, slug '%s' already exists.", slug)
            return False

        logger.info("Created article id=%d.", article_id)
        return True

    def update(self, data: FormInput) -> bool:
        """Update an existing article and, when given, replace its tags.

        Args:
            data: Validated form input including the article id.

        Returns:
            True on success, False if the article does not exist or
            the new slug collides with another article.
        """
        article_id = _coerce_id(data.get("id"))
        if article_id is None:
            logger.warning("Update requested without a usable article id.")
            return False

        title = str(data["title"]).strip()
        slug = slugify(title)

        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    update(articles_table)
                    .where(articles_table.c.id == article_id)
                    .values(
                        title=title,
                        slug=slug,
                        content=str(data["content"]).strip(),
                        updated_at=_utcnow(),
                    )
                )
                if result.rowcount == 0:
                    logger.info("Article %d not found for update.", article_id)
                    return False
                if "tags" in data:
                    self._sync_tags(conn, article_id, parse_tags(data["tags"]))
        except IntegrityError:
            logger.warning(
                "Could not update article %d, slug '%s' already exists.",
                article_id,
                slug,
            )
            return False

        logger.info("Updated article id=%d.", article_id)
        return True

    def get_by_id(self, article_id: int) -> Optional[Article]:
        """Return an article by its id, or None if not found."""
        query = select(articles_table).where(articles_table.c.id == article_id)

        with self._engine.connect() as conn:
            row = conn.execute(query).first()
            if row is None:
                return None
            tags = self._load_tags(conn, [article_id])

        return _row_to_article(row, tags.get(article_id, ()))

    def list_recent(
        self, limit: int = 20, tag: Optional[str] = None
    ) -> list[Article]:
        """Return the newest articles, optionally only those with a tag.

        Args:
            limit: Maximum number of articles to return.
            tag: Optional tag name filter (case-insensitive).

        Returns:
            List of Article entities ordered by created_at descending.
        """
        query = select(articles_table)
        if tag:
            query = (
                query.join(
                    article_tag_table,
                    article_tag_table.c.article_id == articles_table.c.id,
                )
                .join(tags_table, tags_table.c.id == article_tag_table.c.tag_id)
                .where(tags_table.c.name == tag.strip().lower())
            )
        query = query.order_by(
            articles_table.c.created_at.desc(), articles_table.c.id.desc()
        ).limit(limit)

        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
            tags = self._load_tags(conn, [row.id for row in rows])

        articles = [_row_to_article(row, tags.get(row.id, ())) for row in rows]
        logger.debug("Fetched %d articles.", len(articles))
        return articles

    def _sync_tags(
        self, conn: Connection, article_id: int, names: list[str]
    ) -> None:
        """Make the article's tag links match ``names`` exactly.

        Missing tags are created. Must run inside the caller's transaction.
        """
        conn.execute(
            delete(article_tag_table).where(
                article_tag_table.c.article_id == article_id
            )
        )
        if not names:
            return

        existing = {
            name: tag_id
            for name, tag_id in conn.execute(
                select(tags_table.c.name, tags_table.c.id).where(
                    tags_table.c.name.in_(names)
                )
            )
        }
        for name in names:
            if name not in existing:
                result = conn.execute(insert(tags_table).values(name=name))
                existing[name] = result.inserted_primary_key[0]

        conn.execute(
            insert(article_tag_table),
            [{"article_id": article_id, "tag_id": existing[name]} for name in names],
        )
        logger.debug("Synced %d tags for article %d.", len(names), article_id)

    def _load_tags(
        self, conn: Connection, article_ids: list[int]
    ) -> dict[int, tuple[str, ...]]:
        """Return tag names per article id, sorted alphabetically."""
        if not article_ids:
            return {}

        query = (
            select(article_tag_table.c.article_id, tags_table.c.name)
            .join(tags_table, tags_table.c.id == article_tag_table.c.tag_id)
            .where(article_tag_table.c.article_id.in_(article_ids))
            .order_by(tags_table.c.name)
        )

        grouped: dict[int, list[str]] = {}
        for article_id, name in conn.execute(query):
            grouped.setdefault(article_id, []).append(name)
        return {article_id: tuple(names) for article_id, names in grouped.items()}


def slugify(title: str) -> str:
    """Turn a title into a lowercase, hyphen-separated ASCII slug.

    The slug is cut to the column width, since NFKD can expand a title
    (ligatures decompose into several letters). Titles with no ASCII
    letters or digits get a random suffix so they still produce a unique slug.
    """
    ascii_title = (
        unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    )
    slug = _NON_ALNUM.sub("-", ascii_title.lower()).strip("-")
    slug = slug[:TITLE_MAX_LEN].rstrip("-")
    return slug or f"article-{uuid4().hex[:8]}"


def parse_tags(value: Any) -> list[str]:
    """Normalize submitted tags into a list of unique lowercase names.

    Accepts a comma-separated string or an iterable of strings.
    Names are cut to the column width after lowercasing, which can
    lengthen a name (dotted capital I lowercases to two characters).
    Blank entries are dropped; order of first appearance is kept.
    """
    if value is None:
        return []
    raw: Iterable[Any] = value.split(",") if isinstance(value, str) else value

    names: list[str] = []
    for item in raw:
        name = str(item).strip().lower()[:TAG_MAX_LEN].strip()
        if name and name not in names:
            names.append(name)
    return names


def _coerce_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _row_to_article(row: Any, tags: tuple[str, ...]) -> Article:
    return Article(
        id=row.id,
        title=row.title,
        slug=row.slug,
        content=row.content,
        tags=tags,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)
