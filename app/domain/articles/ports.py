"""
Port interfaces (ABCs) for the articles bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from app.domain.articles.entities import Article, ValidationResult

FormInput = Mapping[str, Any]


class FormValidator(ABC):
    """Port for checking raw form input against a set of rules."""

    @abstractmethod
    def validate(self, data: FormInput) -> ValidationResult:
        """Check the input and report the outcome.

        Args:
            data: Flat mapping of field name to submitted value.

        Returns:
            A ValidationResult. Rule violations are reported here,
            never raised.
        """
        raise NotImplementedError


class FormRepository(ABC):
    """Port for the write operations a form submission can trigger."""

    @abstractmethod
    def create(self, data: FormInput) -> bool:
        """Create a record from already validated input.

        Returns:
            True if the record was stored, False otherwise.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, data: FormInput) -> bool:
        """Update the record identified by ``data["id"]``.

        Returns:
            True if the record was updated, False if it does not exist
            or could not be written.
        """
        raise NotImplementedError


class ArticleRepository(FormRepository):
    """Port for persisting and retrieving articles.

    Auxiliary data such as tag associations is handled inside the
    adapter as part of create/update.
    """

    @abstractmethod
    def get_by_id(self, article_id: int) -> Optional[Article]:
        """Return an article by its id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def list_recent(
        self, limit: int = 20, tag: Optional[str] = None
    ) -> list[Article]:
        """Return the newest articles.

        Args:
            limit: Maximum number of articles to return.
            tag: Optional tag name filter (case-insensitive).

        Returns:
            List of articles ordered by created_at descending.
        """
        raise NotImplementedError
