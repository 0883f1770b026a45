"""
Domain-specific errors for the articles bounded context.

Only unexpected or lookup failures are raised as errors. Rejected form
input is reported through ValidationResult, never raised.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class ArticlesDomainError(Exception):
    """Base error for all articles domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ArticleNotFoundError(ArticlesDomainError):
    """Raised when an article cannot be found by its id."""

    def __init__(self, article_id: int) -> None:
        super().__init__(f"Article not found: {article_id}")
        self.article_id = article_id
