"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
Rejected form input is not an error here; the articles router answers it
directly. No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.articles.errors import ArticleNotFoundError, ArticlesDomainError

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ArticleNotFoundError)
    async def handle_article_not_found(
        _request: Request, exc: ArticleNotFoundError
    ) -> JSONResponse:
        """Handle missing article errors."""
        logger.warning("Article not found: %s", exc.article_id)
        return _error_response(HTTP_404, "Article not found")

    @app.exception_handler(ArticlesDomainError)
    async def handle_articles_domain(
        _request: Request, exc: ArticlesDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled articles domain errors."""
        logger.error("Unhandled articles domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
