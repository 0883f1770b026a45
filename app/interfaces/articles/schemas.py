"""
Pydantic schemas for the articles API responses.

Form submissions are accepted as raw JSON objects and checked by the
form validator, so there are no request schemas for create/update.
No business logic belongs here.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class ArticleResponse(BaseModel):
    """A single article in the response."""

    id: int
    title: str
    slug: str
    content: str
    tags: list[str]
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ArticleListResponse(BaseModel):
    """Response schema for the article index endpoint."""

    articles: list[ArticleResponse]


class FormAcceptedResponse(BaseModel):
    """Returned when a form submission was validated and stored."""

    message: str


class FormRejectedResponse(BaseModel):
    """Returned when a form submission failed validation.

    Carries the submitted input back so the client can correct it.
    """

    error: str
    errors: dict[str, list[str]]
    input: dict[str, Any]


# ------------------------------------------------------------------
# Shared
# ------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
