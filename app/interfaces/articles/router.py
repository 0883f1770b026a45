"""
FastAPI router for the articles bounded context.

This is the controller: it gathers raw input from the request, hands it
to a FormService or a read use case, and maps the outcome to a response.
Form rules are enforced by the form validator, not by request schemas.
Error mapping for raised domain errors is handled by centralized handlers.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import JSONResponse

from app.application.articles.dtos import (
    ArticleResult,
    GetArticleQuery,
    ListArticlesQuery,
)
from app.application.articles.form_service import FormService
from app.application.articles.get_article import GetArticleUseCase
from app.application.articles.list_articles import MAX_LIMIT, ListArticlesUseCase
from app.interfaces.articles.dependencies import (
    get_article_use_case,
    get_create_article_form_service,
    get_list_articles_use_case,
    get_update_article_form_service,
)
from app.interfaces.articles.schemas import (
    ArticleListResponse,
    ArticleResponse,
    ErrorResponse,
    FormAcceptedResponse,
    FormRejectedResponse,
)
from app.shared.security.rate_limiting import default_rate_limit, limiter

HTTP_201 = 201
HTTP_404 = 404
HTTP_409 = 409
HTTP_422 = 422

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get(
    "",
    response_model=ArticleListResponse,
    summary="List articles",
    description="Return the newest articles, optionally filtered by tag.",
)
@limiter.limit(default_rate_limit)
def list_articles(
    request: Request,
    limit: int = Query(20, ge=1, le=MAX_LIMIT),
    tag: Optional[str] = Query(None, max_length=50),
    use_case: ListArticlesUseCase = Depends(get_list_articles_use_case),
) -> ArticleListResponse:
    """List the newest articles."""
    results = use_case.execute(ListArticlesQuery(limit=limit, tag=tag))
    return ArticleListResponse(articles=[_to_response(r) for r in results])


@router.get(
    "/{article_id}",
    response_model=ArticleResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Show an article",
)
@limiter.limit(default_rate_limit)
def show_article(
    request: Request,
    article_id: int,
    use_case: GetArticleUseCase = Depends(get_article_use_case),
) -> ArticleResponse:
    """Return a single article by id."""
    return _to_response(use_case.execute(GetArticleQuery(article_id=article_id)))


@router.post(
    "",
    status_code=HTTP_201,
    response_model=FormAcceptedResponse,
    responses={
        409: {"model": ErrorResponse},
        422: {"model": FormRejectedResponse},
    },
    summary="Create an article",
    description="Validate the submitted form and store a new article.",
)
@limiter.limit(default_rate_limit)
def store_article(
    request: Request,
    payload: dict[str, Any] = Body(...),
    form: FormService = Depends(get_create_article_form_service),
) -> Any:
    """Create an article from a raw form submission."""
    if form.save(payload):
        return FormAcceptedResponse(message="Article created.")
    if form.errors():
        return _rejected(form, payload)
    return _failed(HTTP_409, "Article could not be saved")


@router.put(
    "/{article_id}",
    response_model=FormAcceptedResponse,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": FormRejectedResponse},
    },
    summary="Update an article",
    description="Validate the submitted form and update an existing article.",
)
@limiter.limit(default_rate_limit)
def update_article(
    request: Request,
    article_id: int,
    payload: dict[str, Any] = Body(...),
    form: FormService = Depends(get_update_article_form_service),
) -> Any:
    """Update an article from a raw form submission."""
    data = {**payload, "id": article_id}
    if form.update(data):
        return FormAcceptedResponse(message="Article updated.")
    if form.errors():
        return _rejected(form, payload)
    return _failed(HTTP_404, "Article not found")


def _to_response(result: ArticleResult) -> ArticleResponse:
    return ArticleResponse(
        id=result.id,
        title=result.title,
        slug=result.slug,
        content=result.content,
        tags=result.tags,
        created_at=result.created_at,
        updated_at=result.updated_at,
    )


def _rejected(form: FormService, payload: dict[str, Any]) -> JSONResponse:
    body = FormRejectedResponse(
        error="Validation failed", errors=form.errors(), input=payload
    )
    return JSONResponse(
        status_code=HTTP_422,
        content=body.model_dump(mode="json"),
    )


def _failed(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})
