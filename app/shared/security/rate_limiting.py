"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client rate limit on the articles routes,
so form submissions cannot be replayed at will. Limits are attached with
the limiter's route decorator; a RateLimitExceeded raised there goes
through the application's exception handlers.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def default_rate_limit() -> str:
    """Return the configured limit, read on every request."""
    return settings.rate_limit_default


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
