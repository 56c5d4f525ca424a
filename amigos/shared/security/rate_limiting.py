"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client default limit on every route.
Protects against denial-of-service and resource abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

DEFAULT_RATE_LIMIT = "120/minute"


def create_limiter(
    default_limit: str = DEFAULT_RATE_LIMIT, enabled: bool = True
) -> Limiter:
    """Build a limiter keyed by client address.

    Each application gets its own limiter so counters are not shared
    between app instances.

    Args:
        default_limit: Limit applied to every route, e.g. "120/minute".
        enabled: When False, requests are never limited.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit],
        enabled=enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.

    Kept synchronous: SlowAPIMiddleware calls it without awaiting.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
