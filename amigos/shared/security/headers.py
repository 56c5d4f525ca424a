"""
Secure HTTP headers middleware.

RPC responses carry user records and private conversation history, so
they are never cached and never rendered by a browser. The interactive
docs pages (debug only) load their assets from a CDN and are exempt
from the strict content policy and the cache directive.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

COMMON_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}

API_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Cache-Control": "no-store",
}

DOCS_PATH_PREFIXES = ("/docs", "/redoc", "/openapi.json")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds secure headers to every response without overriding route headers."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        headers = dict(COMMON_HEADERS)
        if not request.url.path.startswith(DOCS_PATH_PREFIXES):
            headers.update(API_HEADERS)
        for header_name, header_value in headers.items():
            response.headers.setdefault(header_name, header_value)
        return response
