"""
Request body size limit middleware.

Rejects requests whose declared Content-Length exceeds the configured
maximum with HTTP 413 before the body is read.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

HTTP_413 = 413


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Middleware enforcing a maximum request body size."""

    def __init__(self, app: ASGIApp, max_body_size: int) -> None:
        super().__init__(app)
        self.max_body_size = max_body_size

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        content_length = request.headers.get("content-length")
        if content_length is not None and content_length.isdigit():
            if int(content_length) > self.max_body_size:
                return JSONResponse(
                    status_code=HTTP_413,
                    content={
                        "error": "Request too large",
                        "detail": f"Maximum body size is {self.max_body_size} bytes",
                    },
                )
        return await call_next(request)
