"""
Centralized error handlers for FastAPI.

Maps chat domain errors to HTTP responses. Domain error messages are
returned in ``detail`` so callers can tell the failure cases apart.
No stack traces or internal details of unexpected errors are exposed.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from amigos.domain.chat.errors import (
    AlreadyExistsError,
    ChatDomainError,
    EntityNotFoundError,
    InvalidMessageError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_422 = 422
HTTP_500 = 500
HTTP_503 = 503


def _error_response(
    status_code: int, error: str, detail: str | None = None, **extra: object
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, object] = {"error": error}
    if detail:
        body["detail"] = detail
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle payloads rejected by the request schemas."""
        logger.info("Rejected invalid payload: %d error(s)", len(exc.errors()))
        return _error_response(
            HTTP_422,
            "Validation error",
            "Request payload failed validation",
            errors=jsonable_encoder(exc.errors()),
        )

    @app.exception_handler(EntityNotFoundError)
    async def handle_not_found(
        _request: Request, exc: EntityNotFoundError
    ) -> JSONResponse:
        """Handle references to entities that must exist."""
        logger.warning("%s", exc.message)
        return _error_response(HTTP_404, "Not found", exc.message)

    @app.exception_handler(AlreadyExistsError)
    async def handle_already_exists(
        _request: Request, exc: AlreadyExistsError
    ) -> JSONResponse:
        """Handle duplicate users, groups and memberships."""
        logger.warning("%s", exc.message)
        return _error_response(HTTP_409, "Already exists", exc.message)

    @app.exception_handler(InvalidMessageError)
    async def handle_invalid_message(
        _request: Request, exc: InvalidMessageError
    ) -> JSONResponse:
        """Handle messages whose target does not match their type."""
        logger.warning("%s", exc.message)
        return _error_response(HTTP_422, "Invalid message", exc.message)

    @app.exception_handler(ChatDomainError)
    async def handle_chat_domain(
        _request: Request, exc: ChatDomainError
    ) -> JSONResponse:
        """Catch-all for unmapped chat domain errors."""
        logger.error("Unhandled chat domain error: %s", exc.message)
        return _error_response(HTTP_400, "Chat domain error", exc.message)

    @app.exception_handler(SQLAlchemyError)
    async def handle_persistence(
        _request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        """Handle store failures. Never exposes SQL or connection details."""
        logger.exception("Persistence failure: %s", type(exc).__name__)
        return _error_response(HTTP_503, "Persistence failure")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
