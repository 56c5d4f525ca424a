"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (chat procedures, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, request size, rate limiting, CORS)
- Logging configuration
- The process-wide database connection (opened in the lifespan)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from amigos.core.config import Settings, settings as default_settings
from amigos.infrastructure.persistence.database import Database
from amigos.interfaces.chat.router import router as chat_router
from amigos.interfaces.health import router as health_router
from amigos.shared.errors.handlers import register_error_handlers
from amigos.shared.logging import configure_logging
from amigos.shared.security.headers import SecurityHeadersMiddleware
from amigos.shared.security.rate_limiting import (
    create_limiter,
    rate_limit_exceeded_handler,
)
from amigos.shared.security.request_size import RequestSizeLimitMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the database once, dispose it on shutdown."""
    database: Database = app.state.database
    database.connect()
    if app.state.settings.create_schema_on_startup:
        database.create_schema()
    logger.info("%s ready", app.state.settings.project_name)

    yield

    database.disconnect()


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings to use instead of the environment-loaded ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    configure_logging(
        level=app_settings.log_level, sql_echo=app_settings.database_echo
    )

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = Database(
        database_url=app_settings.database_url,
        pool_size=app_settings.database_pool_size,
        max_overflow=app_settings.database_max_overflow,
        pool_timeout=app_settings.database_pool_timeout,
        pool_recycle=app_settings.database_pool_recycle,
    )

    # --- Rate Limiting ---
    app.state.limiter = create_limiter(
        default_limit=app_settings.rate_limit_default,
        enabled=app_settings.rate_limit_enabled,
    )
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        RequestSizeLimitMiddleware, max_body_size=app_settings.max_request_size_bytes
    )

    # --- CORS (outermost, so error responses carry the headers too) ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")

    return app


app = create_app()
