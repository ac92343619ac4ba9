"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from social.config import Settings
from social.interface.api.errors import install_error_handlers
from social.interface.api.rate_limit import RateLimiter, RateLimitMiddleware
from social.interface.api.routes import (
    comments,
    feed,
    health,
    posts,
    replies,
    users,
)
from social.util.di.container import create_container, setup_di
from social.util.observability import SERVICE_VERSION, instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Social API",
        description="Feed and engagement API: posts, comments, replies, likes and follows",
        version=SERVICE_VERSION,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Malformed page parameters answer 400
    install_error_handlers(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    # One limiter for the whole process
    if settings.rate_limit.enabled:
        app_instance.add_middleware(
            RateLimitMiddleware,
            limiter=RateLimiter(
                rate=settings.rate_limit.rate, burst=settings.rate_limit.burst
            ),
        )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(feed.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(replies.router)
    app_instance.include_router(users.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
