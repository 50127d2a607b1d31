"""FastAPI application."""

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from snip.config import Settings
from snip.interface.api.errors import register_error_handlers
from snip.interface.api.routes import comments, health
from snip.util.di.container import create_container
from snip.util.observability import instrument_fastapi


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container, defaults to the production container
        settings: Application settings, loaded from environment if omitted

    Returns:
        Configured application
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Snippet Comments API",
        description="Threaded comments and moderation flags for code snippets",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_dishka(container or create_container(), app_instance)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.snippet_router)
    app_instance.include_router(comments.router)

    return app_instance
