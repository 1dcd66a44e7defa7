"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from social.config import Settings
from social.interface.api.routes import comments, health, likes, posts
from social.interface.error import register_error_handlers
from social.util.di.container import create_container, setup_di
from social.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Social API",
        description="Backend API for posts, likes and comments",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(likes.router)
    app_instance.include_router(comments.router)

    return app_instance
