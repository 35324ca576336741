"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
See gallery.core.lifespan and gallery.core.exception_handlers.

Settings are loaded inside create_app() so tests can set env (and clear the
get_settings cache) before calling it.
"""

from fastapi import FastAPI

from gallery.api.v1 import api_router
from gallery.core.config import get_settings
from gallery.core.exception_handlers import register_exception_handlers
from gallery.core.lifespan import create_lifespan
from gallery.middleware import RequestIDMiddleware, TimeoutMiddleware


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # Last added = outermost: timeout wraps request ID.
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
