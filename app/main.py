"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See app.core.lifespan and app.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from starlette.middleware.trustedhost import TrustedHostMiddleware

from app.api.v1 import api_router
from app.core.config import get_settings
from app.core.exception_handlers import (
    register_exception_handlers,
    unhandled_exception_handler,
)
from app.core.lifespan import create_lifespan
from app.middleware import (
    PathNormalizationMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    UnhandledExceptionMiddleware,
)
from app.pages.routes import router as pages_router


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=False,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: request ID → path normalization → security
    # → trusted hosts → unhandled exceptions. Request ID is outermost so scope["state"] is
    # shared with the error handlers.
    app.add_middleware(UnhandledExceptionMiddleware, handler=unhandled_exception_handler)
    allowed_hosts = settings.allowed_host_list
    if allowed_hosts and "*" not in allowed_hosts:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=allowed_hosts)
    app.add_middleware(
        SecurityHeadersMiddleware, include_hsts=not settings.is_development
    )
    app.add_middleware(PathNormalizationMiddleware)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api/v1")
    app.include_router(pages_router)

    return app


app = create_app()
