"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). API requests (under
/api/) get JSON bodies; page requests get HTML: the detailed fault page
in Development, otherwise the generic error page with status 500.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import UserListException
from app.middleware import get_request_id
from app.pages.home import render_developer_error_page, render_error_page

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "SQL_NOT_CONFIGURED": 503,
}


def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith(API_PREFIX)


def _fault_page(request: Request, exc: Exception, status_code: int) -> HTMLResponse:
    """Detailed page in Development; generic /home/error view otherwise."""
    settings = get_settings()
    request_id = get_request_id(request.state)
    if settings.is_development:
        content = render_developer_error_page(exc, request_id, settings.app_name)
    else:
        content = render_error_page(request_id, settings.app_name)
    return HTMLResponse(content=content, status_code=status_code)


def _user_list_exception_handler(
    request: Request, exc: UserListException
) -> Response:
    """Return JSON from UserListException.to_dict() (API) or the error page (pages)."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s: %s", exc.error_code, exc.message)
    if not _is_api_request(request):
        return _fault_page(request, exc, status)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _database_exception_handler(request: Request, exc: SQLAlchemyError) -> Response:
    """Database faults (unreachable store, bad query): 503 JSON for API, error page otherwise."""
    logger.exception("Database error: %s", exc)
    if not _is_api_request(request):
        return _fault_page(request, exc, 500)
    settings = get_settings()
    detail: Any = str(exc) if settings.is_development else "Database unavailable"
    return JSONResponse(
        status_code=503,
        content={"error": "DATABASE_UNAVAILABLE", "message": detail},
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Return JSON for Starlette HTTP exceptions (status + detail); a bare HTML status page for pages."""
    if not _is_api_request(request):
        return HTMLResponse(
            content=f"<h1>{exc.status_code}</h1>",
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Return 500; include detail only in Development.

    Used by UnhandledExceptionMiddleware for route faults and registered
    for Exception as the fallback for faults in the middleware itself.
    """
    logger.exception("Unhandled exception: %s", exc)
    if not _is_api_request(request):
        return _fault_page(request, exc, 500)
    settings = get_settings()
    detail: Any = str(exc) if settings.is_development else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: UserListException (and
    subclasses), SQLAlchemyError, RequestValidationError,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(UserListException, _user_list_exception_handler)
    app.add_exception_handler(SQLAlchemyError, _database_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
