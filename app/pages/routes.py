"""Page routes (Home controller): listing, privacy, error.

Paths are lowercase; PathNormalizationMiddleware maps /Home/Index and
similar spellings onto them.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app.api.v1.dependencies import get_user_repo
from app.application.interfaces import IUserRepository
from app.core.config import get_settings
from app.middleware import get_request_id
from app.pages.home import render_error_page, render_privacy_page, render_users_page

router = APIRouter(default_response_class=HTMLResponse, include_in_schema=False)


@router.get("/")
@router.get("/home")
@router.get("/home/index")
async def index(
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> HTMLResponse:
    """List all users as an HTML table."""
    users = await user_repo.list_users()
    return HTMLResponse(render_users_page(users, get_settings().app_name))


@router.get("/home/privacy")
def privacy() -> HTMLResponse:
    return HTMLResponse(render_privacy_page(get_settings().app_name))


@router.get("/home/error")
def error(request: Request) -> HTMLResponse:
    """Generic error page; the exception handlers render the same view with status 500."""
    return HTMLResponse(
        render_error_page(get_request_id(request.state), get_settings().app_name)
    )
