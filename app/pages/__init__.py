"""Server-rendered HTML pages."""

from app.pages.home import (
    render_developer_error_page,
    render_error_page,
    render_privacy_page,
    render_users_page,
)

__all__ = [
    "render_developer_error_page",
    "render_error_page",
    "render_privacy_page",
    "render_users_page",
]
