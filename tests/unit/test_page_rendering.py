"""HTML renderers for the Home pages."""

from app.application.dtos.user import UserResult
from app.pages.home import (
    render_developer_error_page,
    render_error_page,
    render_users_page,
)


def test_users_page_has_one_row_per_user() -> None:
    html = render_users_page(
        [UserResult(1, "Ann", "Lee"), UserResult(2, "Bo", "Kim")], "userlist"
    )
    assert "<tr><td>1</td><td>Ann</td><td>Lee</td></tr>" in html
    assert "<tr><td>2</td><td>Bo</td><td>Kim</td></tr>" in html
    assert html.index(">Ann<") < html.index(">Bo<")
    assert html.startswith("<!DOCTYPE html>")


def test_layout_escapes_app_name() -> None:
    html = render_users_page([], "<b>app</b>")
    assert "<b>app</b>" not in html
    assert "&lt;b&gt;app&lt;/b&gt;" in html


def test_error_page_without_request_id() -> None:
    html = render_error_page(None, "userlist")
    assert "An error occurred while processing your request." in html
    assert "Request ID" not in html


def test_error_page_escapes_request_id() -> None:
    html = render_error_page("<id>", "userlist")
    assert "&lt;id&gt;" in html


def test_developer_error_page_includes_type_message_and_traceback() -> None:
    try:
        raise ValueError("bad <value>")
    except ValueError as exc:
        html = render_developer_error_page(exc, "rid-1", "userlist")
    assert "ValueError: bad &lt;value&gt;" in html
    assert "Traceback (most recent call last)" in html
    assert "rid-1" in html
