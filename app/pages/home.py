"""Home pages: user listing, privacy, and error views (HTML strings)."""

import traceback
from collections.abc import Sequence
from html import escape

from app.application.dtos.user import UserResult
from app.pages.layout import render_layout

USER_TABLE_COLUMNS = ("ID", "First Name", "Last Name")


def render_user_rows(users: Sequence[UserResult]) -> str:
    """Return one <tr> per user with cells ID, First Name, Last Name."""
    return "\n".join(
        "            <tr>"
        f"<td>{u.id}</td>"
        f"<td>{escape(u.first_name)}</td>"
        f"<td>{escape(u.last_name)}</td>"
        "</tr>"
        for u in users
    )


def render_users_page(users: Sequence[UserResult], app_name: str) -> str:
    """Return HTML for the listing page: a table with a header row and one row per user."""
    header = "".join(f"<th>{c}</th>" for c in USER_TABLE_COLUMNS)
    body = f"""
        <h1>Users</h1>
        <table class="table">
            <thead>
            <tr>{header}</tr>
            </thead>
            <tbody>
{render_user_rows(users)}
            </tbody>
        </table>"""
    return render_layout("Users", body, app_name)


def render_privacy_page(app_name: str) -> str:
    body = """
        <h1>Privacy Policy</h1>
        <p>This application lists user names stored in its database. It does not
        collect data from visitors.</p>"""
    return render_layout("Privacy Policy", body, app_name)


def render_error_page(request_id: str | None, app_name: str) -> str:
    """Generic error page. Shows the request ID when known, never fault details."""
    request_id_html = ""
    if request_id:
        request_id_html = (
            f"\n        <p><strong>Request ID:</strong> <code>{escape(request_id)}</code></p>"
        )
    body = f"""
        <h1 class="text-danger">Error.</h1>
        <h2 class="text-danger">An error occurred while processing your request.</h2>{request_id_html}
        <h3>Development Mode</h3>
        <p>Switching to the <strong>Development</strong> environment displays detailed
        information about the error that occurred.</p>
        <p><strong>The Development environment shouldn't be enabled for deployed
        applications.</strong> Set <code>ENVIRONMENT=Development</code> only on a local
        machine.</p>"""
    return render_layout("Error", body, app_name)


def render_developer_error_page(
    exc: BaseException, request_id: str | None, app_name: str
) -> str:
    """Detailed fault page for Development: exception type, message and traceback."""
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    request_id_html = (
        f"\n        <p><strong>Request ID:</strong> <code>{escape(request_id)}</code></p>"
        if request_id
        else ""
    )
    body = f"""
        <h1 class="text-danger">An unhandled exception occurred while processing the request.</h1>
        <h2>{escape(type(exc).__name__)}: {escape(str(exc))}</h2>{request_id_html}
        <pre>{escape(tb)}</pre>"""
    return render_layout("Internal Server Error", body, app_name)
