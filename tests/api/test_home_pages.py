"""Listing page and other Home pages rendered over HTTP."""

import re

import pytest
from httpx import AsyncClient

_ROW_RE = re.compile(r"<tr><td>(.*?)</td><td>(.*?)</td><td>(.*?)</td></tr>")


@pytest.mark.requires_db
async def test_empty_store_renders_header_row_only(client: AsyncClient) -> None:
    response = await client.get("/")
    assert response.status_code == 200
    html = response.text
    assert html.count("<tr>") == 1
    assert "<th>ID</th><th>First Name</th><th>Last Name</th>" in html
    assert _ROW_RE.findall(html) == []


@pytest.mark.requires_db
async def test_two_users_render_two_rows_in_order(client: AsyncClient, seed_users) -> None:
    await seed_users(("Ann", "Lee"), ("Bo", "Kim"))
    response = await client.get("/")
    assert response.status_code == 200
    assert _ROW_RE.findall(response.text) == [("1", "Ann", "Lee"), ("2", "Bo", "Kim")]


@pytest.mark.requires_db
async def test_cell_values_are_html_escaped(client: AsyncClient, seed_users) -> None:
    await seed_users(("<script>alert(1)</script>", "O'Neil & Co"))
    response = await client.get("/")
    assert "<script>alert(1)</script>" not in response.text
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in response.text
    assert "O&#x27;Neil &amp; Co" in response.text


@pytest.mark.parametrize("path", ["/home", "/home/index", "/Home/Index", "/HOME/INDEX/"])
async def test_listing_aliases_are_case_insensitive(client: AsyncClient, path: str) -> None:
    response = await client.get(path)
    assert response.status_code == 200
    assert "<h1>Users</h1>" in response.text


async def test_privacy_page(client: AsyncClient) -> None:
    response = await client.get("/Home/Privacy")
    assert response.status_code == 200
    assert "Privacy Policy" in response.text


async def test_error_page_requested_directly_returns_200_with_request_id(
    client: AsyncClient,
) -> None:
    response = await client.get("/Home/Error", headers={"X-Request-ID": "req-123"})
    assert response.status_code == 200
    assert "An error occurred while processing your request." in response.text
    assert "req-123" in response.text


async def test_unknown_page_returns_404(client: AsyncClient) -> None:
    response = await client.get("/home/missing")
    assert response.status_code == 404
