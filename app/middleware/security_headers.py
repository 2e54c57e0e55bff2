"""Security headers middleware.

Adds common security-related response headers. HSTS is only sent outside
Development so local HTTP runs are not pinned to HTTPS.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

DEFAULT_HEADERS = {
    "Content-Security-Policy": "default-src 'self'; style-src 'self' 'unsafe-inline'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}
HSTS_HEADER = ("Strict-Transport-Security", "max-age=2592000")


def SecurityHeadersMiddleware(
    app: Callable,
    headers: dict[str, str] | None = None,
    include_hsts: bool = True,
) -> Callable:
    """Set security headers on all responses (response values win). Raw ASGI."""
    resolved = dict(headers) if headers is not None else DEFAULT_HEADERS.copy()
    if include_hsts:
        resolved.setdefault(*HSTS_HEADER)
    header_list = [(k.encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                for name_b, value_b in header_list:
                    if name_b.lower() not in seen:
                        headers.append((name_b, value_b))
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
