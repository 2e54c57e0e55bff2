"""Unhandled exception middleware.

Starlette runs the handler registered for Exception in ServerErrorMiddleware,
outside all user middleware, so its 500 responses would miss the request
ID and security headers. Added innermost, this middleware turns any
exception that escapes the routes into the handler's response while the
rest of the middleware stack is still in place. Exceptions raised after
the response has started are re-raised.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

from starlette.requests import Request
from starlette.responses import Response


def UnhandledExceptionMiddleware(
    app: Callable, handler: Callable[[Request, Exception], Response]
) -> Callable:
    """Render unhandled exceptions with handler(request, exc). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        response_started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        except Exception as exc:
            if response_started:
                raise
            response = handler(Request(scope, receive), exc)
            await response(scope, receive, send)

    return asgi_app
