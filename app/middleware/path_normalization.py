"""Path normalization middleware.

Page routes are matched case-insensitively and without a trailing slash,
so /Home/Index, /home/index/ and /home/index reach the same handler.
Paths under the API prefix are left untouched. Raw ASGI.
"""

from typing import Callable


def _normalize(path: str) -> str:
    path = path.lower()
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def PathNormalizationMiddleware(app: Callable, skip_prefix: str = "/api/") -> Callable:
    """Lowercase and strip the trailing slash of non-API request paths. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http" or scope["path"].startswith(skip_prefix):
            await app(scope, receive, send)
            return
        path = _normalize(scope["path"])
        if path != scope["path"]:
            scope = dict(scope)
            scope["path"] = path
            scope["raw_path"] = path.encode()
        await app(scope, receive, send)

    return asgi_app
