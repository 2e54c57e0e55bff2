"""HTTP middleware: path normalization, request ID, security headers,
unhandled exceptions.

Applied in main app; order matters (last added = outermost, request ID
first, unhandled exceptions innermost). Import and use from app.main.
"""

from app.middleware.path_normalization import PathNormalizationMiddleware
from app.middleware.request_id import RequestIDMiddleware, get_request_id
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.middleware.unhandled_exception import UnhandledExceptionMiddleware

__all__ = [
    "PathNormalizationMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "UnhandledExceptionMiddleware",
    "get_request_id",
]
