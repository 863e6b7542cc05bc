"""
Request logging middleware.

Emits one line per request with method, path, status and latency. Requests
that raise are logged with the traceback and re-raised unchanged.

Dependencies: starlette
System role: Per-request observability for the HTTP surface
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with its outcome and latency."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        request_line = f"{request.method} {request.url.path}"
        context = {
            "method": request.method,
            "path": request.url.path,
            "client_host": request.client.host if request.client else None,
        }

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{request_line} failed",
                extra={**context, "duration_ms": _elapsed_ms(started), "error_type": type(e).__name__},
            )
            raise

        duration_ms = _elapsed_ms(started)
        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            f"{request_line} -> {response.status_code} ({duration_ms}ms)",
            extra={**context, "status_code": response.status_code, "duration_ms": duration_ms},
        )
        return response
