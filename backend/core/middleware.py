"""Request Middleware for Logging and Tracing

Provides:
- Request correlation IDs (echoed back in X-Correlation-ID)
- Request/response logging with timing
- Context propagation for structured logs
"""
import time
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from core.logging import (
    generate_correlation_id,
    bind_context,
    clear_context,
    api_logger,
)

log = api_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request and binds its correlation ID to the log context."""

    def __init__(self, app, slow_threshold_ms: float = 250):
        super().__init__(app)
        self.slow_threshold_ms = slow_threshold_ms

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID") or generate_correlation_id()

        clear_context()
        bind_context(
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
        )

        start = time.perf_counter()
        log.debug("request_started", query=str(request.query_params) or None)

        try:
            response = await call_next(request)
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            response.headers["X-Correlation-ID"] = correlation_id

            status = response.status_code
            log_method = log.info if status < 400 else (log.warning if status < 500 else log.error)
            log_method("request_completed", status=status, duration_ms=duration_ms)

            if duration_ms > self.slow_threshold_ms:
                log.warning("slow_request", duration_ms=duration_ms, threshold_ms=self.slow_threshold_ms)

            return response

        except Exception as exc:
            log.exception(
                "request_failed",
                error=str(exc),
                error_type=type(exc).__name__,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise
        finally:
            clear_context()
