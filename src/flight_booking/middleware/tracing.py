"""
Request tracing middleware
"""
import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from flight_booking.core.logging_config import generate_trace_id, set_trace_id
from flight_booking.core.metrics import http_requests_total

logger = logging.getLogger(__name__)


class TracingMiddleware(BaseHTTPMiddleware):
    """Middleware to add trace ID to all requests"""

    async def dispatch(self, request: Request, call_next):
        trace_id = request.headers.get('X-Trace-ID') or generate_trace_id()
        set_trace_id(trace_id)

        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"Request failed: {request.method} {request.url.path}",
                extra={'duration_ms': round(duration_ms, 2), 'error': str(e)},
                exc_info=True,
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Request completed: {request.method} {request.url.path} {response.status_code}",
            extra={'duration_ms': round(duration_ms, 2)},
        )

        route = request.scope.get('route')
        http_requests_total.labels(
            method=request.method,
            endpoint=route.path if route is not None else request.url.path,
            status=response.status_code,
        ).inc()

        response.headers['X-Trace-ID'] = trace_id
        return response
