"""
Prometheus metrics for monitoring
"""
import time
from functools import wraps

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# ==================== HTTP Metrics ====================

http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

# ==================== Booking Metrics ====================

bookings_created_total = Counter(
    'bookings_created_total',
    'Total bookings created',
    ['cabin_class', 'surge']
)

bookings_cancelled_total = Counter(
    'bookings_cancelled_total',
    'Total bookings cancelled'
)

booking_conflicts_total = Counter(
    'booking_conflicts_total',
    'Booking attempts rejected because a seat was already taken'
)

surge_applied_total = Counter(
    'surge_applied_total',
    'Bookings priced with the surge multiplier'
)

booking_creation_duration_seconds = Histogram(
    'booking_creation_duration_seconds',
    'Time to create a booking',
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0]
)


# ==================== Helper Functions ====================

def track_time(metric: Histogram):
    """Decorator to track execution time of a coroutine"""
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                return await func(*args, **kwargs)
            finally:
                metric.observe(time.time() - start_time)
        return wrapper
    return decorator


def record_booking_created(cabin_class: str, surge_applied: bool):
    bookings_created_total.labels(
        cabin_class=cabin_class,
        surge="yes" if surge_applied else "no",
    ).inc()
    if surge_applied:
        surge_applied_total.inc()


def get_metrics():
    """Get current metrics in Prometheus format"""
    return generate_latest(), CONTENT_TYPE_LATEST
