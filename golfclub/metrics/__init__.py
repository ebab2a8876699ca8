# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the golf club service."""
from prometheus_client import Counter, Histogram

MEMBERS_CREATED = Counter(
    "members_created_total", "Total members created"
)
TOURNAMENTS_CREATED = Counter(
    "tournaments_created_total", "Total tournaments created"
)
ENROLLMENTS = Counter(
    "enrollments_total", "Enrollment requests by outcome", ["outcome"]
)
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)
