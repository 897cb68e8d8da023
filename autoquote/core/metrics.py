"""Prometheus metrics for monitoring"""
from prometheus_client import Counter, Histogram, CollectorRegistry

registry = CollectorRegistry()

request_count = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

request_duration = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=registry
)

cache_hits = Counter(
    'cache_hits_total',
    'Total cache hits',
    ['cache'],
    registry=registry
)

cache_misses = Counter(
    'cache_misses_total',
    'Total cache misses',
    ['cache'],
    registry=registry
)

vehicle_api_requests = Counter(
    'vehicle_api_requests_total',
    'Remote vehicle catalog lookups by outcome',
    ['status'],
    registry=registry
)

vehicle_api_duration = Histogram(
    'vehicle_api_request_duration_seconds',
    'Remote vehicle catalog lookup duration in seconds',
    ['status'],
    registry=registry
)

quotes_calculated = Counter(
    'quotes_calculated_total',
    'Total premium calculations',
    ['coverage_type'],
    registry=registry
)


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    from prometheus_client import generate_latest
    return generate_latest(registry).decode('utf-8')
