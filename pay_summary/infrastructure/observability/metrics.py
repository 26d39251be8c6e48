"""Prometheus metrics for summary volume and request latency"""

from typing import Iterable
from prometheus_client import Counter, Histogram

from pay_summary.domain.models import PaymentItem

# Summary metrics
summary_items_counter = Counter(
    "pay_summary_items_total",
    "Payment items serialized",
    ["type"],  # item | total
)

summary_requests_counter = Counter(
    "pay_summary_requests_total",
    "Payment summary requests",
    ["outcome"],  # built | rejected
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_summary(items: Iterable[PaymentItem]) -> None:
    """Record one built summary and its items by type"""
    summary_requests_counter.labels(outcome="built").inc()
    for item in items:
        summary_items_counter.labels(type=item.type.to_simple_string()).inc()
