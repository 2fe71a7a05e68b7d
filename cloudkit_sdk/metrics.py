"""
Per-provider request metrics.

Every request the transport sends is counted by provider adapter and
HTTP status; requests that never got a response are counted with code 0.
Metrics live in the default prometheus_client registry.
"""

import logging
from prometheus_client import Counter, Histogram

logger = logging.getLogger("cloudkit_sdk.metrics")

NO_RESPONSE = 0

REQUEST_COUNT = Counter(
    "cloudkit_sdk_requests_total",
    "Provider requests sent, by adapter and HTTP status",
    ["provider", "code"],
)

REQUEST_LATENCY = Histogram(
    "cloudkit_sdk_request_latency_seconds",
    "Time from send to response (or failure), by adapter",
    ["provider"],
)


def metrics_request(provider: str, code: int, latency: float) -> None:
    """
    Record one provider request.

    Args:
        provider: Transport name, e.g. 'azure.tables' or 'rackspace.identity'
        code: HTTP status, or NO_RESPONSE on network failure/timeout
        latency: Seconds spent in the HTTP adapter
    """
    try:
        REQUEST_COUNT.labels(provider=provider, code=str(code)).inc()
        REQUEST_LATENCY.labels(provider=provider).observe(latency)
    except Exception as e:
        # a broken registry must not fail the provider call
        logger.debug("Dropped metrics for %s: %s", provider, e)
