"""
Podwatch - Prometheus Metrics
"""

from prometheus_client import Counter, Histogram, Info

# Application info
APP_INFO = Info(
    "podwatch_app",
    "Podwatch application information",
)
APP_INFO.info({
    "version": "0.1.0",
    "name": "podwatch",
})

# Notification metrics
NOTIFICATIONS_TOTAL = Counter(
    "podwatch_notifications_total",
    "Total number of notification delivery attempts",
    ["provider", "kind", "status"],
)

NOTIFICATION_DURATION = Histogram(
    "podwatch_notification_duration_seconds",
    "Duration of notification delivery attempts",
    ["provider", "mode"],
    buckets=[0.1, 0.25, 0.5, 1, 2, 5, 10, 30],
)

NOTIFICATION_BLOCKS = Histogram(
    "podwatch_notification_blocks",
    "Number of Block Kit blocks per delivered message",
    ["provider"],
    buckets=[1, 5, 10, 20, 30, 50],
)


def record_notification(
    provider: str,
    kind: str,
    mode: str,
    status: str,
    duration_seconds: float,
    block_count: int = 0,
) -> None:
    """Record metrics for a notification delivery attempt."""
    NOTIFICATIONS_TOTAL.labels(
        provider=provider,
        kind=kind,
        status=status,
    ).inc()

    NOTIFICATION_DURATION.labels(
        provider=provider,
        mode=mode,
    ).observe(duration_seconds)

    if block_count and status == "success":
        NOTIFICATION_BLOCKS.labels(provider=provider).observe(block_count)
