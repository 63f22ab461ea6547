"""Observability module - Prometheus metrics."""

from podwatch.observability.metrics import (
    NOTIFICATIONS_TOTAL,
    NOTIFICATION_DURATION,
    NOTIFICATION_BLOCKS,
    record_notification,
)

__all__ = [
    "NOTIFICATIONS_TOTAL",
    "NOTIFICATION_DURATION",
    "NOTIFICATION_BLOCKS",
    "record_notification",
]
