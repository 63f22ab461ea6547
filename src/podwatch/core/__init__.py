"""Core module - Configuration, constants, exceptions, and logging."""

from podwatch.core.config import (
    SlackFallbacks,
    get_settings,
    load_settings,
    load_slack_fallbacks,
    settings,
)
from podwatch.core.exceptions import (
    ConfigurationError,
    DeliveryError,
    PodwatchError,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    "load_settings",
    "SlackFallbacks",
    "load_slack_fallbacks",
    # Exceptions
    "PodwatchError",
    "ConfigurationError",
    "DeliveryError",
]
