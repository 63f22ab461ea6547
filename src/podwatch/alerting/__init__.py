"""Alerting module - Slack provider, message formatting and delivery."""

from podwatch.alerting.base import NotifierProvider
from podwatch.alerting.delivery import Deliverer, TokenDeliverer, WebhookDeliverer
from podwatch.alerting.factory import create_provider, get_providers, register_provider
from podwatch.alerting.models import (
    AppContext,
    Event,
    ProviderConfig,
    SlackMessage,
    TokenMode,
    WebhookMode,
    resolve_provider_config,
)
from podwatch.alerting.slack import SlackProvider

__all__ = [
    "NotifierProvider",
    "SlackProvider",
    "Deliverer",
    "TokenDeliverer",
    "WebhookDeliverer",
    "AppContext",
    "Event",
    "ProviderConfig",
    "SlackMessage",
    "TokenMode",
    "WebhookMode",
    "resolve_provider_config",
    "create_provider",
    "get_providers",
    "register_provider",
]
