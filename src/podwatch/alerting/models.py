"""
Podwatch - Alerting Models

Value objects shared by the notification providers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from podwatch.core.config import (
    Settings,
    SlackFallbacks,
    load_settings,
    load_slack_fallbacks,
)
from podwatch.core.constants import SLACK_ENV_FALLBACKS


@dataclass(frozen=True)
class Event:
    """A pod crash or restart detected in the cluster."""

    pod_name: str = ""
    container_name: str = ""
    namespace: str = ""
    reason: str = ""
    events: str = ""  # newline-joined kubernetes events
    logs: str = ""


@dataclass(frozen=True)
class AppContext:
    """Application-wide values every provider reads."""

    cluster_name: str = ""

    @classmethod
    def from_settings(cls, app_settings: Optional[Settings] = None) -> "AppContext":
        """Create context from application settings."""
        app_settings = app_settings or load_settings()
        return cls(cluster_name=app_settings.CLUSTER_NAME)


@dataclass(frozen=True)
class ProviderConfig:
    """Resolved Slack provider settings. Unset values are None."""

    token: Optional[str] = None
    webhook: Optional[str] = None
    channel: Optional[str] = None
    title: Optional[str] = None
    text: Optional[str] = None


@dataclass(frozen=True)
class TokenMode:
    """Deliver through chat.postMessage with a bot token."""

    token: str
    channel: str

    @property
    def name(self) -> str:
        return "token"


@dataclass(frozen=True)
class WebhookMode:
    """Deliver through an incoming webhook URL."""

    url: str
    channel: Optional[str] = None  # overrides the webhook's default channel

    @property
    def name(self) -> str:
        return "webhook"


DeliveryMode = Union[TokenMode, WebhookMode]


@dataclass
class SlackMessage:
    """Outgoing Slack payload."""

    text: Optional[str] = None
    blocks: List[Dict[str, Any]] = field(default_factory=list)
    channel: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a webhook JSON body, leaving out unset keys."""
        payload: Dict[str, Any] = {}
        if self.channel:
            payload["channel"] = self.channel
        if self.text:
            payload["text"] = self.text
        if self.blocks:
            payload["blocks"] = self.blocks
        return payload


def _string_value(config: Mapping[str, Any], key: str) -> Optional[str]:
    value = config.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def resolve_provider_config(
    config: Optional[Mapping[str, Any]],
    fallbacks: Optional[SlackFallbacks] = None,
) -> ProviderConfig:
    """
    Merge an explicit configuration mapping with environment fallbacks.

    Values in the mapping win when they are non-empty strings. Token,
    channel and webhook then fall back to SLACK_TOKEN, SLACK_CHANNEL and
    SLACK_WEBHOOK. Title and text have no fallback.

    Args:
        config: Provider configuration mapping, may be None
        fallbacks: SLACK_* values to fall back to (defaults to the process
            environment)

    Returns:
        ProviderConfig with unset fields as None
    """
    config = config or {}
    fallbacks = fallbacks or load_slack_fallbacks()

    resolved: Dict[str, Optional[str]] = {}
    for key in ("token", "webhook", "channel", "title", "text"):
        value = _string_value(config, key)
        if value is None and key in SLACK_ENV_FALLBACKS:
            value = getattr(fallbacks, SLACK_ENV_FALLBACKS[key]) or None
        resolved[key] = value

    return ProviderConfig(**resolved)
