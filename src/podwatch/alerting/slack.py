"""
Podwatch - Slack Provider

Formats pod events as Block Kit messages and delivers them through a
bot token (chat.postMessage) or an incoming webhook.
"""

import time
from typing import Any, Mapping, Optional

import structlog

from podwatch.alerting.base import NotifierProvider
from podwatch.alerting.blocks import (
    code_sections,
    fields_section,
    markdown_section,
    plain_section,
)
from podwatch.alerting.delivery import Deliverer, TokenDeliverer, WebhookDeliverer
from podwatch.alerting.models import (
    AppContext,
    DeliveryMode,
    Event,
    ProviderConfig,
    SlackMessage,
    TokenMode,
    WebhookMode,
    resolve_provider_config,
)
from podwatch.core.constants import (
    DEFAULT_TEXT,
    DEFAULT_TITLE,
    FOOTER,
    SLACK_PROVIDER_NAME,
)
from podwatch.core.exceptions import ConfigurationError
from podwatch.observability.metrics import record_notification

logger = structlog.get_logger()


def select_mode(config: ProviderConfig) -> DeliveryMode:
    """
    Decide how a Slack provider delivers messages.

    A token wins over a webhook and needs a channel to post to.

    Raises:
        ConfigurationError: If neither mode can be built
    """
    if config.token:
        if not config.channel:
            raise ConfigurationError(
                "initializing slack with token requires channel",
                provider=SLACK_PROVIDER_NAME,
            )
        return TokenMode(token=config.token, channel=config.channel)

    if config.webhook:
        return WebhookMode(url=config.webhook, channel=config.channel)

    raise ConfigurationError(
        "initializing slack with empty webhook url",
        provider=SLACK_PROVIDER_NAME,
    )


class SlackProvider(NotifierProvider):
    """
    Slack notification provider.

    Use `from_config` to build one; it returns None when the configuration
    has neither a usable token nor a webhook.
    """

    def __init__(
        self,
        config: ProviderConfig,
        mode: DeliveryMode,
        app_context: AppContext,
        deliverer: Optional[Deliverer] = None,
    ):
        self.config = config
        self.mode = mode
        self.app_context = app_context
        self.deliverer = deliverer or self._default_deliverer(mode)

    @classmethod
    def from_config_or_raise(
        cls,
        config: Optional[Mapping[str, Any]],
        app_context: AppContext,
        deliverer: Optional[Deliverer] = None,
    ) -> "SlackProvider":
        """
        Build a provider from a configuration mapping.

        Args:
            config: Mapping with optional token, webhook, channel, title
                and text keys
            app_context: Application context supplying the cluster name
            deliverer: Optional deliverer replacing the default one

        Returns:
            Configured SlackProvider

        Raises:
            ConfigurationError: If no delivery mode can be built
        """
        resolved = resolve_provider_config(config)
        mode = select_mode(resolved)

        if isinstance(mode, TokenMode):
            logger.info("Initializing slack with token", channel=mode.channel)
        else:
            logger.info(
                "Initializing slack with webhook",
                webhook=mode.url,
                channel=mode.channel,
            )

        return cls(resolved, mode, app_context, deliverer=deliverer)

    @classmethod
    def from_config(
        cls,
        config: Optional[Mapping[str, Any]],
        app_context: AppContext,
        deliverer: Optional[Deliverer] = None,
    ) -> Optional["SlackProvider"]:
        """Build a provider, returning None if the configuration is unusable."""
        try:
            return cls.from_config_or_raise(config, app_context, deliverer=deliverer)
        except ConfigurationError as e:
            logger.warning(e.message, provider=SLACK_PROVIDER_NAME)
            return None

    @staticmethod
    def _default_deliverer(mode: DeliveryMode) -> Deliverer:
        if isinstance(mode, TokenMode):
            return TokenDeliverer(token=mode.token, channel=mode.channel)
        return WebhookDeliverer(url=mode.url)

    @property
    def name(self) -> str:
        return SLACK_PROVIDER_NAME

    def send_event(self, event: Event) -> None:
        """
        Send a pod event as a Block Kit message.

        Events and logs are split into code blocks of at most 2000
        characters each.
        """
        logger.info(
            "Sending event to slack",
            pod=event.pod_name,
            container=event.container_name,
            namespace=event.namespace,
            reason=event.reason,
        )

        message = SlackMessage(blocks=self.build_blocks(event))
        self.send_api(message, kind="event")

    def build_blocks(self, event: Event) -> list:
        """Build the Block Kit blocks for a pod event."""
        title = self.config.title or DEFAULT_TITLE
        text = self.config.text or DEFAULT_TEXT

        blocks = [
            markdown_section(title),
            plain_section(text),
            fields_section({
                "Cluster": self.app_context.cluster_name,
                "Name": event.pod_name,
                "Container": event.container_name,
                "Namespace": event.namespace,
                "Reason": event.reason,
            }),
        ]

        blocks.extend(code_sections(":mag: *Events*", event.events))
        blocks.extend(code_sections(":memo: *Logs*", event.logs))

        blocks.append(markdown_section(FOOTER))
        return blocks

    def send_message(self, message: str) -> None:
        """Send a plain text message."""
        self.send_api(SlackMessage(text=message), kind="message")

    def send_api(self, message: SlackMessage, kind: str = "message") -> None:
        """
        Deliver a message through the active mode in a single attempt.

        In webhook mode the configured channel overrides the webhook's
        default channel. In token mode the channel is fixed by the
        deliverer.
        """
        if isinstance(self.mode, WebhookMode) and self.mode.channel:
            message.channel = self.mode.channel

        start = time.perf_counter()
        try:
            self.deliverer.deliver(message)
        except Exception as e:
            record_notification(
                provider=self.name,
                kind=kind,
                mode=self.mode.name,
                status="failed",
                duration_seconds=time.perf_counter() - start,
            )
            logger.error(
                "Failed to send Slack message",
                mode=self.mode.name,
                kind=kind,
                error=str(e),
            )
            raise

        record_notification(
            provider=self.name,
            kind=kind,
            mode=self.mode.name,
            status="success",
            duration_seconds=time.perf_counter() - start,
            block_count=len(message.blocks),
        )
        logger.info("Slack message sent", mode=self.mode.name, kind=kind)
