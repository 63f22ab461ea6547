"""
Podwatch - Slack Delivery

Deliverers send a finished SlackMessage over the wire. The provider picks
one at construction time; tests inject their own.
"""

from abc import ABC, abstractmethod
from http.client import HTTPException
from typing import Optional

import httpx
import structlog
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError

from podwatch.core.config import settings
from podwatch.core.constants import SLACK_PROVIDER_NAME
from podwatch.core.exceptions import DeliveryError
from podwatch.alerting.models import SlackMessage

logger = structlog.get_logger()


class Deliverer(ABC):
    """Sends one message in a single attempt."""

    mode = "unknown"

    @abstractmethod
    def deliver(self, message: SlackMessage) -> None:
        """
        Deliver a message.

        Args:
            message: The payload to send

        Raises:
            DeliveryError: If the message was not accepted
        """
        pass


class WebhookDeliverer(Deliverer):
    """Posts messages to a Slack incoming webhook."""

    mode = "webhook"

    def __init__(
        self,
        url: str,
        timeout: Optional[int] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.url = url
        self.timeout = timeout or settings.SLACK_TIMEOUT
        self._client = client

    def deliver(self, message: SlackMessage) -> None:
        payload = message.to_dict()
        logger.debug("Posting to Slack webhook", webhook=self.url, keys=sorted(payload))

        try:
            if self._client is not None:
                response = self._client.post(self.url, json=payload)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.post(self.url, json=payload)
        except httpx.TimeoutException as e:
            raise DeliveryError(
                "Slack webhook request timed out",
                provider=SLACK_PROVIDER_NAME,
                mode=self.mode,
            ) from e
        except httpx.HTTPError as e:
            raise DeliveryError(
                f"Slack webhook request failed: {e}",
                provider=SLACK_PROVIDER_NAME,
                mode=self.mode,
            ) from e

        if response.status_code != 200:
            raise DeliveryError(
                f"Slack webhook error: {response.status_code} - {response.text}",
                provider=SLACK_PROVIDER_NAME,
                mode=self.mode,
                status_code=response.status_code,
            )


class TokenDeliverer(Deliverer):
    """Posts messages with chat.postMessage to a fixed channel."""

    mode = "token"

    def __init__(
        self,
        token: str,
        channel: str,
        timeout: Optional[int] = None,
        client: Optional[WebClient] = None,
    ):
        self.channel = channel
        self.client = client or WebClient(
            token=token,
            timeout=timeout or settings.SLACK_TIMEOUT,
        )

    def deliver(self, message: SlackMessage) -> None:
        # The channel is bound at construction; message.channel is ignored
        options = {}
        if message.blocks:
            options["blocks"] = message.blocks
        if message.text:
            options["text"] = message.text

        try:
            logger.debug("Calling chat.postMessage", channel=self.channel, keys=sorted(options))
            self.client.chat_postMessage(channel=self.channel, **options)
        except SlackApiError as e:
            raise DeliveryError(
                f"Slack API error: {e.response.get('error', 'unknown_error')}",
                provider=SLACK_PROVIDER_NAME,
                mode=self.mode,
                status_code=e.response.status_code,
            ) from e
        except (SlackClientError, HTTPException, OSError) as e:
            raise DeliveryError(
                f"Slack API request failed: {e}",
                provider=SLACK_PROVIDER_NAME,
                mode=self.mode,
            ) from e
