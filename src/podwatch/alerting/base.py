"""
Podwatch - Notifier Provider Base Class

Interface every notification channel implements.
"""

from abc import ABC, abstractmethod

from podwatch.alerting.models import Event


class NotifierProvider(ABC):
    """Abstract base class for notification providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name."""
        pass

    @abstractmethod
    def send_event(self, event: Event) -> None:
        """
        Send a formatted pod event.

        Args:
            event: The event to send

        Raises:
            DeliveryError: If delivery fails
        """
        pass

    @abstractmethod
    def send_message(self, message: str) -> None:
        """
        Send a plain text message.

        Args:
            message: The text to send

        Raises:
            DeliveryError: If delivery fails
        """
        pass
