"""
Podwatch - Custom Exceptions
"""

from typing import Any, Dict, Optional


class PodwatchError(Exception):
    """Base exception for Podwatch."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(PodwatchError):
    """Raised when a provider cannot be built from its configuration."""

    def __init__(self, message: str, provider: str = "unknown"):
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            details={"provider": provider},
        )


class DeliveryError(PodwatchError):
    """Raised when a notification could not be delivered."""

    def __init__(
        self,
        message: str,
        provider: str = "unknown",
        mode: str = "unknown",
        status_code: Optional[int] = None,
    ):
        details: Dict[str, Any] = {"provider": provider, "mode": mode}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, code="DELIVERY_ERROR", details=details)
