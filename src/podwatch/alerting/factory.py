"""
Podwatch - Provider Factory

Builds notification providers from per-provider configuration mappings.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

import structlog

from podwatch.alerting.base import NotifierProvider
from podwatch.alerting.models import AppContext
from podwatch.alerting.slack import SlackProvider

logger = structlog.get_logger()

ProviderBuilder = Callable[[Mapping[str, Any], AppContext], Optional[NotifierProvider]]

PROVIDERS: Dict[str, ProviderBuilder] = {
    "slack": SlackProvider.from_config,
}


def register_provider(name: str, builder: ProviderBuilder) -> None:
    """Register a provider builder under a configuration key."""
    PROVIDERS[name.lower()] = builder


def create_provider(
    name: str,
    config: Optional[Mapping[str, Any]],
    app_context: AppContext,
) -> Optional[NotifierProvider]:
    """
    Create a single provider.

    Args:
        name: Provider key, e.g. "slack"
        config: Provider configuration mapping
        app_context: Application context

    Returns:
        The provider, or None if unknown or not configured
    """
    builder = PROVIDERS.get(name.lower())
    if builder is None:
        logger.warning(
            "Unknown notification provider",
            provider=name,
            available=sorted(PROVIDERS),
        )
        return None

    return builder(config or {}, app_context)


def get_providers(
    configs: Mapping[str, Mapping[str, Any]],
    app_context: AppContext,
) -> List[NotifierProvider]:
    """
    Create every configured provider, skipping the ones that fail.

    Args:
        configs: Mapping of provider key to its configuration mapping
        app_context: Application context

    Returns:
        List of ready providers
    """
    providers = []
    for name, config in configs.items():
        provider = create_provider(name, config, app_context)
        if provider is not None:
            providers.append(provider)

    logger.info(
        "Notification providers enabled",
        providers=[provider.name for provider in providers],
    )
    return providers
