"""
Podwatch - Structured Logging Configuration

Alerts carry Slack bot tokens and webhook URLs, both of which grant write
access to a workspace. `secret_filter_processor` keeps them out of log
output unless MASK_SECRETS_IN_LOGS is turned off.
"""

import logging
import sys
from typing import Any, Callable, Dict, List, Optional

import structlog

from podwatch.core.config import Settings, settings

SECRET_KEYS = {"token", "webhook", "webhook_url", "authorization"}

Processor = Callable[[Any, str, Dict[str, Any]], Any]


def resolve_log_level(app_settings: Settings) -> int:
    """APP_DEBUG forces DEBUG; otherwise LOG_LEVEL, falling back to INFO."""
    if app_settings.APP_DEBUG:
        return logging.DEBUG
    level = logging.getLevelName(app_settings.LOG_LEVEL.upper())
    return level if isinstance(level, int) else logging.INFO


def build_processors(json_output: bool, mask_secrets: bool = True) -> List[Processor]:
    """
    Build the structlog processor chain.

    Args:
        json_output: Render JSON lines instead of coloured console output
        mask_secrets: Redact Slack tokens and webhook URLs

    Returns:
        Processors ending with the renderer
    """
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    # Must come before the renderer
    if mask_secrets:
        processors.append(secret_filter_processor)

    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    return processors


def setup_logging(app_settings: Optional[Settings] = None) -> None:
    """Configure structlog on top of stdlib logging for the notifier."""
    app_settings = app_settings or settings

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=resolve_log_level(app_settings),
    )

    structlog.configure(
        processors=build_processors(
            json_output=app_settings.APP_ENV != "development",
            mask_secrets=app_settings.MASK_SECRETS_IN_LOGS,
        ),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def mask_secret(value: Any) -> str:
    """Keep the first few characters of a secret so it stays recognisable."""
    if isinstance(value, str) and len(value) > 8:
        return f"{value[:4]}...[REDACTED]"
    return "[REDACTED]"


def secret_filter_processor(
    logger: Any, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Mask Slack tokens and webhook URLs in log events."""
    for key in list(event_dict.keys()):
        if key.lower() in SECRET_KEYS:
            event_dict[key] = mask_secret(event_dict[key])

    return event_dict
