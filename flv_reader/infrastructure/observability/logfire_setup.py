"""Logging and Logfire configuration for flv-reader.

Library code only ever logs through ``logging.getLogger(__name__)`` and
``logfire`` spans; applications call these functions once at startup.
"""

import logging
from typing import Any, Dict, Optional

import logfire

from flv_reader.infrastructure.config import Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured level and format to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.logging.level.upper(),
        format=settings.logging.format,
    )


def configure_logfire(
    settings: Optional[Settings] = None,
    additional_config: Optional[Dict[str, Any]] = None,
) -> None:
    """Configure and initialize Logfire with application settings.

    When Logfire is disabled it is still configured, but never sends data
    and prints nothing, so spans opened by the readers stay silent.

    Args:
        settings: Settings to use (defaults to the cached settings)
        additional_config: Additional configuration to merge with defaults
    """
    settings = settings or get_settings()

    if not settings.logfire.enabled:
        logfire.configure(send_to_logfire=False, console=False)
        logger.info("Logfire is disabled in configuration")
        return

    config: Dict[str, Any] = {
        "service_name": settings.logfire.service_name,
        "service_version": settings.logfire_version,
        "environment": settings.logfire_env,
        "send_to_logfire": "if-token-present",
    }
    if not settings.logfire.console_enabled:
        config["console"] = False

    # Add API key if provided (for production)
    if settings.logfire.api_key:
        config["token"] = settings.logfire.api_key.get_secret_value()

    if additional_config:
        config.update(additional_config)

    logfire.configure(**config)
    logger.info(f"Logfire configured successfully for {settings.logfire.service_name}")
