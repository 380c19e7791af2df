"""Observability setup (logging and Logfire)."""

from flv_reader.infrastructure.observability.logfire_setup import (
    configure_logfire,
    configure_logging,
)

__all__ = ["configure_logfire", "configure_logging"]
