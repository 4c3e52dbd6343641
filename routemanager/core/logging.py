"""Logging utilities shared across the route manager package."""
from __future__ import annotations

import logging

from routemanager.core.utils import get_config_value


def configure_logging(level: str | None = None) -> None:
    """Initialize basic logging with a shared format and log level.

    The level can be provided directly or via the ``LOG_LEVEL`` setting
    (defaults to ``INFO``), so the CLI and the dashboard log the same way.
    """

    resolved_level = (level or get_config_value("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
