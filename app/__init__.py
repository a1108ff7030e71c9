"""Comparison viewer state and display transforms."""

import logging

from config import configure_structlog

try:  # pragma: no cover - defensive logging configuration
    configure_structlog()
except Exception:  # pragma: no cover - logging setup failure should not break the viewer
    logging.getLogger(__name__).warning("Failed to configure logging for comparison viewer.")
