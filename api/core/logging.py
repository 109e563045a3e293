"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging

from core import config

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure root logging once, using LOG_LEVEL from the environment."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = getattr(logging, config.log_level(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
