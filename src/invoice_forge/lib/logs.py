"""
Logging utilities for Invoice Forge.

Provides a logger factory that hands out configured Python loggers with
consistent formatting across the package.
"""

import logging
import os
from pathlib import Path

_LOG_LEVEL = (
    os.getenv("INVOICE_FORGE_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO"
).upper()

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def logger(name: str) -> logging.Logger:
    """
    Create and configure a logger for the given name.

    Accepts either a dotted logger name or a ``__file__`` path. Paths are
    reduced to ``invoice_forge.<stem>`` so records group under the package.

    Args:
        name: Logger name or __file__ path.

    Returns:
        Configured logging.Logger instance.
    """
    if "/" in name or "\\" in name:
        name = f"invoice_forge.{Path(name).stem}"

    log = logging.getLogger(name)

    # Only configure if not already configured
    if not log.handlers:
        log.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        log.addHandler(handler)

    return log
