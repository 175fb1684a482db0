"""Logging utilities shared across the console package."""
from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Initialize basic logging with a shared format and log level.

    The level can be provided directly or via the ``LOG_LEVEL`` environment
    variable (defaults to ``INFO``). The CLI and the Streamlit app both call
    this once on start so API failures show up in the same format.
    """

    resolved_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT)
    # urllib3 logs every connection at DEBUG; keep it quiet unless asked.
    if resolved_level != "DEBUG":
        logging.getLogger("urllib3").setLevel(logging.WARNING)
