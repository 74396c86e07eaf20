"""Helpers shared by the end-to-end and unit test suites."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure root logging once for a test session."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # Reachability probes log every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
