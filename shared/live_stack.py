"""Reachability helpers for the TodoMVC app under test."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Generator

import pytest
import requests

logger = logging.getLogger(__name__)


def is_app_ready(url: str, timeout: int = 2) -> bool:
    """Return True when the app URL responds with 200."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_app_reachable(url: str, timeout: int = 60, interval: int = 1) -> None:
    """Poll the app URL until it responds with 200 or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            response = requests.get(url, timeout=2)
            if response.status_code == 200:
                logger.info("TodoMVC app reachable at %s", url)
                return
        except requests.RequestException:
            pass
        time.sleep(interval)
    raise RuntimeError(f"TodoMVC app at {url} not reachable after {timeout}s")


def todo_app_url(
    *,
    base_url_env: str,
    base_url_default: str,
    suite_name: str,
    timeout: int = 60,
) -> Generator[str, None, None]:
    """
    Yield a reachable TodoMVC base URL.

    Priority:
    1. Use explicit base URL from `base_url_env` (and wait for it).
    2. Probe `base_url_default` once; skip the suite when it is unreachable.
    """
    provided_base_url = os.getenv(base_url_env)
    if provided_base_url:
        wait_for_app_reachable(provided_base_url, timeout=timeout)
        yield provided_base_url
        return

    if is_app_ready(base_url_default):
        logger.info("Using default TodoMVC app at %s", base_url_default)
        yield base_url_default
        return

    logger.warning("Default TodoMVC app at %s is unreachable", base_url_default)
    pytest.skip(
        f"{base_url_default} is unreachable; set {base_url_env} to run {suite_name} tests"
    )
