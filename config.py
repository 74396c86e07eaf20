"""
Suite configuration module.

This module defines configuration classes for the environments the
end-to-end suite runs in (local, ci). Configuration values are loaded
from environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get(
        "TODO_BASE_URL", "https://demo.playwright.dev/todomvc"
    ).rstrip("/")

    # Key and JSON shape are owned by the TodoMVC app
    STORAGE_KEY: str = "react-todos"

    # Upper bound for localStorage predicates, in milliseconds
    STORAGE_TIMEOUT_MS: int = int(os.environ.get("TODO_STORAGE_TIMEOUT_MS", "5000"))

    # Upper bound for the app reachability probe, in seconds
    REACHABILITY_TIMEOUT: int = int(os.environ.get("TODO_REACHABILITY_TIMEOUT", "60"))

    VIEWPORT: dict = {"width": 1280, "height": 720}

    SCREENSHOT_DIR: str = str(BASE_DIR / "test-results" / "screenshots")

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")


class LocalConfig(Config):
    """Local developer run configuration."""

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "DEBUG")


class CIConfig(Config):
    """CI pipeline configuration."""

    # Shared runners are slower to settle
    STORAGE_TIMEOUT_MS: int = int(os.environ.get("TODO_STORAGE_TIMEOUT_MS", "15000"))


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "local")
    return config.get(env, config["default"])
