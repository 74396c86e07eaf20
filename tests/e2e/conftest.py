"""Playwright fixtures for TodoMVC E2E tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Generator, Sequence

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from config import Config, get_config
from shared import configure_logging
from shared.live_stack import todo_app_url
from shared.test_helpers import seed_persisted_todos
from shared.todo_storage import TodoItem
from tests.e2e.pages.todo_page import TodoPage


@pytest.fixture(scope="session")
def e2e_config() -> type[Config]:
    """Configuration class for the current E2E run."""
    config_class = get_config()
    configure_logging(config_class.LOG_LEVEL)
    return config_class


@pytest.fixture(scope="session")
def live_server(e2e_config: type[Config]) -> Generator[str, None, None]:
    """
    Return a reachable TodoMVC URL for E2E tests.

    If TODO_BASE_URL is set, wait for that URL.
    Otherwise probe the public demo and skip when it is unreachable.
    """
    yield from todo_app_url(
        base_url_env="TODO_BASE_URL",
        base_url_default=e2e_config.BASE_URL,
        suite_name="e2e",
        timeout=e2e_config.REACHABILITY_TIMEOUT,
    )


@pytest.fixture(scope="session")
def browser_context_args(e2e_config: type[Config]):
    return {
        "viewport": e2e_config.VIEWPORT,
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict
) -> Generator[BrowserContext, None, None]:
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def unopened_todo_page(page: Page, live_server: str, e2e_config: type[Config]) -> TodoPage:
    """
    TodoPage that has not navigated yet.

    Lets tests seed localStorage before the app first loads.
    """
    return TodoPage(
        page,
        live_server,
        storage_key=e2e_config.STORAGE_KEY,
        storage_timeout_ms=e2e_config.STORAGE_TIMEOUT_MS,
    )


@pytest.fixture
def todo_page(unopened_todo_page: TodoPage) -> TodoPage:
    """TodoPage opened on an empty list."""
    return unopened_todo_page.navigate()


@pytest.fixture
def seed_todos(
    context: BrowserContext, e2e_config: type[Config]
) -> Callable[[Sequence[TodoItem]], None]:
    """Factory that pre-populates localStorage before the first navigation."""

    def _seed(items: Sequence[TodoItem]) -> None:
        seed_persisted_todos(context, items, e2e_config.STORAGE_KEY)

    return _seed


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on UI test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            screenshot_dir = get_config().SCREENSHOT_DIR
            os.makedirs(screenshot_dir, exist_ok=True)
            test_name = item.name.replace("/", "_").replace("::", "_")
            screenshot_path = f"{screenshot_dir}/{test_name}.png"
            try:
                page.screenshot(path=screenshot_path)
                print(f"\nScreenshot saved: {screenshot_path}")
            except Exception as exc:  # pragma: no cover - best effort logging
                print(f"\nFailed to capture screenshot: {exc}")
