"""
Pytest configuration and shared fixtures for reactscout tests.

Three tiers:
- unit tests run against tests/fakes.py, no browser needed
- browser tests drive real Chromium against a routed fixture site
- live tests drive https://react.dev and only run with REACTSCOUT_LIVE=1
"""

import os
from typing import Generator

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright

from fakes import FakePage
from reactscout import InteractionConfig, Session


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "browser: needs a local Chromium install")
    config.addinivalue_line("markers", "live: drives the live react.dev site (set REACTSCOUT_LIVE=1)")


def live_enabled() -> bool:
    return os.environ.get("REACTSCOUT_LIVE", "").lower() in ("1", "true", "yes")


def pytest_collection_modifyitems(config, items):
    """Skip live tests unless REACTSCOUT_LIVE is set."""
    if live_enabled():
        return
    skip_live = pytest.mark.skip(reason="Live react.dev tests disabled (set REACTSCOUT_LIVE=1)")
    for item in items:
        if item.get_closest_marker("live"):
            item.add_marker(skip_live)


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture(scope="session")
def playwright_browser():
    """Session-scoped Chromium; skips dependent tests if it is not installed."""
    with sync_playwright() as p:
        try:
            browser = p.chromium.launch(headless=True)
        except PlaywrightError as e:
            pytest.skip(f"Chromium not available: {e}")
        yield browser
        browser.close()


@pytest.fixture
def browser_page(playwright_browser) -> Generator[Page, None, None]:
    """Page fixture that creates a fresh context and page for each test."""
    context = playwright_browser.new_context()
    page = context.new_page()
    yield page
    context.close()


@pytest.fixture
def live_session(playwright_browser) -> Generator[Session, None, None]:
    """A Session bound to a fresh page, already on the react.dev home page."""
    context = playwright_browser.new_context(viewport={"width": 1280, "height": 720})
    page = context.new_page()
    session = Session.bind(page, context=context, config=InteractionConfig.from_env())
    session.home.navigate_home()
    yield session
    context.close()
