"""
Scoped browser sessions.

A session owns the Playwright driver, browser, context and page for exactly
one scenario. Page objects borrow the page; ``open_session`` closes
everything on exit, so page objects cannot outlive it in practice.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from .capture import SessionCapture
from .config import InteractionConfig, SessionConfig
from .pages import HomePage, SearchOverlay

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """One browser tab plus the page objects bound to it."""

    page: object
    context: object
    capture: SessionCapture
    config: InteractionConfig
    home: HomePage
    search: SearchOverlay

    @classmethod
    def bind(
        cls,
        page,
        context=None,
        config: Optional[InteractionConfig] = None,
        capture: Optional[SessionCapture] = None,
    ) -> "Session":
        """
        Bind page objects to an existing page.

        Use this when a test runner already owns the page (e.g. a pytest
        fixture). Attaches a fresh capture unless one is given.
        """
        config = config or InteractionConfig()
        if capture is None:
            capture = SessionCapture()
            capture.attach_to_page(page)
        return cls(
            page=page,
            context=context if context is not None else page.context,
            capture=capture,
            config=config,
            home=HomePage(page, config=config, capture=capture),
            search=SearchOverlay(page, config=config, capture=capture),
        )

    def url(self, path: str = "/") -> str:
        return self.config.url(path)

    def set_offline(self, offline: bool):
        self.context.set_offline(offline)

    def wait_for_new_page(self, trigger, timeout_ms: int = 3000):
        """
        Run ``trigger`` and return the page it opens, or None if no new page
        appeared within ``timeout_ms``.
        """
        try:
            with self.context.expect_page(timeout=timeout_ms) as new_page:
                trigger()
            return new_page.value
        except PlaywrightTimeoutError:
            logger.debug(f"No new page within {timeout_ms}ms")
            return None


@contextmanager
def open_session(
    session_config: Optional[SessionConfig] = None,
    interaction_config: Optional[InteractionConfig] = None,
) -> Iterator[Session]:
    """
    Launch a browser and yield a Session bound to a fresh page.

    Example:
        with open_session() as session:
            session.home.navigate_home()
            session.search.open_via_keyboard()
            session.search.search("useState")
    """
    session_config = session_config or SessionConfig()
    interaction_config = interaction_config or InteractionConfig()

    with sync_playwright() as p:
        browser_type = getattr(p, session_config.browser)
        browser = browser_type.launch(
            headless=session_config.headless,
            args=list(session_config.launch_args),
        )
        logger.debug(f"Launched {session_config.browser} (headless={session_config.headless})")
        try:
            context = browser.new_context(**session_config.context_options())
            try:
                page = context.new_page()
                yield Session.bind(page, context=context, config=interaction_config)
            finally:
                context.close()
        finally:
            browser.close()
            logger.debug(f"Closed {session_config.browser}")
