"""
Home surface page object.

Wraps the react.dev page chrome: header, footer, navigation, logo, search
entry point and appearance toggle.
"""

import logging
from typing import List, Optional

from playwright.sync_api import Error as PlaywrightError

from .. import selectors as S
from ..errors import ElementNotFound
from ..models import Appearance
from ..probe import first_visible, hard_wait, probe_and_act, soft_wait_for_load_state
from .base import BasePage

logger = logging.getLogger(__name__)

PREFERS_DARK_SCRIPT = (
    "() => !!(window.matchMedia && window.matchMedia('(prefers-color-scheme: dark)').matches)"
)
SCROLL_TO_BOTTOM_SCRIPT = "() => window.scrollTo(0, document.body.scrollHeight)"


class HomePage(BasePage):
    """
    The react.dev top-level chrome and what a visitor does from it.

    Usage:
        home = HomePage(page)
        home.navigate_home()

        if home.open_search():
            home.search_for("useState")
            home.click_first_search_result()

        labels = home.navigation_labels()
        theme = home.current_appearance()
    """

    def __init__(self, page, config=None, capture=None):
        super().__init__(page, config=config, capture=capture)

        self.header = self.locate(S.HEADER).first
        self.footer = self.locate(S.FOOTER).first
        self.navigation_menu = self.locate(S.NAVIGATION).first
        self.logo = self.locate(S.LOGO).first
        self.main_content = self.locate(S.MAIN_CONTENT).first
        self.search_button = self.locate(S.SEARCH_ENTRY).first
        self.search_input = self.locate(S.SEARCH_INPUT).first
        self.search_surface = self.locate(S.SEARCH_OVERLAY).first
        self.search_results = self.locate(S.SEARCH_RESULTS)
        self.theme_toggle = self.locate(S.APPEARANCE_TOGGLE).first
        self.compact_menu_button = self.locate(S.COMPACT_MENU).first

    # Navigation

    def navigate_home(self) -> bool:
        """
        Load the site root and wait for network idle.

        The network-idle wait is soft: analytics and prefetching can keep the
        network busy, so the wait gives up after ``navigation_timeout_ms``
        without failing.

        Returns:
            True if network idle was reached within the bound
        """
        url = self.config.url("/")
        logger.info(f"Navigating to {url}")
        self.page.goto(url)
        if self.capture is not None:
            self.capture.record("navigate", url, True)
        return soft_wait_for_load_state(
            self.page, "networkidle", self.config.navigation_timeout_ms, capture=self.capture
        )

    # Search

    def open_search(self) -> bool:
        """
        Open the search surface by whatever route works.

        Tries the visible search button, then the primary shortcut, then the
        secondary shortcut. Does not raise if nothing works; callers check the
        return value (or visibility) themselves.

        Returns:
            True if the search surface is visible
        """
        cfg = self.config
        clicked = probe_and_act(
            self.search_button,
            lambda button: button.click(),
            cfg.probe_timeout_ms,
            what=S.SEARCH_ENTRY.name,
            capture=self.capture,
        )
        if not clicked:
            logger.debug("No visible search entry, falling back to keyboard shortcut")
            self.press_shortcut(
                self.search_surface,
                cfg.quick_probe_timeout_ms,
                settle_ms=cfg.settle_delay_ms,
                what=S.SEARCH_OVERLAY.name,
            )
        return self.probe(self.search_surface, cfg.search_open_timeout_ms, what=S.SEARCH_OVERLAY.name)

    def search_for(self, query: str):
        """Type a query into the open search surface and let results load."""
        hard_wait(
            self.search_input,
            "visible",
            self.config.search_open_timeout_ms,
            what=S.SEARCH_INPUT.name,
            capture=self.capture,
        )
        self.search_input.fill(query)
        self.settle(self.config.search_settle_delay_ms)

    def click_first_search_result(self):
        first = self.search_results.first
        hard_wait(
            first,
            "visible",
            self.config.result_timeout_ms,
            what=S.SEARCH_RESULTS.name,
            capture=self.capture,
        )
        first.click()
        self.page.wait_for_load_state("domcontentloaded")

    # Appearance

    def toggle_appearance(self) -> str:
        """
        Click the appearance toggle.

        Candidates in ``APPEARANCE_TOGGLE`` are probed in priority order; the
        first visible one is clicked and no further candidates are tried.

        Returns:
            The selector of the control that was clicked

        Raises:
            ElementNotFound: If no candidate is visible. There is no safe
                no-op here, unlike the other soft-failing actions.
        """
        match = first_visible(
            S.APPEARANCE_TOGGLE.candidates(self.page),
            self.config.quick_probe_timeout_ms,
            capture=self.capture,
        )
        if match is None:
            raise ElementNotFound(S.APPEARANCE_TOGGLE.name, S.APPEARANCE_TOGGLE.selectors)

        selector, button = match
        logger.debug(f"Toggling appearance via {selector}")
        button.click()
        if self.capture is not None:
            self.capture.record("act", S.APPEARANCE_TOGGLE.name, True, detail=selector)
        self.settle()
        return selector

    def current_appearance(self) -> Appearance:
        """
        Work out whether the site renders dark or light.

        DOM signals win over the system preference: a "dark" token in the
        root class, the root ``data-theme`` attribute or the body class means
        dark. Only when none of them says so is ``prefers-color-scheme``
        consulted. Never raises.
        """
        signals = (
            self._attribute("html", "class"),
            self._attribute("html", "data-theme"),
            self._attribute("body", "class"),
        )
        if any("dark" in signal for signal in signals):
            return Appearance.DARK

        try:
            prefers_dark = bool(self.page.evaluate(PREFERS_DARK_SCRIPT))
        except PlaywrightError as e:
            logger.debug(f"Could not query color-scheme preference: {e}")
            prefers_dark = False
        return Appearance.DARK if prefers_dark else Appearance.LIGHT

    def _attribute(self, selector: str, name: str) -> str:
        try:
            return self.page.locator(selector).first.get_attribute(name) or ""
        except PlaywrightError as e:
            logger.debug(f"Could not read {selector}[{name}]: {e}")
            return ""

    # Navigation menu

    def navigation_labels(self) -> List[str]:
        """Non-empty, trimmed link labels of the primary navigation, in DOM order."""
        links = self.locate(S.NAVIGATION_LINK, scope=self.navigation_menu)
        return self.text_labels(links)

    def open_compact_menu(self) -> bool:
        """
        Open the hamburger menu shown on narrow viewports.

        Returns:
            True if the menu button was present and clicked, False otherwise
        """
        opened = probe_and_act(
            self.compact_menu_button,
            lambda button: button.click(),
            self.config.probe_timeout_ms,
            what=S.COMPACT_MENU.name,
            capture=self.capture,
        )
        if opened:
            self.settle()
        return opened

    # Utilities

    def is_visible(self, locator, timeout_ms: Optional[int] = None) -> bool:
        """Visibility of any locator as a plain boolean; missing means False."""
        if timeout_ms is None:
            timeout_ms = self.config.visibility_timeout_ms
        return self.probe(locator.first, timeout_ms)

    def scroll_to_footer(self):
        self.page.evaluate(SCROLL_TO_BOTTOM_SCRIPT)
        self.settle()
