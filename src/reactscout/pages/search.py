"""
Search overlay page object.

Models the DocSearch modal independently of how it was launched:
opening, querying, paging through results and closing.

Overlay states: CLOSED -> OPENING -> OPEN -> CLOSING -> CLOSED.
``search()`` only runs while OPEN and only changes the results sub-state
(EMPTY | HAS_RESULTS | NO_RESULTS).
"""

import logging
from typing import List, Union

from .. import selectors as S
from ..errors import InteractionTimeout, OverlayStateError
from ..models import Direction, OverlayState, ResultsState
from ..probe import hard_wait, probe_and_act, race_visible
from .base import BasePage

logger = logging.getLogger(__name__)


class SearchOverlay(BasePage):
    """
    The modal search experience.

    Usage:
        search = SearchOverlay(page)
        search.open_via_keyboard()          # raises InteractionTimeout if it never opens

        search.search("useState")
        titles = search.results()
        search.select_result(0)

    Opening and closing are hard operations: they promise a visible/hidden
    overlay and raise ``InteractionTimeout`` otherwise. Everything that looks
    for optional UI (close button, recent searches, categories) is soft.
    """

    def __init__(self, page, config=None, capture=None):
        super().__init__(page, config=config, capture=capture)

        self.overlay = self.locate(S.SEARCH_OVERLAY).first
        self.search_input = self.locate(S.SEARCH_INPUT).first
        self.search_results = self.locate(S.SEARCH_RESULTS)
        self.no_results_message = self.locate(S.NO_RESULTS).first
        self.close_button = self.locate(S.SEARCH_CLOSE).first
        self.recent_searches = self.locate(S.RECENT_SEARCHES).first
        self.search_categories = self.locate(S.SEARCH_CATEGORIES)
        self.search_entry = self.locate(S.SEARCH_ENTRY).first

        self.state = OverlayState.CLOSED
        self.results_state = ResultsState.EMPTY

    # Opening

    def open_via_keyboard(self):
        """
        Open the overlay with the search shortcut.

        Raises:
            InteractionTimeout: If the overlay is not visible after both shortcuts
        """
        self.state = OverlayState.OPENING
        self.press_shortcut(self.overlay, self.config.probe_timeout_ms, what=S.SEARCH_OVERLAY.name)
        self._wait_until_open()

    def open_via_click(self):
        """
        Open the overlay by clicking the search entry control.

        Raises:
            InteractionTimeout: If there is no search entry or the overlay never opens
        """
        self.state = OverlayState.OPENING
        try:
            hard_wait(
                self.search_entry,
                "visible",
                self.config.search_open_timeout_ms,
                what=S.SEARCH_ENTRY.name,
                capture=self.capture,
            )
        except InteractionTimeout:
            self.state = OverlayState.CLOSED
            raise
        self.search_entry.click()
        self._wait_until_open()

    def _wait_until_open(self):
        try:
            hard_wait(
                self.overlay,
                "visible",
                self.config.search_open_timeout_ms,
                what=S.SEARCH_OVERLAY.name,
                capture=self.capture,
            )
        except InteractionTimeout:
            self.state = OverlayState.CLOSED
            raise
        self.state = OverlayState.OPEN
        self.results_state = ResultsState.EMPTY

    def is_open(self) -> bool:
        return self.probe(self.overlay, 0, what=S.SEARCH_OVERLAY.name)

    # Querying

    def search(self, query: str) -> ResultsState:
        """
        Type a query and wait for the overlay to settle.

        Input is debounced by the site, so after filling the field this waits
        ``debounce_delay_ms`` and then races "a result is visible" against "the
        no-results message is visible". The race resolves as soon as either
        shows up, or after ``result_race_timeout_ms``; it never raises.

        Returns:
            The resulting sub-state; exactly one of HAS_RESULTS / NO_RESULTS
            once the race resolved, EMPTY if neither appeared in time

        Raises:
            OverlayStateError: If the overlay is not open
        """
        self._require_open("search")
        self.search_input.clear()
        self.search_input.fill(query)
        self.settle(self.config.debounce_delay_ms)

        race_visible(
            [self.search_results.first, self.no_results_message],
            self.config.result_race_timeout_ms,
            what=f"results for {query!r}",
            capture=self.capture,
        )
        self.results_state = self._classify_results()
        logger.debug(f"Search {query!r} settled as {self.results_state.value}")
        return self.results_state

    def _classify_results(self) -> ResultsState:
        # Results win if both are somehow on screen
        if self.probe(self.search_results.first, 0, what=S.SEARCH_RESULTS.name):
            return ResultsState.HAS_RESULTS
        if self.probe(self.no_results_message, 0, what=S.NO_RESULTS.name):
            return ResultsState.NO_RESULTS
        return ResultsState.EMPTY

    def _require_open(self, operation: str):
        # The page is the source of truth: the overlay may have been opened
        # (HomePage.open_search()) or closed (Escape, reload) behind our back
        if self.is_open():
            self.state = OverlayState.OPEN
            return
        if self.state is not OverlayState.CLOSED:
            logger.debug(f"Search overlay was {self.state.value} but is no longer visible")
        self.state = OverlayState.CLOSED
        self.results_state = ResultsState.EMPTY
        raise OverlayStateError(f"Cannot {operation}: search overlay is closed")

    def clear_search(self):
        """Clear the query field, pressing Backspace so the site sees an input event."""
        self.search_input.clear()
        self.search_input.press("Backspace")
        self.results_state = ResultsState.EMPTY

    def results(self) -> List[str]:
        """Labels of the current results, trimmed and in display order."""
        self.settle()
        return self.text_labels(self.search_results)

    def has_results(self) -> bool:
        if not self.probe(
            self.search_results.first, self.config.has_results_timeout_ms, what=S.SEARCH_RESULTS.name
        ):
            return False
        return self.search_results.count() > 0

    def has_no_results_message(self) -> bool:
        return self.probe(self.no_results_message, 0, what=S.NO_RESULTS.name)

    def recent_queries(self) -> List[str]:
        """Entries of the "recent searches" region, or [] if it is not shown."""
        if not self.probe(self.recent_searches, 0, what=S.RECENT_SEARCHES.name):
            return []
        entries = self.locate(S.RECENT_SEARCH_ENTRY, scope=self.recent_searches)
        return self.text_labels(entries)

    def select_category(self, name: str) -> bool:
        """
        Filter results by category if such a control is shown.

        Returns:
            True if a matching category was clicked
        """
        category = self.search_categories.filter(has_text=name).first
        selected = probe_and_act(
            category,
            lambda control: control.click(),
            0,
            what=f"category {name!r}",
            capture=self.capture,
        )
        if selected:
            self.settle()
        return selected

    # Result navigation

    def select_result(self, index: int = 0):
        """
        Click the nth result and wait for the target page.

        Raises:
            InteractionTimeout: If the nth result never becomes visible
        """
        result = self.search_results.nth(index)
        hard_wait(
            result,
            "visible",
            self.config.result_timeout_ms,
            what=f"{S.SEARCH_RESULTS.name} #{index}",
            capture=self.capture,
        )
        result.click()
        self.page.wait_for_load_state("domcontentloaded")
        self.state = OverlayState.CLOSED
        self.results_state = ResultsState.EMPTY

    def select_first_result(self):
        self.select_result(0)

    def navigate_results(self, direction: Union[Direction, str]):
        """Move the highlighted result with the arrow keys."""
        direction = Direction(direction)
        self.press(direction.key)
        self.settle(self.config.key_settle_delay_ms)

    def select_highlighted_result(self):
        self.press("Enter")
        self.page.wait_for_load_state("domcontentloaded")
        self.state = OverlayState.CLOSED
        self.results_state = ResultsState.EMPTY

    # Closing

    def close(self):
        """
        Close the overlay via its close button, or the cancel key if there is none.

        Raises:
            InteractionTimeout: If the overlay is still visible after ``search_close_timeout_ms``
        """
        self.state = OverlayState.CLOSING
        clicked = probe_and_act(
            self.close_button,
            lambda button: button.click(),
            0,
            what=S.SEARCH_CLOSE.name,
            capture=self.capture,
        )
        if not clicked:
            self.press(self.config.cancel_key)

        try:
            hard_wait(
                self.overlay,
                "hidden",
                self.config.search_close_timeout_ms,
                what=S.SEARCH_OVERLAY.name,
                capture=self.capture,
            )
        except InteractionTimeout:
            self.state = OverlayState.OPEN
            raise
        self.state = OverlayState.CLOSED
        self.results_state = ResultsState.EMPTY
