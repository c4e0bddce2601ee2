"""Shared plumbing for react.dev page objects."""

import logging
from typing import List, Optional

from ..config import InteractionConfig
from ..probe import probe_visible, settle
from ..selectors import ElementRef

logger = logging.getLogger(__name__)


class BasePage:
    """
    Base for page objects bound to one session handle.

    The page is borrowed, never owned: page objects do not close it and must
    not outlive the scenario that created it. Construction performs no I/O;
    locators created here resolve lazily on each use.
    """

    def __init__(self, page, config: Optional[InteractionConfig] = None, capture=None):
        self.page = page
        self.config = config or InteractionConfig()
        self.capture = capture

    def locate(self, ref: ElementRef, scope=None):
        """Resolve an ElementRef against the page (or a narrower scope)."""
        return ref.resolve(scope if scope is not None else self.page)

    def probe(self, locator, timeout_ms: int, what: str = "element") -> bool:
        return probe_visible(locator, timeout_ms, what=what, capture=self.capture)

    def settle(self, delay_ms: Optional[int] = None):
        settle(self.page, self.config.settle_delay_ms if delay_ms is None else delay_ms)

    def press(self, key: str):
        logger.debug(f"Pressing {key}")
        self.page.keyboard.press(key)
        if self.capture is not None:
            self.capture.record("act", f"press {key}", True)

    def press_shortcut(
        self,
        target,
        recheck_timeout_ms: int,
        settle_ms: int = 0,
        what: str = "element",
    ) -> bool:
        """
        Dispatch the primary search shortcut, then the secondary one if
        ``target`` did not show up within ``recheck_timeout_ms`` (after an
        optional ``settle_ms`` pause).

        Returns:
            True if the secondary shortcut was needed
        """
        self.press(self.config.primary_shortcut)
        self.settle(settle_ms)
        if self.probe(target, recheck_timeout_ms, what=what):
            return False
        logger.debug(
            f"{self.config.primary_shortcut} did not open {what}, "
            f"trying {self.config.secondary_shortcut}"
        )
        self.press(self.config.secondary_shortcut)
        return True

    @staticmethod
    def text_labels(locator) -> List[str]:
        """
        Trimmed, non-empty text of every match, in DOM order.

        Reads ``all_text_contents``, so hidden matches are included.
        """
        return [text.strip() for text in locator.all_text_contents() if text.strip()]
