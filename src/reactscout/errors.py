"""
Exceptions raised by reactscout page objects.

Only "required" operations raise. Probes that tolerate absence return
booleans instead (see ``reactscout.probe``).
"""

from typing import Optional, Sequence

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


class ReactScoutError(Exception):
    """Base class for all reactscout errors."""


class InteractionTimeout(ReactScoutError, PlaywrightTimeoutError):
    """A hard wait exceeded its bound.

    Subclasses Playwright's ``TimeoutError`` so scenarios that already catch
    Playwright timeouts keep working.
    """

    def __init__(self, what: str, state: str, timeout_ms: int):
        self.what = what
        self.state = state
        self.timeout_ms = timeout_ms
        super().__init__(f"{what} did not become {state} within {timeout_ms}ms")


class ElementNotFound(ReactScoutError):
    """No candidate in a prioritized selector list was visible."""

    def __init__(self, what: str, candidates: Optional[Sequence[str]] = None):
        self.what = what
        self.candidates = list(candidates or [])
        message = f"{what} not found"
        if self.candidates:
            message += f" (tried: {', '.join(self.candidates)})"
        super().__init__(message)


class OverlayStateError(ReactScoutError):
    """An overlay operation was called in a state that does not allow it."""


class ConfigError(ReactScoutError, ValueError):
    """Invalid configuration value."""
