"""
reactscout - Page objects for end-to-end testing react.dev

Two layers on top of Playwright:
1. Page objects (HomePage, SearchOverlay) that hide selectors behind named
   accessors and intention-revealing actions
2. Probe-Act-Wait primitives that tolerate markup drift: bounded probes
   that never raise, fallbacks across interaction paths, and hard waits
   that raise InteractionTimeout when a promised state never arrives

Quick Start:
    ```python
    from reactscout import open_session

    with open_session() as session:
        session.home.navigate_home()

        # Keyboard shortcut, falling back to the other OS's binding
        session.search.open_via_keyboard()
        session.search.search("useState")
        print(session.search.results())

        session.search.select_result(0)
        assert session.page.url != "https://react.dev/"

        assert not session.capture.has_critical_errors()
    ```

Bring Your Own Page:
    ```python
    from playwright.sync_api import sync_playwright
    from reactscout import HomePage, InteractionConfig

    with sync_playwright() as p:
        page = p.chromium.launch().new_page()
        home = HomePage(page, config=InteractionConfig.for_platform("darwin"))
        home.navigate_home()
        print(home.current_appearance())
    ```
"""

from .capture import (
    ConsoleLog,
    InteractionRecord,
    LogLevel,
    NetworkRequest,
    SessionCapture,
)
from .config import InteractionConfig, SessionConfig
from .errors import (
    ConfigError,
    ElementNotFound,
    InteractionTimeout,
    OverlayStateError,
    ReactScoutError,
)
from .models import Appearance, Direction, OverlayState, ResultsState
from .pages import BasePage, HomePage, SearchOverlay
from .probe import (
    first_visible,
    hard_wait,
    probe_and_act,
    probe_visible,
    race_visible,
    settle,
    soft_wait_for_load_state,
)
from .selectors import ElementRef
from .session import Session, open_session

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    # Page objects
    "BasePage",
    "HomePage",
    "SearchOverlay",
    # Sessions
    "Session",
    "open_session",
    "SessionCapture",
    "ConsoleLog",
    "NetworkRequest",
    "InteractionRecord",
    "LogLevel",
    # Configuration
    "InteractionConfig",
    "SessionConfig",
    # Probe-Act-Wait
    "probe_visible",
    "probe_and_act",
    "hard_wait",
    "race_visible",
    "first_visible",
    "settle",
    "soft_wait_for_load_state",
    "ElementRef",
    # Models
    "Appearance",
    "Direction",
    "OverlayState",
    "ResultsState",
    # Errors
    "ReactScoutError",
    "InteractionTimeout",
    "ElementNotFound",
    "OverlayStateError",
    "ConfigError",
]
