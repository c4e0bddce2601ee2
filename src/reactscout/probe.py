"""
Probe-Act-Wait primitives.

Two kinds of wait, and the split between them matters:

- Probes (``probe_visible``, ``probe_and_act``, ``race_visible``,
  ``first_visible``) model "this may legitimately not exist". They have a
  bounded timeout and resolve to ``False``/``None`` on expiry. They never raise.
- Hard waits (``hard_wait``) model "this is what the call promises". On
  expiry they raise ``InteractionTimeout``.

Every function accepts an optional ``SessionCapture`` and records its outcome.
"""

import logging
from typing import Callable, Iterable, Optional, Tuple

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .errors import InteractionTimeout

logger = logging.getLogger(__name__)


def _record(capture, kind: str, target: str, outcome: bool, detail=None, timeout_ms=None):
    if capture is not None:
        capture.record(kind, target, outcome, detail=detail, timeout_ms=timeout_ms)


def probe_visible(locator, timeout_ms: int, what: str = "element", capture=None) -> bool:
    """
    Bounded visibility check that never raises.

    Args:
        locator: Playwright locator; should resolve to a single element
            (use ``.first``), as visibility checks are strict
        timeout_ms: Upper bound in milliseconds. ``0`` checks immediately:
            Playwright reads ``timeout=0`` as "wait forever", so it is never
            passed through.
        what: Name used in logs and capture records
        capture: Optional SessionCapture

    Returns:
        True if the element was visible within the bound
    """
    try:
        if timeout_ms <= 0:
            visible = locator.is_visible()
        else:
            locator.wait_for(state="visible", timeout=timeout_ms)
            visible = True
    except PlaywrightTimeoutError:
        visible = False
    except PlaywrightError as e:
        logger.debug(f"Probe for {what} errored, treating as absent: {e}")
        visible = False

    if not visible:
        logger.debug(f"Probe miss: {what} not visible within {timeout_ms}ms")
    _record(capture, "probe", what, visible, timeout_ms=timeout_ms)
    return visible


def probe_and_act(
    locator,
    act: Callable[[object], None],
    timeout_ms: int,
    what: str = "element",
    capture=None,
) -> bool:
    """
    Probe for an optional element and act on it only if present.

    Returns:
        True if the element was present and ``act`` ran
    """
    if not probe_visible(locator, timeout_ms, what=what, capture=capture):
        return False
    act(locator)
    _record(capture, "act", what, True)
    return True


def hard_wait(locator, state: str, timeout_ms: int, what: str = "element", capture=None):
    """
    Wait for a required state, raising on expiry.

    Args:
        locator: Playwright locator
        state: "visible", "hidden", "attached" or "detached"
        timeout_ms: Upper bound in milliseconds
        what: Name used in the error message

    Raises:
        InteractionTimeout: If the state was not reached within the bound
    """
    try:
        locator.wait_for(state=state, timeout=timeout_ms)
    except PlaywrightTimeoutError as e:
        logger.warning(f"{what} did not become {state} within {timeout_ms}ms")
        _record(capture, "wait", what, False, detail=state, timeout_ms=timeout_ms)
        raise InteractionTimeout(what, state, timeout_ms) from e
    _record(capture, "wait", what, True, detail=state, timeout_ms=timeout_ms)


def race_visible(locators: Iterable, timeout_ms: int, what: str = "any outcome", capture=None) -> bool:
    """
    Wait until the first of several locators becomes visible.

    The locators are combined with ``Locator.or_`` so a single wait resolves
    as soon as either side matches. Expiry on all sides resolves to False.
    """
    combined = None
    for locator in locators:
        combined = locator if combined is None else combined.or_(locator)
    if combined is None:
        return False
    return probe_visible(combined.first, timeout_ms, what=what, capture=capture)


def first_visible(
    candidates: Iterable[Tuple[str, object]],
    timeout_ms: int,
    capture=None,
) -> Optional[Tuple[str, object]]:
    """
    First-match-wins over a prioritized list of ``(label, locator)`` pairs.

    Candidates after the first visible one are not probed.

    Returns:
        The winning ``(label, locator)`` pair, or None
    """
    for label, locator in candidates:
        if probe_visible(locator, timeout_ms, what=label, capture=capture):
            return label, locator
    return None


def settle(page, delay_ms: int):
    """Fixed settling wait for debounce/animation to finish."""
    if delay_ms > 0:
        page.wait_for_timeout(delay_ms)


def soft_wait_for_load_state(page, state: str, timeout_ms: int, capture=None) -> bool:
    """
    ``wait_for_load_state`` that resolves to False on expiry instead of raising.
    """
    try:
        page.wait_for_load_state(state, timeout=timeout_ms)
    except PlaywrightTimeoutError:
        logger.debug(f"Load state {state} not reached within {timeout_ms}ms, continuing")
        _record(capture, "wait", f"load state {state}", False, timeout_ms=timeout_ms)
        return False
    _record(capture, "wait", f"load state {state}", True, timeout_ms=timeout_ms)
    return True
