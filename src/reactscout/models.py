"""Enums shared by the page objects."""

from enum import Enum


class Appearance(Enum):
    """Color scheme the site is currently rendered in."""

    LIGHT = "light"
    DARK = "dark"


class Direction(Enum):
    """Direction for keyboard-driven result highlight movement."""

    UP = "up"
    DOWN = "down"

    @property
    def key(self) -> str:
        return "ArrowUp" if self is Direction.UP else "ArrowDown"


class OverlayState(Enum):
    CLOSED = "closed"
    OPENING = "opening"
    OPEN = "open"
    CLOSING = "closing"


class ResultsState(Enum):
    """What the search overlay is displaying below the query field."""

    EMPTY = "empty"
    HAS_RESULTS = "has_results"
    NO_RESULTS = "no_results"
