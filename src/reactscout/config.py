"""
Configuration for page-object interactions and browser sessions.

Timeouts are in milliseconds, matching Playwright's own ``timeout=`` arguments.
Platform-specific behavior (which search shortcut is tried first) is data
here rather than literals in the page objects.
"""

import os
import sys
from dataclasses import dataclass, fields, replace
from typing import Optional, Tuple

from .errors import ConfigError

DEFAULT_BASE_URL = "https://react.dev"

CONTROL_SHORTCUT = "Control+K"
META_SHORTCUT = "Meta+K"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


@dataclass(frozen=True)
class InteractionConfig:
    """Timeouts, settling delays and key bindings used by the page objects."""

    base_url: str = DEFAULT_BASE_URL

    # Soft waits: expiry resolves to "absent", never an error
    navigation_timeout_ms: int = 15000
    probe_timeout_ms: int = 1000
    quick_probe_timeout_ms: int = 500
    visibility_timeout_ms: int = 3000
    result_race_timeout_ms: int = 3000
    has_results_timeout_ms: int = 2000

    # Hard waits: expiry raises InteractionTimeout
    search_open_timeout_ms: int = 5000
    search_close_timeout_ms: int = 3000
    result_timeout_ms: int = 5000

    settle_delay_ms: int = 500
    debounce_delay_ms: int = 500
    search_settle_delay_ms: int = 1500
    key_settle_delay_ms: int = 100

    primary_shortcut: str = CONTROL_SHORTCUT
    secondary_shortcut: str = META_SHORTCUT
    cancel_key: str = "Escape"

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            # Playwright reads timeout=0 as "wait forever"
            if f.name.endswith("_timeout_ms"):
                if not isinstance(value, int) or value <= 0:
                    raise ConfigError(f"{f.name} must be a positive integer, got {value!r}")
            elif f.name.endswith("_delay_ms"):
                if not isinstance(value, int) or value < 0:
                    raise ConfigError(f"{f.name} must be a non-negative integer, got {value!r}")
        if not self.base_url:
            raise ConfigError("base_url must not be empty")

    @property
    def shortcuts(self) -> Tuple[str, str]:
        return self.primary_shortcut, self.secondary_shortcut

    def url(self, path: str = "/") -> str:
        """Join a site-relative path onto ``base_url``."""
        return self.base_url.rstrip("/") + "/" + path.lstrip("/")

    @classmethod
    def for_platform(cls, platform: Optional[str] = None, **overrides) -> "InteractionConfig":
        """
        Build a config whose primary shortcut matches the host OS.

        Args:
            platform: ``sys.platform``-style name (default: current interpreter's)
            **overrides: Any other field to set

        Returns:
            InteractionConfig with Meta+K first on macOS, Control+K elsewhere
        """
        platform = platform or sys.platform
        if platform == "darwin":
            overrides.setdefault("primary_shortcut", META_SHORTCUT)
            overrides.setdefault("secondary_shortcut", CONTROL_SHORTCUT)
        return cls(**overrides)

    @classmethod
    def from_env(cls) -> "InteractionConfig":
        """Build a config from REACTSCOUT_* environment variables."""
        overrides = {}
        base_url = os.environ.get("REACTSCOUT_BASE_URL")
        if base_url:
            overrides["base_url"] = base_url
        return cls.for_platform(os.environ.get("REACTSCOUT_PLATFORM"), **overrides)

    def with_overrides(self, **changes) -> "InteractionConfig":
        return replace(self, **changes)


@dataclass(frozen=True)
class SessionConfig:
    """How to launch the browser that owns the session handle."""

    browser: str = "chromium"
    headless: bool = True
    viewport: Tuple[int, int] = (1280, 720)
    color_scheme: Optional[str] = None  # "light" | "dark" | "no-preference"
    reduced_motion: Optional[str] = None  # "reduce" | "no-preference"
    launch_args: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.browser not in SUPPORTED_BROWSERS:
            raise ConfigError(
                f"Unknown browser: {self.browser} (expected one of {', '.join(SUPPORTED_BROWSERS)})"
            )
        width, height = self.viewport
        if width <= 0 or height <= 0:
            raise ConfigError(f"viewport must be positive, got {self.viewport}")
        if self.color_scheme not in (None, "light", "dark", "no-preference"):
            raise ConfigError(f"Unknown color_scheme: {self.color_scheme}")
        if self.reduced_motion not in (None, "reduce", "no-preference"):
            raise ConfigError(f"Unknown reduced_motion: {self.reduced_motion}")

    @classmethod
    def from_env(cls) -> "SessionConfig":
        """Build a config from REACTSCOUT_BROWSER / REACTSCOUT_HEADED."""
        headed = os.environ.get("REACTSCOUT_HEADED", "").lower() in ("1", "true", "yes")
        return cls(
            browser=os.environ.get("REACTSCOUT_BROWSER", "chromium"),
            headless=not headed,
        )

    def context_options(self) -> dict:
        """Keyword arguments for ``Browser.new_context``."""
        width, height = self.viewport
        options = {"viewport": {"width": width, "height": height}}
        if self.color_scheme:
            options["color_scheme"] = self.color_scheme
        if self.reduced_motion:
            options["reduced_motion"] = self.reduced_motion
        return options
