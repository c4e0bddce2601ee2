"""
Element References for react.dev.

Each logical element has exactly one named constant holding its fallback
selector list, in priority order. Page objects resolve these lazily against
the session handle, so markup drift is fixed in one place.

An ``ElementRef`` never holds a DOM node: ``resolve()`` returns a Playwright
locator, which re-queries the page on every operation.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class ElementRef:
    """A named, lazily re-resolved query with fallback selectors."""

    name: str
    selectors: Tuple[str, ...]

    def __post_init__(self):
        if not self.selectors:
            raise ValueError(f"ElementRef {self.name!r} needs at least one selector")

    def resolve(self, scope):
        """
        Build a locator matching any of the selectors.

        Args:
            scope: Playwright ``Page`` or ``Locator`` to query within

        Returns:
            Locator combining every selector with ``Locator.or_``
        """
        locator = scope.locator(self.selectors[0])
        for selector in self.selectors[1:]:
            locator = locator.or_(scope.locator(selector))
        return locator

    def candidates(self, scope) -> Iterator[Tuple[str, object]]:
        """Yield ``(selector, locator)`` pairs one by one, in priority order."""
        for selector in self.selectors:
            yield selector, scope.locator(selector).first

    def __str__(self) -> str:
        return self.name


# Page chrome
HEADER = ElementRef("header", ('nav[role="navigation"]', "nav"))
FOOTER = ElementRef("footer", ("footer", ".footer", 'div[class*="footer"]'))
NAVIGATION = ElementRef("navigation menu", ('nav[role="navigation"]', "nav"))
NAVIGATION_LINK = ElementRef("navigation link", ("a",))
LOGO = ElementRef("logo", ('a[aria-label*="React"]', 'a[href="/"] svg', ".logo"))
MAIN_CONTENT = ElementRef("main content", ("main", '[role="main"]', "#main"))
HERO = ElementRef("hero heading", ("h1", '[class*="hero"]'))
SKIP_LINK = ElementRef("skip link", ('a[href^="#"]:has-text("Skip")', 'a:has-text("Skip to")'))
SIDEBAR = ElementRef(
    "docs sidebar",
    ("aside", '[role="complementary"]', ".sidebar", 'nav[aria-label*="Docs"]'),
)
PAGER_LINKS = ElementRef(
    "next/previous links",
    (
        'nav[aria-label*="breadcrumb"]',
        ".breadcrumb",
        'a:has-text("Next")',
        'a:has-text("Previous")',
    ),
)
NEXT_LINK = ElementRef("next link", ('a:has-text("Next")', 'button:has-text("Next")'))
CODE_BLOCKS = ElementRef("code blocks", ("pre code", ".syntax-highlight", '[class*="language-"]'))
FOOTER_LINKS = ElementRef(
    "footer social links",
    ('a[href*="facebook"]', 'a[href*="twitter"]', 'a[href*="github.com/facebook/react"]'),
)

# Compact ("hamburger") menu shown on narrow viewports
COMPACT_MENU = ElementRef(
    "compact menu button",
    (
        'button[aria-label*="Menu"]',
        'button[aria-label*="menu"]',
        "button.menu-toggle",
        "[data-mobile-menu]",
    ),
)

# Appearance toggle candidates, highest priority first. First visible wins.
APPEARANCE_TOGGLE = ElementRef(
    "appearance toggle",
    (
        'button[title*="theme"]',
        'button[aria-label*="appearance"]',
        'button:has(svg[class*="sun"])',
        'button:has(svg[class*="moon"])',
        'button:has(svg[aria-label*="Sun"])',
        'button:has(svg[aria-label*="Moon"])',
        "[data-theme-toggle]",
        'button[class*="theme"]',
    ),
)

# Search entry point in the page chrome (react.dev uses Algolia DocSearch)
SEARCH_ENTRY = ElementRef(
    "search entry",
    (
        ".DocSearch-Button",
        'button:has-text("Search")',
        'button[aria-label*="Search"]',
        '[aria-label*="Search"]',
    ),
)

# Search overlay
SEARCH_OVERLAY = ElementRef(
    "search overlay",
    (
        ".DocSearch-Modal",
        '[role="dialog"][aria-label*="Search"]',
        ".search-modal",
        "[data-search-modal]",
        '[role="dialog"]',
    ),
)
SEARCH_INPUT = ElementRef(
    "search input",
    (
        ".DocSearch-Input",
        '[class*="DocSearch"] input',
        '[role="dialog"] input[type="search"]',
        '[role="dialog"] input[placeholder*="Search"]',
        '[role="searchbox"]',
    ),
)
SEARCH_RESULTS = ElementRef(
    "search result",
    (
        ".DocSearch-Hit",
        '[id^="docsearch-item"]',
        '[role="option"]',
        ".search-result-item",
        "[data-search-result]",
    ),
)
NO_RESULTS = ElementRef(
    "no-results message",
    (".DocSearch-NoResults", "text=/no results|nothing found/i"),
)
SEARCH_CLOSE = ElementRef(
    "search close button",
    (
        '[role="dialog"] button[aria-label*="Close"]',
        '[role="dialog"] button:has-text("ESC")',
    ),
)
RECENT_SEARCHES = ElementRef("recent searches", (".recent-searches", "[data-recent-searches]"))
RECENT_SEARCH_ENTRY = ElementRef("recent search entry", ("button", "a"))
SEARCH_CATEGORIES = ElementRef("search category", (".search-category", "[data-search-category]"))
