"""
Page objects for react.dev.

Each page object is bound to one session handle (a Playwright ``Page``) and
scoped to one logical surface:
    - HomePage: header, footer, navigation, search entry, appearance toggle
    - SearchOverlay: the DocSearch modal
"""

from .base import BasePage
from .home import HomePage
from .search import SearchOverlay

__all__ = [
    "BasePage",
    "HomePage",
    "SearchOverlay",
]
