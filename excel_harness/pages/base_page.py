"""
Base Page Object

Provides common functionality for all page objects.
"""
from typing import Optional

from playwright.sync_api import Page

from ..settings import Timeouts
from ..surfaces import Surface


class BasePage:
    """Base class for all page objects."""

    def __init__(self, page: Page, timeouts: Optional[Timeouts] = None):
        self.page = page
        self.timeouts = timeouts or Timeouts()

    @property
    def surface(self) -> Surface:
        """The top-level page as an interaction surface."""
        return Surface.of(self.page)

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, url: str) -> None:
        """Navigate to an absolute URL."""
        self.page.goto(url, timeout=self.timeouts.navigation)

    def current_url(self) -> str:
        """Get current page URL."""
        return self.page.url

    # =========================================================================
    # Debugging
    # =========================================================================

    def wait(self, milliseconds: int) -> None:
        """Wait for specified time (use sparingly)."""
        self.page.wait_for_timeout(milliseconds)
