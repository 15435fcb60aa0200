"""
Action Primitives

Small, timeout-bounded operations that every page object is built from.

Soft probes (``wait_visible``, ``page_loaded``) return a bool and never raise
on timeout. Everything else requires the target to be visible first and
raises ``VisibilityError`` naming the locator when it is not.

All timeouts are in milliseconds, matching Playwright.
"""
import logging
from typing import Any, Optional, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .errors import VisibilityError
from .surfaces import Keys, Surface, SurfaceKind

logger = logging.getLogger(__name__)

# Defaults used when a caller does not pass a timeout
DEFAULT_PROBE_TIMEOUT = 60000
DEFAULT_REQUIRE_TIMEOUT = 2000
DEFAULT_LOAD_TIMEOUT = 60000

LocatorArg = Optional[Union[str, Locator]]


def wait_visible(surface: Any, locator: LocatorArg, timeout: int = DEFAULT_PROBE_TIMEOUT) -> bool:
    """Wait for an element to become visible. Returns False instead of raising."""
    surface = Surface.of(surface)
    try:
        surface.resolve(locator).wait_for(state="visible", timeout=timeout)
        return True
    except PlaywrightError as e:
        logger.debug(f"Soft probe for {surface.describe(locator)} gave up: {e}")
        return False


def require_visible(
    surface: Any, locator: LocatorArg, timeout: int = DEFAULT_REQUIRE_TIMEOUT
) -> bool:
    """
    Wait for an element to become visible, raising if it never does.

    Playwright's assertion keeps re-checking until the timeout, so an element
    that is briefly detached or re-rendered still passes.

    Raises:
        VisibilityError: the element was not visible within ``timeout``
    """
    surface = Surface.of(surface)
    resolved = surface.resolve(locator)
    try:
        expect(resolved).to_be_visible(timeout=timeout)
    except AssertionError as e:
        raise VisibilityError(surface.describe(locator), timeout) from e
    return True


def click(
    surface: Any,
    locator: LocatorArg,
    timeout: int = DEFAULT_REQUIRE_TIMEOUT,
    keys: Optional[Keys] = None,
) -> None:
    """
    Click an element, optionally followed by key presses.

    Args:
        surface: Page, FrameLocator, Locator or Surface
        locator: Selector within the surface (optional for an element surface)
        timeout: Visibility timeout in milliseconds
        keys: Key combination or list of them, e.g. 'Enter' or 'Control+Enter'

    On a page the keys go to the global keyboard after the click. In a frame
    the keys are pressed on the element itself in place of the click. A
    resolved element (or the descendant ``locator`` names) is clicked
    directly and then receives the keys.
    """
    surface = Surface.of(surface)
    require_visible(surface, locator, timeout)
    resolved = surface.resolve(locator)

    if surface.kind == SurfaceKind.FRAME and keys:
        logger.debug(f"Sending {keys} to {surface.describe(locator)}")
        surface.press(resolved, keys)
        return

    resolved.click()
    if keys:
        surface.press(resolved, keys)


def fill(
    surface: Any, locator: LocatorArg, value: str, timeout: int = DEFAULT_REQUIRE_TIMEOUT
) -> None:
    """Replace the content of a field with ``value``."""
    surface = Surface.of(surface)
    resolved = surface.resolve(locator)
    require_visible(surface, resolved, timeout)
    resolved.fill(value)


def type_text(
    surface: Any, locator: LocatorArg, text: str, timeout: int = DEFAULT_REQUIRE_TIMEOUT
) -> None:
    """Type text one keystroke at a time, for inputs that react to each key."""
    surface = Surface.of(surface)
    resolved = surface.resolve(locator)
    require_visible(surface, resolved, timeout)
    resolved.press_sequentially(text)


def page_loaded(page: Page, timeout: int = DEFAULT_LOAD_TIMEOUT) -> bool:
    """Check whether the page reaches the 'load' state within the timeout."""
    try:
        page.wait_for_load_state("load", timeout=timeout)
        return True
    except PlaywrightTimeoutError:
        logger.debug(f"Page {page.url} did not reach 'load' within {timeout}ms")
        return False
