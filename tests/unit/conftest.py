"""
Fixtures for unit tests

Playwright objects are replaced by spec'd mocks. ``Mock(spec=Page)`` passes
isinstance checks, so the surface dispatch sees them as the real thing.
``expect()`` only accepts real Playwright objects, so it is swapped for
``VisibilityAssertions`` in every unit test."""
from collections import defaultdict
from unittest.mock import Mock

import pytest
from playwright.sync_api import FrameLocator, Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from excel_harness import actions
from excel_harness.config import ENV_VARS, Config
from excel_harness.settings import Timeouts


def locator_registry():
    """selector -> Locator mock, created on first use."""
    return defaultdict(lambda: Mock(spec=Locator))


class VisibilityAssertions:
    """Stand-in for expect(locator) that asks the mock's wait_for.

    A wait_for timeout becomes the AssertionError the real assertion raises.
    """

    def __init__(self, locator):
        self.locator = locator

    def to_be_visible(self, timeout=None):
        try:
            self.locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise AssertionError(f"Locator expected to be visible: {e}") from e


@pytest.fixture(autouse=True)
def visibility_assertions(monkeypatch):
    monkeypatch.setattr(actions, "expect", VisibilityAssertions)


@pytest.fixture
def timeouts():
    return Timeouts(navigation=1000, interaction=500, assertion=200, probe=100, settle=10, page_default=500)


@pytest.fixture
def fake_page():
    """A Page mock whose locator() hands out one Locator mock per selector."""
    page = Mock(spec=Page)
    page.locators = locator_registry()
    page.locator.side_effect = lambda selector: page.locators[selector]
    page.url = "https://example.test/"
    return page


@pytest.fixture
def fake_frame():
    """A FrameLocator mock with the same per-selector locators."""
    frame = Mock(spec=FrameLocator)
    frame.locators = locator_registry()
    frame.locator.side_effect = lambda selector: frame.locators[selector]
    return frame


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every harness variable from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    Config.clear_cache()
    yield monkeypatch
    Config.clear_cache()
