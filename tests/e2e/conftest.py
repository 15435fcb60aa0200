"""
Playwright E2E Test Configuration and Fixtures

This module provides shared fixtures, configuration, and utilities
for end-to-end browser testing with Playwright.
"""
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Generator

import pytest

# Skip entire module if playwright not installed
pytest.importorskip("playwright")

from playwright.sync_api import Browser, BrowserContext, Page

from excel_harness.settings import Timeouts

from .fake_site import FakeSite

# =============================================================================
# Configuration
# =============================================================================


class E2EConfig:
    """E2E test configuration."""

    # Live target
    EXCEL_ONLINE_URL = os.environ.get("EXCEL_ONLINE_URL", "https://www.office.com/launch/excel")
    USERNAME = os.environ.get("EXCEL_USERNAME")
    PASSWORD = os.environ.get("EXCEL_PASSWORD")

    # Timeouts (milliseconds)
    DEFAULT_TIMEOUT = 10000
    NAVIGATION_TIMEOUT = 60000

    # Timeouts for the fake site, which answers instantly
    FAKE_TIMEOUTS = Timeouts(
        navigation=15000, interaction=5000, assertion=5000, probe=500, settle=100, page_default=5000
    )

    # Screenshots and videos
    SCREENSHOT_ON_FAILURE = True
    ARTIFACTS_DIR = Path(__file__).parent / "artifacts"
    RECORD_VIDEO = os.environ.get("E2E_RECORD_VIDEO", "false").lower() == "true"

    @classmethod
    def has_credentials(cls) -> bool:
        return bool(cls.USERNAME and cls.PASSWORD)


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def browser_context_args() -> Dict[str, Any]:
    """Browser context arguments."""
    args = {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }

    if E2EConfig.RECORD_VIDEO:
        E2EConfig.ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
        args["record_video_dir"] = str(E2EConfig.ARTIFACTS_DIR / "videos")
        args["record_video_size"] = {"width": 1280, "height": 720}

    return args


@pytest.fixture
def context(browser: Browser, browser_context_args: Dict) -> Generator[BrowserContext, None, None]:
    """Create a new browser context for each test."""
    context = browser.new_context(**browser_context_args)
    context.set_default_timeout(E2EConfig.DEFAULT_TIMEOUT)
    context.set_default_navigation_timeout(E2EConfig.NAVIGATION_TIMEOUT)

    yield context

    context.close()


@pytest.fixture
def page(context: BrowserContext) -> Generator[Page, None, None]:
    """Create a new page for each test."""
    page = context.new_page()

    yield page

    page.close()


@pytest.fixture
def fake_site(context: BrowserContext) -> FakeSite:
    """Serve the fake sign-in and workbook pages inside this context."""
    site = FakeSite()
    site.install(context)
    return site


@pytest.fixture
def timeouts() -> Timeouts:
    return E2EConfig.FAKE_TIMEOUTS


# =============================================================================
# Failure Artifacts
# =============================================================================


@pytest.fixture(autouse=True)
def screenshot_on_failure(request, page: Page):
    """Capture screenshot on test failure."""
    yield

    report = getattr(request.node, "rep_call", None)
    if report is None or not report.failed or not E2EConfig.SCREENSHOT_ON_FAILURE:
        return

    E2EConfig.ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    test_name = request.node.name.replace("/", "_").replace(":", "_")
    screenshot_path = E2EConfig.ARTIFACTS_DIR / f"failure_{test_name}_{timestamp}.png"
    page.screenshot(path=str(screenshot_path))
    print(f"\n[E2E] Screenshot saved: {screenshot_path}")


# =============================================================================
# Hooks
# =============================================================================


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for use in fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)
