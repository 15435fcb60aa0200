"""
Pytest configuration for the Excel Online harness tests
"""
import importlib.util
from pathlib import Path

import pytest

E2E_DIR = Path(__file__).parent / "e2e"


def _playwright_installed() -> bool:
    return importlib.util.find_spec("playwright.sync_api") is not None


def _browser_installed() -> bool:
    """Check that the Chromium binary Playwright drives has been downloaded."""
    from playwright.sync_api import sync_playwright

    try:
        with sync_playwright() as p:
            return Path(p.chromium.executable_path).exists()
    except Exception:
        return False


def pytest_configure(config):
    """Register markers."""
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (require playwright) - skipped if not installed"
    )
    config.addinivalue_line("markers", "live: Tests against the real Excel Online")


def pytest_collection_modifyitems(config, items):
    """Mark tests under tests/e2e and skip them if no browser is available."""
    e2e_items = []
    for item in items:
        if E2E_DIR in Path(item.path).parents:
            item.add_marker(pytest.mark.e2e)
            e2e_items.append(item)

    if not e2e_items:
        return

    if not _playwright_installed():
        reason = "Playwright not installed"
    elif not _browser_installed():
        reason = "Playwright browsers not installed (run: playwright install chromium)"
    else:
        return

    skip_e2e = pytest.mark.skip(reason=reason)
    for item in e2e_items:
        item.add_marker(skip_e2e)
