"""
Excel Online Harness E2E Test Suite

End-to-end browser tests using Playwright.

Structure:
    conftest.py                - Fixtures and configuration
    fake_site.py               - Locally routed fake sign-in and workbook pages
    test_primitives_browser.py - Action primitives in a real browser
    test_login_flow.py         - Sign-in flow against the fake provider
    test_workbook_flow.py      - Workbook flow against the fake editor
    test_excel_today.py        - The live Excel Online scenario

Running Tests:
    pip install -e ".[test]"
    playwright install chromium

    # Run all tests (live test skipped without credentials)
    pytest tests/e2e/

    # Run with visible browser
    pytest tests/e2e/ --headed

    # Run the live scenario
    EXCEL_USERNAME=... EXCEL_PASSWORD=... pytest tests/e2e/ -m live
"""
