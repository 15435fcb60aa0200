"""
Scenario Driver

Launches a recorded browser session and runs the end-to-end check:
sign in, open a blank workbook, enter =TODAY() in a cell, close the
notification overlay, read the cell back and compare it with today's date.
"""
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from playwright.sync_api import Page, sync_playwright

from .pages import ExcelHomePage, LoginPage
from .settings import HarnessSettings

logger = logging.getLogger(__name__)


def expected_today(fmt: str = "%d.%m.%Y", today: Optional[date] = None) -> str:
    """Today's date as the spreadsheet displays it, e.g. 19.10.2026."""
    return (today or date.today()).strftime(fmt)


@dataclass
class ScenarioResult:
    """Outcome of one scenario run."""

    cell_value: str
    expected: str
    video_path: Optional[Path] = None

    @property
    def passed(self) -> bool:
        return self.cell_value == self.expected


class BrowserSession:
    """
    One isolated browser session with optional video recording.

    Usage:
        with BrowserSession(settings) as page:
            page.goto(settings.excel_online_url)

    The context, browser and Playwright driver are always closed on exit,
    whether or not the body raised.
    """

    def __init__(self, settings: HarnessSettings):
        self.settings = settings
        self.video_path: Optional[Path] = None
        self._playwright = None
        self._browser = None
        self._context = None
        self._page: Optional[Page] = None

    def context_args(self) -> dict:
        """Keyword arguments for browser.new_context()."""
        args = {"viewport": self.settings.viewport}
        if self.settings.record_video:
            self.settings.video_dir.mkdir(parents=True, exist_ok=True)
            args["record_video_dir"] = str(self.settings.video_dir)
            args["record_video_size"] = self.settings.video_size
        return args

    def __enter__(self) -> Page:
        self._playwright = sync_playwright().start()
        try:
            browser_type = getattr(self._playwright, self.settings.browser)
            self._browser = browser_type.launch(
                headless=self.settings.headless, slow_mo=self.settings.slow_mo
            )
            self._context = self._browser.new_context(**self.context_args())
            self._context.set_default_timeout(self.settings.timeouts.page_default)
            self._context.set_default_navigation_timeout(self.settings.timeouts.navigation)
            self._page = self._context.new_page()
        except Exception:
            self.close()
            raise
        logger.info(f"Started {self.settings.browser} session (headless={self.settings.headless})")
        return self._page

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Tear down the context, browser and driver."""
        try:
            if self._context is not None:
                video = self._page.video if self._page is not None else None
                self._context.close()
                if video is not None:
                    self.video_path = Path(video.path())
                    logger.info(f"Session video saved: {self.video_path}")
            if self._browser is not None:
                self._browser.close()
        finally:
            if self._playwright is not None:
                self._playwright.stop()
            self._context = None
            self._browser = None
            self._page = None
            self._playwright = None


def run_today_scenario(settings: HarnessSettings, today: Optional[date] = None) -> ScenarioResult:
    """
    Run the full =TODAY() check.

    Args:
        settings: Loaded harness settings (credentials must be set)
        today: Date to compare against; defaults to the local date

    Returns:
        ScenarioResult with the scraped value and the expected date

    Raises:
        ConfigError: credentials are missing (raised before the browser starts)
        HarnessError: any step of the flow failed
        playwright Error: the browser failed outside a step, e.g. launch or navigation
    """
    credentials = settings.credentials

    session = BrowserSession(settings)
    with session as page:
        login_page = LoginPage(page, settings.timeouts, settings.stay_signed_in_title)
        login_page.goto(settings.excel_online_url)
        login_page.login(
            credentials.username,
            credentials.password,
            check_page_loaded=settings.check_page_loaded,
        )

        workbook = ExcelHomePage(page, settings.timeouts).create_blank_workbook()
        workbook.input_formula_in_cell(settings.cell, settings.formula)
        workbook.close_notification()
        cell_value = workbook.get_cell_data(settings.cell)

        expected = expected_today(settings.date_format, today)
        logger.info(f"Cell {settings.cell} data: {cell_value}")
        logger.info(f"Date in my machine is: {expected}")

        if settings.linger_ms:
            page.wait_for_timeout(settings.linger_ms)

    return ScenarioResult(cell_value=cell_value, expected=expected, video_path=session.video_path)
