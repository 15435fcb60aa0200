"""
Excel Page Objects

ExcelHomePage is the landing page after sign-in; it opens new workbooks in a
new tab. WorkbookPage wraps that tab. The spreadsheet itself lives in an
embedded frame, so every workbook action is addressed to that frame.
"""
import logging
from typing import Optional

from playwright.sync_api import FrameLocator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..actions import click, fill, page_loaded, require_visible, type_text
from ..errors import WorkbookError
from ..settings import Timeouts
from .base_page import BasePage
from .cell_reader import AriaLabelCellReader, CellReader

logger = logging.getLogger(__name__)


class ExcelHomePage(BasePage):
    """Page object for the landing page."""

    CREATE_BLANK_WORKBOOK = 'text="Blank workbook"'

    def create_blank_workbook(self) -> "WorkbookPage":
        """
        Open a new blank workbook.

        The tab can open at any point during or after the click, so the
        listener is registered before clicking.

        Returns:
            WorkbookPage wrapping the new, fully loaded tab

        Raises:
            WorkbookError: no new tab opened, or it did not finish loading
        """
        try:
            with self.page.context.expect_page(timeout=self.timeouts.navigation) as new_page_info:
                click(self.surface, self.CREATE_BLANK_WORKBOOK, self.timeouts.interaction)
            new_page = new_page_info.value
        except PlaywrightTimeoutError as e:
            raise WorkbookError("new tab did not open") from e

        if not page_loaded(new_page, self.timeouts.navigation):
            raise WorkbookError("the new Excel page did not load correctly")

        logger.info(f"Opened blank workbook at {new_page.url}")
        return WorkbookPage(new_page, self.timeouts)


class WorkbookPage(BasePage):
    """Page object for an open workbook tab."""

    EDITOR_FRAME = "#WacFrame_Excel_0"
    CELL_INPUT = "#FormulaBar-NameBox-input"
    FORMULA_INPUT = "#formulaBarTextDivId_textElement"
    NOTIFICATION_HOST = "#fluent-default-layer-host"
    NOTIFICATION_CLOSE = 'button[aria-label="Close"] >> nth=0'

    def __init__(
        self,
        page: Page,
        timeouts: Optional[Timeouts] = None,
        cell_reader: Optional[CellReader] = None,
    ):
        super().__init__(page, timeouts)
        self.cell_reader = cell_reader or AriaLabelCellReader(self.frame, self.timeouts)

    @property
    def frame(self) -> FrameLocator:
        """The embedded editing frame."""
        return self.page.frame_locator(self.EDITOR_FRAME)

    def select_cell(self, cell_name: str) -> None:
        """Select a cell by typing its name into the name box."""
        timeout = self.timeouts.assertion
        require_visible(self.frame, self.CELL_INPUT, timeout)
        click(self.frame, self.CELL_INPUT, timeout)
        fill(self.frame, self.CELL_INPUT, cell_name, timeout)
        click(self.frame, self.CELL_INPUT, timeout, keys="Enter")

    def input_formula_in_cell(self, cell_name: str, formula: str) -> None:
        """
        Enter a formula into a cell.

        The formula is typed key by key because the formula bar reacts to
        individual keystrokes. Control+Enter commits without moving the
        selection.
        """
        timeout = self.timeouts.assertion
        self.select_cell(cell_name)
        click(self.frame, self.FORMULA_INPUT, timeout)
        type_text(self.frame, self.FORMULA_INPUT, formula, timeout)
        click(self.frame, self.FORMULA_INPUT, timeout, keys="Control+Enter")
        logger.info(f"Entered {formula} in {cell_name}")

    def close_notification(self) -> None:
        """
        Close the notification overlay.

        The overlay host may stay hidden, which normal visibility polling never
        gets past, so it is forced visible and given a moment to render first.
        """
        self.frame.locator(self.NOTIFICATION_HOST).evaluate(
            """(el) => {
                el.style.display = 'block';
                el.style.visibility = 'visible';
            }"""
        )
        self.wait(self.timeouts.settle)
        click(self.frame, self.NOTIFICATION_CLOSE, self.timeouts.assertion)

    def get_cell_data(self, cell_name: str) -> str:
        """Displayed value of a cell.

        Before a formula is committed this may be empty or stale.
        """
        return self.cell_reader.read(cell_name)
