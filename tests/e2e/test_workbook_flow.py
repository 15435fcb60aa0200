"""
Workbook Flow Browser Tests

Opens a workbook from the fake landing page and runs the formula, overlay
and cell read steps against the fake editor frame.
"""
import pytest
from playwright.sync_api import Page

from excel_harness.errors import CellReadError
from excel_harness.pages import ExcelHomePage, LoginPage, WorkbookPage
from excel_harness.scenario import expected_today


@pytest.fixture
def workbook(page: Page, fake_site, timeouts) -> WorkbookPage:
    """A blank workbook opened after a fake sign-in."""
    page.goto(fake_site.url("/login"))
    LoginPage(page, timeouts).login("tester@example.com", "not-a-real-password")
    return ExcelHomePage(page, timeouts).create_blank_workbook()


class TestCreateBlankWorkbook:
    """Test opening the workbook tab."""

    def test_opens_distinct_loaded_tab(self, page, workbook):
        assert workbook.page is not page
        assert workbook.current_url().endswith("/workbook")
        assert workbook.frame.locator(WorkbookPage.CELL_INPUT).is_visible()


class TestWorkbookActions:
    """Test actions inside the editing frame."""

    def test_today_formula_round_trip(self, workbook):
        workbook.input_formula_in_cell("A2", "=TODAY()")
        workbook.close_notification()

        assert workbook.frame.locator(WorkbookPage.NOTIFICATION_HOST).count() == 0
        assert workbook.get_cell_data("A2") == expected_today()

    def test_formula_lands_in_selected_cell_only(self, workbook):
        workbook.input_formula_in_cell("A2", "=TODAY()")

        assert workbook.get_cell_data("A1") == ""

    def test_read_before_commit_is_empty(self, workbook):
        assert workbook.get_cell_data("A2") == ""

    def test_formula_typed_key_by_key(self, workbook):
        workbook.input_formula_in_cell("A2", "=TODAY()")
        keystrokes = workbook.frame.locator("body").evaluate("() => window.keystrokes")
        assert keystrokes == len("=TODAY()")

    def test_unknown_cell_raises(self, workbook):
        with pytest.raises(CellReadError, match="Z99"):
            workbook.get_cell_data("Z99")
