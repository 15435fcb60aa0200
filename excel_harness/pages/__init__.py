"""
Page Object Models

Page objects map user-level steps onto the action primitives.
"""

from .base_page import BasePage
from .cell_reader import AriaLabelCellReader, CellReader, parse_cell_label
from .excel_page import ExcelHomePage, WorkbookPage
from .login_page import LoginPage

__all__ = [
    "AriaLabelCellReader",
    "BasePage",
    "CellReader",
    "ExcelHomePage",
    "LoginPage",
    "WorkbookPage",
    "parse_cell_label",
]
