"""
Cell Readers

The editor renders cells on a canvas, so their values are not in the DOM as
text. What it does expose is an accessible label per cell of the form
``"<value> . <cell> . ..."``. Reading that label is an application-specific
side channel, so it lives behind the small ``CellReader`` interface and the
workbook page only ever asks for "the displayed value of this cell".
"""
import logging
from typing import Optional, Protocol

from playwright.sync_api import FrameLocator
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..actions import fill
from ..errors import CellReadError
from ..settings import Timeouts

logger = logging.getLogger(__name__)

LABEL_SEPARATOR = " . "


class CellReader(Protocol):
    """Reads the displayed value of a cell."""

    def read(self, cell_name: str) -> str:
        ...


def parse_cell_label(label: Optional[str]) -> Optional[str]:
    """Extract the displayed value from a cell's accessible label.

    >>> parse_cell_label("19.10.2026 . A2 . Formula =TODAY()")
    '19.10.2026'
    """
    if label is None:
        return None
    return label.split(LABEL_SEPARATOR)[0]


class AriaLabelCellReader:
    """Reads cell values from their aria-label inside the editing frame."""

    FONT_SIZE_INPUT = "#FontSize-input"
    # Font size that makes the editor publish parsable cell labels
    FONT_SIZE = "8"

    def __init__(self, frame: FrameLocator, timeouts: Optional[Timeouts] = None):
        self.frame = frame
        self.timeouts = timeouts or Timeouts()

    def label_selector(self, cell_name: str) -> str:
        return f'label[aria-label*="{cell_name}"]'

    def read(self, cell_name: str) -> str:
        """
        Return the displayed value of ``cell_name``.

        Raises:
            CellReadError: no label mentions the cell
        """
        font_size = self.frame.locator(self.FONT_SIZE_INPUT)
        fill(self.frame, font_size, self.FONT_SIZE, self.timeouts.assertion)
        font_size.press("Enter")

        label = self.frame.locator(self.label_selector(cell_name)).nth(0)
        try:
            aria_label = label.get_attribute("aria-label", timeout=self.timeouts.assertion)
        except PlaywrightTimeoutError as e:
            raise CellReadError(cell_name) from e

        value = parse_cell_label(aria_label)
        if value is None:
            raise CellReadError(cell_name)
        logger.debug(f"Cell {cell_name} label '{aria_label}' -> '{value}'")
        return value
