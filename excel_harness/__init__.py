"""
Excel Online End-to-End Harness

Drives Excel Online through a real browser: sign in, create a workbook,
enter a formula and check what the sheet displays.

Structure:
    actions.py   - timeout-bounded action primitives
    surfaces.py  - page / frame / element dispatch
    pages/       - Page Object Models
    scenario.py  - browser session and the =TODAY() scenario
    settings.py  - YAML + environment settings
    cli.py       - command-line runner
"""

from .errors import (
    CellReadError,
    HarnessError,
    LoginError,
    UnsupportedSurfaceError,
    VisibilityError,
    WorkbookError,
)
from .scenario import BrowserSession, ScenarioResult, expected_today, run_today_scenario
from .settings import HarnessSettings, Timeouts, load_settings

__version__ = "0.1.0"

__all__ = [
    "BrowserSession",
    "CellReadError",
    "HarnessError",
    "HarnessSettings",
    "LoginError",
    "ScenarioResult",
    "Timeouts",
    "UnsupportedSurfaceError",
    "VisibilityError",
    "WorkbookError",
    "expected_today",
    "load_settings",
    "run_today_scenario",
]
