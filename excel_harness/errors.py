"""
Harness Errors

Every failure a scenario can hit is one of these. None of them are retried;
they abort the run with a message naming the step that failed.
"""
from typing import Any, Optional


class HarnessError(Exception):
    """Base class for all harness failures."""

    pass


class VisibilityError(HarnessError):
    """Raised when a required element never became visible."""

    def __init__(self, locator: Any, timeout_ms: Optional[int] = None):
        self.locator = locator
        self.timeout_ms = timeout_ms
        message = f"Element not found or not visible: {locator}"
        if timeout_ms is not None:
            message += f" (waited {timeout_ms}ms)"
        super().__init__(message)


class LoginError(HarnessError):
    """Raised when the sign-in flow cannot continue.

    ``reason`` is one of the step names below, ``detail`` carries the values
    that did not match.
    """

    EMAIL_SCREEN = "email screen"
    IDENTITY_MISMATCH = "identity mismatch"
    PASSWORD_SCREEN = "password screen"
    STAY_SIGNED_IN = "stay signed in prompt"
    POST_LOGIN_LOAD = "post-login load"

    def __init__(self, reason: str, detail: str = ""):
        self.reason = reason
        self.detail = detail
        message = f"Login failed at {reason}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class WorkbookError(HarnessError):
    """Raised when a new workbook tab cannot be opened or loaded."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Workbook error: {reason}")


class CellReadError(HarnessError):
    """Raised when a cell's accessible label cannot be found."""

    def __init__(self, cell_name: str):
        self.cell_name = cell_name
        super().__init__(f"Unable to retrieve data for cell {cell_name}")


class UnsupportedSurfaceError(HarnessError):
    """Raised when an action receives something that is not a page, frame or element."""

    def __init__(self, obj: Any):
        self.obj = obj
        super().__init__(f"Unsupported surface type: {type(obj).__name__}")
