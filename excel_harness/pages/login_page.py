"""
Login Page Object

Drives the identity provider's multi-step sign-in: email, password, and the
optional "stay signed in?" prompt.
"""
import logging
from typing import Optional

from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..actions import click, fill, page_loaded, require_visible, wait_visible
from ..errors import LoginError, VisibilityError
from ..settings import Timeouts
from .base_page import BasePage

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    """Page object for the sign-in flow."""

    # Selectors
    SIGN_IN_BUTTON = 'text="Sign in"'
    EMAIL_INPUT = 'input[type="email"]'
    PASSWORD_INPUT = 'input[type="password"]'
    USERNAME_SUBMIT = 'input[type="submit"]'
    PASSWORD_SUBMIT = 'button[type="submit"]'
    EMAIL_SCREEN_HEADER = 'div#loginHeader:has-text("Sign in")'
    PASSWORD_SCREEN_HEADER = 'div#loginHeader:has-text("Enter password")'
    USER_DISPLAY_NAME = "div#userDisplayName"
    KMSI_TITLE = "#kmsiTitle"
    KMSI_ACCEPT = '[data-testid="textButtonContainer"] >> #acceptButton'

    def __init__(
        self,
        page: Page,
        timeouts: Optional[Timeouts] = None,
        stay_signed_in_title: str = "Stay signed in?",
    ):
        super().__init__(page, timeouts)
        self.stay_signed_in_title = stay_signed_in_title

    def login(self, username: str, password: str, check_page_loaded: bool = True) -> None:
        """
        Sign in with the given credentials.

        Args:
            username: Account email
            password: Account password
            check_page_loaded: Require the landing page to finish loading

        Raises:
            LoginError: a screen did not appear, the provider showed a
                different account, or the landing page did not load
            VisibilityError: a control on an expected screen was missing
        """
        logger.info(f"Signing in as {username}")
        self.open_email_screen()
        self.submit_username(username)
        self.submit_password(password)
        self.accept_stay_signed_in()

        if check_page_loaded and not page_loaded(self.page, self.timeouts.navigation):
            raise LoginError(LoginError.POST_LOGIN_LOAD, "page did not load after login")
        logger.info("Signed in")

    def open_email_screen(self) -> None:
        """Click the sign-in entry point and wait for the email screen."""
        click(self.surface, self.SIGN_IN_BUTTON, self.timeouts.interaction)
        try:
            require_visible(self.surface, self.EMAIL_SCREEN_HEADER, self.timeouts.assertion)
        except VisibilityError as e:
            raise LoginError(LoginError.EMAIL_SCREEN, "email screen did not load") from e

    def submit_username(self, username: str) -> None:
        """Enter the username and check the provider kept the same account."""
        fill(self.surface, self.EMAIL_INPUT, username, self.timeouts.interaction)
        click(self.surface, self.USERNAME_SUBMIT, self.timeouts.interaction)

        displayed = self.displayed_username()
        if displayed != username:
            raise LoginError(
                LoginError.IDENTITY_MISMATCH,
                f"displayed email ({displayed}) does not match provided username ({username})",
            )

    def displayed_username(self) -> str:
        """The account the provider shows above the password field.

        Raises:
            LoginError: the provider never showed an account
        """
        try:
            text = self.page.locator(self.USER_DISPLAY_NAME).text_content(
                timeout=self.timeouts.interaction
            )
        except PlaywrightTimeoutError as e:
            raise LoginError(
                LoginError.IDENTITY_MISMATCH, "displayed email did not appear after username"
            ) from e
        return (text or "").strip()

    def submit_password(self, password: str) -> None:
        """Wait for the password screen, then enter and submit the password."""
        try:
            require_visible(self.surface, self.PASSWORD_SCREEN_HEADER, self.timeouts.assertion)
        except VisibilityError as e:
            raise LoginError(LoginError.PASSWORD_SCREEN, "password screen did not load") from e

        fill(self.surface, self.PASSWORD_INPUT, password, self.timeouts.interaction)
        click(self.surface, self.PASSWORD_SUBMIT, self.timeouts.interaction)

    def accept_stay_signed_in(self) -> bool:
        """
        Accept the "stay signed in?" prompt if the provider shows it.

        Returns:
            True if the prompt was accepted, False if it never appeared or
            its title was something else
        """
        if not wait_visible(self.surface, self.KMSI_TITLE, self.timeouts.probe):
            logger.debug("No stay-signed-in prompt")
            return False

        title = (self.page.locator(self.KMSI_TITLE).text_content() or "").strip()
        if title != self.stay_signed_in_title:
            logger.warning(f"Unexpected prompt title '{title}', leaving it alone")
            return False

        try:
            require_visible(self.surface, self.KMSI_ACCEPT, self.timeouts.assertion)
        except VisibilityError as e:
            raise LoginError(LoginError.STAY_SIGNED_IN, "accept button is not visible") from e
        click(self.surface, self.KMSI_ACCEPT, self.timeouts.interaction)
        return True
