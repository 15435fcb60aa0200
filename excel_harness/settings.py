"""
Harness Settings

Combines the YAML layers (timeouts, URLs, scenario constants) with the
environment variables (credentials, browser switches) into one object that
page objects and the scenario driver receive.
"""
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .config import ConfigLoader, ENV_VARS, ConfigError

logger = logging.getLogger(__name__)


@dataclass
class Timeouts:
    """Named timeouts in milliseconds, one per class of operation."""

    navigation: int = 60000
    interaction: int = 30000
    assertion: int = 10000
    probe: int = 5000
    settle: int = 2000
    page_default: int = 10000

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Timeouts":
        """Build from a mapping, ignoring unknown keys."""
        data = data or {}
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown timeout '{key}'")
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"timeouts.{key}: '{value}' is not a non-negative integer")
            values[key] = value
        return cls(**values)


@dataclass
class Credentials:
    """Account used for the sign-in flow."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


@dataclass
class HarnessSettings:
    """Everything a scenario run needs."""

    excel_online_url: str
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    timeouts: Timeouts = field(default_factory=Timeouts)
    browser: str = "chromium"
    headless: bool = True
    slow_mo: int = 0
    record_video: bool = True
    video_dir: Path = Path("videos")
    viewport: Dict[str, int] = field(default_factory=lambda: {"width": 1280, "height": 720})
    video_size: Dict[str, int] = field(default_factory=lambda: {"width": 1280, "height": 720})
    linger_ms: int = 0
    stay_signed_in_title: str = "Stay signed in?"
    check_page_loaded: bool = True
    cell: str = "A2"
    formula: str = "=TODAY()"
    date_format: str = "%d.%m.%Y"

    @property
    def credentials(self) -> Credentials:
        """Credentials for the sign-in flow.

        Raises:
            ConfigError: username or password is not configured
        """
        missing = [
            name
            for name, value in (("EXCEL_USERNAME", self.username), ("EXCEL_PASSWORD", self.password))
            if not value
        ]
        if missing:
            raise ConfigError(f"Missing credentials: {', '.join(missing)}")
        return Credentials(self.username, self.password)


def load_settings(environment: Optional[str] = None, loader: Optional[ConfigLoader] = None) -> HarnessSettings:
    """
    Load settings for one run.

    Args:
        environment: Name of the YAML environment overlay. Defaults to
            HARNESS_ENV.
        loader: Loader to read YAML with (tests pass one over a temp dir)

    Returns:
        HarnessSettings with environment variables taking precedence over YAML
    """
    env = {name: var.get_value() for name, var in ENV_VARS.items()}
    environment = environment or env["HARNESS_ENV"]
    loader = loader or ConfigLoader(environment=environment)
    data = loader.load("harness")

    urls = data.get("urls", {})
    browser = data.get("browser", {})
    login = data.get("login", {})
    scenario = data.get("scenario", {})

    url = env["EXCEL_ONLINE_URL"] or urls.get("excel_online")
    if not url:
        raise ConfigError("No target URL: set EXCEL_ONLINE_URL or urls.excel_online")

    defaults = HarnessSettings(excel_online_url=url)
    settings = HarnessSettings(
        excel_online_url=url,
        username=env["EXCEL_USERNAME"],
        password=env["EXCEL_PASSWORD"],
        timeouts=Timeouts.from_dict(data.get("timeouts")),
        browser=env["E2E_BROWSER"],
        headless=env["E2E_HEADLESS"],
        slow_mo=env["E2E_SLOW_MO"],
        record_video=env["E2E_RECORD_VIDEO"],
        video_dir=Path(env["E2E_VIDEO_DIR"]),
        viewport=browser.get("viewport", defaults.viewport),
        video_size=browser.get("video_size", defaults.video_size),
        linger_ms=browser.get("linger", defaults.linger_ms),
        stay_signed_in_title=login.get("stay_signed_in_title", defaults.stay_signed_in_title),
        check_page_loaded=login.get("check_page_loaded", defaults.check_page_loaded),
        cell=scenario.get("cell", defaults.cell),
        formula=scenario.get("formula", defaults.formula),
        date_format=scenario.get("date_format", defaults.date_format),
    )
    logger.debug(f"Loaded settings for environment '{environment}': {settings}")
    return settings
