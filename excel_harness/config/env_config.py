"""
Environment Variable Configuration with Validation

Provides centralized environment variable management with:
- Type validation (str, int, bool, path)
- Default values
- Validation rules (min/max, choices, patterns)
- Masking of sensitive values such as the account password

Usage:
    from excel_harness.config.env_config import Config, validate_config

    # Access validated config
    username = Config.EXCEL_USERNAME
    headless = Config.E2E_HEADLESS

    # Validate all at startup (raises ConfigError if invalid)
    validate_config()
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class EnvVar:
    """Environment variable definition with validation."""

    name: str
    default: Any = None
    var_type: str = "str"  # str, int, bool, path
    required: bool = False
    description: str = ""
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None
    choices: Optional[List[Any]] = None
    pattern: Optional[str] = None  # Regex pattern for str validation
    sensitive: bool = False  # Don't log value if True

    def parse(self, value: str) -> Any:
        """Parse string value to target type."""
        if value is None:
            return None

        if self.var_type == "str":
            return value
        elif self.var_type == "int":
            try:
                return int(value)
            except ValueError:
                raise ConfigError(f"{self.name}: '{value}' is not a valid integer")
        elif self.var_type == "bool":
            return value.lower() in ("true", "1", "yes", "on")
        elif self.var_type == "path":
            # Relative paths stay relative to the working directory
            return Path(value)
        else:
            return value

    def validate(self, value: Any) -> tuple[bool, str]:
        """Validate parsed value. Returns (is_valid, error_message)."""
        if value is None:
            if self.required:
                return False, f"{self.name} is required but not set"
            return True, ""

        if self.var_type == "int":
            if self.min_value is not None and value < self.min_value:
                return False, f"{self.name}: value {value} is below minimum {self.min_value}"
            if self.max_value is not None and value > self.max_value:
                return False, f"{self.name}: value {value} exceeds maximum {self.max_value}"

        if self.choices is not None and value not in self.choices:
            return (
                False,
                f"{self.name}: '{value}' is not a valid choice. Must be one of: {self.choices}",
            )

        if self.pattern and self.var_type == "str":
            if not re.match(self.pattern, value):
                return False, f"{self.name}: '{value}' does not match required pattern"

        return True, ""

    def get_value(self) -> Any:
        """Get validated value from environment."""
        raw_value = os.environ.get(self.name)

        if raw_value is None or raw_value == "":
            if self.required:
                raise ConfigError(f"Required environment variable {self.name} is not set")
            return self.default

        parsed = self.parse(raw_value)
        is_valid, error = self.validate(parsed)

        if not is_valid:
            raise ConfigError(error)

        return parsed


# Define all environment variables
ENV_VARS: Dict[str, EnvVar] = {
    "HARNESS_ENV": EnvVar(
        name="HARNESS_ENV",
        default="local",
        choices=["local", "ci"],
        description="Selects config/environments/<name>.yaml",
    ),
    "LOG_LEVEL": EnvVar(
        name="LOG_LEVEL",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        description="Log level for the command-line runner",
    ),
    # Target application
    "EXCEL_ONLINE_URL": EnvVar(
        name="EXCEL_ONLINE_URL",
        default=None,  # Falls back to urls.excel_online in harness.yaml
        pattern=r"^https?://",
        description="Entry URL of the spreadsheet application",
    ),
    "EXCEL_USERNAME": EnvVar(
        name="EXCEL_USERNAME", default=None, description="Account used to sign in"
    ),
    "EXCEL_PASSWORD": EnvVar(
        name="EXCEL_PASSWORD", default=None, sensitive=True, description="Account password"
    ),
    # Browser settings
    "E2E_BROWSER": EnvVar(
        name="E2E_BROWSER",
        default="chromium",
        choices=["chromium", "firefox", "webkit"],
        description="Playwright browser type",
    ),
    "E2E_HEADLESS": EnvVar(
        name="E2E_HEADLESS",
        default=True,
        var_type="bool",
        description="Run the browser without a window",
    ),
    "E2E_SLOW_MO": EnvVar(
        name="E2E_SLOW_MO",
        default=0,
        var_type="int",
        min_value=0,
        max_value=10000,
        description="Delay in ms added to every browser operation",
    ),
    "E2E_RECORD_VIDEO": EnvVar(
        name="E2E_RECORD_VIDEO",
        default=True,
        var_type="bool",
        description="Record a video of the session",
    ),
    "E2E_VIDEO_DIR": EnvVar(
        name="E2E_VIDEO_DIR",
        default=Path("videos"),
        var_type="path",
        description="Directory the session video is written to",
    ),
}


class ConfigMeta(type):
    """Metaclass to provide attribute access to config values."""

    _cache: Dict[str, Any] = {}

    def __getattr__(cls, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        if name in cls._cache:
            return cls._cache[name]

        if name in ENV_VARS:
            value = ENV_VARS[name].get_value()
            cls._cache[name] = value
            return value

        raise AttributeError(f"Unknown config variable: {name}")


class Config(metaclass=ConfigMeta):
    """
    Configuration class with environment variable access.

    Access config values as class attributes:
        Config.E2E_HEADLESS  # Returns bool
        Config.E2E_SLOW_MO  # Returns int
    """

    @classmethod
    def to_dict(cls, include_sensitive: bool = False) -> Dict[str, Any]:
        """Get all config values as dictionary."""
        result = {}
        for name, env_var in ENV_VARS.items():
            try:
                value = env_var.get_value()
                if env_var.sensitive and not include_sensitive:
                    value = "***" if value else None
                result[name] = value
            except ConfigError:
                result[name] = None
        return result

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the config cache (useful for testing)."""
        cls._cache.clear()


def validate_config(strict: bool = False) -> Dict[str, Any]:
    """
    Validate all environment variables at startup.

    Args:
        strict: If True, raise on any validation error.
                If False, log warnings for optional vars.

    Returns:
        Dict of validated config values

    Raises:
        ConfigError: If required variables are missing or invalid
    """
    errors = []
    warnings = []
    validated = {}

    for name, env_var in ENV_VARS.items():
        try:
            value = env_var.get_value()
            validated[name] = value

            if env_var.sensitive:
                log_value = "***" if value else "not set"
            else:
                log_value = value
            logger.debug(f"Config: {name} = {log_value}")

        except ConfigError as e:
            if env_var.required or strict:
                errors.append(str(e))
            else:
                warnings.append(str(e))

    for warning in warnings:
        logger.warning(f"Config warning: {warning}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        logger.error(error_msg)
        raise ConfigError(error_msg)

    logger.debug(f"Configuration validated: {len(validated)} variables loaded")
    return validated


def get_env_var_docs() -> str:
    """Generate documentation for all environment variables."""
    lines = ["# Environment Variables\n"]

    categories = {
        "Harness": ["HARNESS_ENV", "LOG_LEVEL"],
        "Target": ["EXCEL_ONLINE_URL", "EXCEL_USERNAME", "EXCEL_PASSWORD"],
        "Browser": [
            "E2E_BROWSER",
            "E2E_HEADLESS",
            "E2E_SLOW_MO",
            "E2E_RECORD_VIDEO",
            "E2E_VIDEO_DIR",
        ],
    }

    for category, var_names in categories.items():
        lines.append(f"\n## {category}\n")
        lines.append("| Variable | Type | Default | Description |")
        lines.append("|----------|------|---------|-------------|")

        for name in var_names:
            if name in ENV_VARS:
                ev = ENV_VARS[name]
                default = "***" if ev.sensitive else (ev.default if ev.default is not None else "-")
                required = " (required)" if ev.required else ""
                lines.append(
                    f"| `{name}` | {ev.var_type} | {default} | {ev.description}{required} |"
                )

    return "\n".join(lines)
