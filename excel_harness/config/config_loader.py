"""
Configuration Loader

Loads harness settings from YAML files layered by environment.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from .env_config import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent


class ConfigLoader:
    """Load and merge configuration from YAML files."""

    def __init__(self, config_dir: Path = DEFAULT_CONFIG_DIR, environment: str = "local"):
        self.config_dir = Path(config_dir)
        self.environment = environment
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load(self, config_name: str) -> Dict[str, Any]:
        """
        Load configuration from YAML files with environment overrides.

        Loading order:
        1. base/{config_name}.yaml
        2. environments/{environment}.yaml, section {config_name}
        3. local/overrides.yaml, section {config_name} (gitignored)

        Args:
            config_name: Name of config file (without .yaml extension)

        Returns:
            Merged configuration dictionary

        Raises:
            ConfigError: the base file is missing or a file is not a YAML mapping
        """
        if config_name in self._cache:
            return self._cache[config_name]

        base_path = self.config_dir / "base" / f"{config_name}.yaml"
        if not base_path.exists():
            raise ConfigError(f"Base config not found: {base_path}")
        config = self._read(base_path)

        overlays = [
            self.config_dir / "environments" / f"{self.environment}.yaml",
            self.config_dir / "local" / "overrides.yaml",
        ]
        for path in overlays:
            if path.exists():
                section = self._read(path).get(config_name) or {}
                config = self._merge_config(config, section)
                logger.debug(f"Applied {path.name} to {config_name}")

        self._cache[config_name] = config
        return config

    def _read(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
        return data

    def _merge_config(self, base: Dict, override: Dict) -> Dict:
        """Deep merge override config into base config."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result
