# Configuration module
from .config_loader import ConfigLoader
from .env_config import (
    ENV_VARS,
    Config,
    ConfigError,
    EnvVar,
    get_env_var_docs,
    validate_config,
)

__all__ = [
    "Config",
    "ConfigError",
    "ConfigLoader",
    "EnvVar",
    "ENV_VARS",
    "validate_config",
    "get_env_var_docs",
]
