"""gitbadges configuration.

This module provides the public API for gitbadges configuration management:
loading from defaults, the user config file and environment variables, and
typed access to the values.

Example:
    >>> from gitbadges.config import Config
    >>> config = Config.load()
    >>> config.logging.level
    <LogLevel.INFO: 'info'>
"""

from gitbadges.config._defaults import DEFAULT_CONFIG
from gitbadges.config._load import safe_load_config
from gitbadges.config._loader import (
    deep_merge,
    parse_env_value,
    parse_env_vars,
    read_toml_file,
    set_nested_key,
)
from gitbadges.config._models import (
    Config,
    LogFormat,
    LoggingConfig,
    LogLevel,
    ObservationConfig,
)
from gitbadges.exceptions import ConfigError, ConfigLoadError, ConfigValidationError

__all__ = [
    "DEFAULT_CONFIG",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ObservationConfig",
    "deep_merge",
    "parse_env_value",
    "parse_env_vars",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
]
