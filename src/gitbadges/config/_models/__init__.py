"""Configuration models."""

from gitbadges.config._models._config import Config
from gitbadges.config._models._logging import LogFormat, LoggingConfig, LogLevel
from gitbadges.config._models._observation import ObservationConfig

__all__ = [
    "Config",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ObservationConfig",
]
