"""Shared utilities for gitbadges."""

from gitbadges.utils._logging import LogFormatType, create_logger, create_null_logger
from gitbadges.utils._paths import (
    get_config_dir,
    get_config_file,
    get_log_dir,
    get_log_file,
)

__all__ = [
    "LogFormatType",
    "create_logger",
    "create_null_logger",
    "get_config_dir",
    "get_config_file",
    "get_log_dir",
    "get_log_file",
]
