"""Logging section of the configuration."""

from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class LogLevel(StrEnum):
    """Threshold for emitted log events, most verbose first."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """How log events are rendered in the log file."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty uses the default log file).
        max_bytes: Rotate the log file once it reaches this size.
        backup_count: Number of rotated log files to keep.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    file: str = ""
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=0)
    backup_count: int = Field(default=3, ge=0)

    def logger_options(self, *, verbose: bool = False) -> dict[str, Any]:
        """Return keyword arguments for ``create_logger``.

        Args:
            verbose: Force the debug level regardless of the configured one.
        """
        return {
            "level": LogLevel.DEBUG.value if verbose else self.level.value,
            "log_format": self.format.value,
            "log_file": self.file,
            "max_bytes": self.max_bytes,
            "backup_count": self.backup_count,
        }
