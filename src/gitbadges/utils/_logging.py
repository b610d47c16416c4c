"""Structured logging for gitbadges.

Loggers are standalone structlog loggers bound to their own file target, so
embedding gitbadges in a host process never reconfigures structlog globally.
Library classes default to a null logger; front ends such as the CLI build a
file logger from the ``[logging]`` configuration section.
"""

import logging
from logging.handlers import RotatingFileHandler
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal, cast

import structlog

from ._paths import get_log_file

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger, Processor

LogFormatType = Literal["json", "text"]


def _level_number(level: str) -> int:
    """Translate a level name, honouring the environment first.

    GITBADGES_DEBUG forces DEBUG. Otherwise GITBADGES_LOG_LEVEL, when set,
    replaces the configured level. Unknown names fall back to INFO.
    """
    if getenv("GITBADGES_DEBUG"):
        return logging.DEBUG
    name = getenv("GITBADGES_LOG_LEVEL") or level
    return logging.getLevelNamesMapping().get(name.upper(), logging.INFO)


def _renderers(log_format: LogFormatType) -> "list[Processor]":
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "text":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    return processors


def _rotating_target(
    path: Path, level: int, *, max_bytes: int, backup_count: int
) -> logging.Logger:
    """Return a non-propagating stdlib logger writing to a rotating file.

    Each log file gets its own logger name, so repeated calls for the same
    file replace the handler instead of stacking duplicates.
    """
    target = logging.getLogger(f"gitbadges.file.{path.resolve()}")
    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()
    target.propagate = False
    target.setLevel(level)

    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    handler.setFormatter(logging.Formatter("%(message)s"))
    target.addHandler(handler)
    return target


def create_logger(
    *,
    level: str = "info",
    log_format: LogFormatType = "json",
    log_file: str = "",
    max_bytes: int | None = None,
    backup_count: int | None = None,
    component: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a file logger for the badge engine and its front ends.

    Events go to ``log_file``, or to ~/.config/gitbadges/logs/gitbadges.log
    when it is empty. The file is rotated only when both ``max_bytes`` and
    ``backup_count`` are given.

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to the log file.
        max_bytes: Maximum size in bytes before rotation.
        backup_count: Number of rotated log files to keep.
        component: Name of the emitting component, bound to every event.

    Returns:
        A FilteringBoundLogger instance.
    """
    path = Path(log_file) if log_file else get_log_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    threshold = _level_number(level)

    target: Any
    if max_bytes is not None and backup_count is not None:
        target = _rotating_target(
            path, threshold, max_bytes=max_bytes, backup_count=backup_count
        )
    else:
        target = structlog.WriteLogger(path.open("a"))

    logger = cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            target,
            processors=_renderers(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
        ),
    )
    return logger.bind(component=component) if component else logger


def create_null_logger() -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger that discards everything below CRITICAL.

    Library components fall back to this logger when the caller does not
    supply one, so embedding gitbadges never produces stray output.
    """
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.ReturnLogger(),
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
            context_class=dict,
        ),
    )
