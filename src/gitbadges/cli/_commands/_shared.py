"""Helpers shared by the gitbadges commands."""

import os
from enum import IntEnum
from pathlib import Path
from typing import TYPE_CHECKING, Never

from rich.console import Console

from gitbadges.repository import locate_repository

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

__all__ = [
    "ExitCode",
    "exit_with_error",
    "get_error_console",
    "print_line",
    "require_repository",
]


class ExitCode(IntEnum):
    """Process exit codes of the gitbadges commands."""

    SUCCESS = 0
    CONFIG_ERROR = 1
    USAGE_ERROR = 2
    NOT_A_REPOSITORY = 3
    ENUMERATION_FAILED = 4
    INTERNAL_ERROR = 5


def get_error_console() -> Console:
    """Get a Rich console writing to stderr."""
    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message to stderr and exit.

    Raises:
        SystemExit: Always, with the given code.
    """
    console = console if console is not None else get_error_console()
    console.print(f"[red]Error:[/red] {message}", soft_wrap=True)
    raise SystemExit(code)


def print_line(text: str, *, console: Console | None = None) -> None:
    """Print one unwrapped, unstyled line for scripts to consume."""
    console = console if console is not None else Console()
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def require_repository(
    path: Path | str, *, logger: "FilteringBoundLogger | None" = None
) -> Path:
    """Return the repository root a path denotes, or exit NOT_A_REPOSITORY.

    Relative paths are resolved against the working directory first.
    """
    root = locate_repository(os.path.abspath(path), logger=logger)
    if root is None:
        exit_with_error(f"Not a git repository: {path}", ExitCode.NOT_A_REPOSITORY)
    return root
