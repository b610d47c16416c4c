"""gitbadges CLI commands."""

from typing import TYPE_CHECKING

from gitbadges.cli._commands._badge import badge
from gitbadges.cli._commands._context import CLIContext
from gitbadges.cli._commands._locate import locate
from gitbadges.cli._commands._shared import ExitCode, exit_with_error, get_error_console
from gitbadges.cli._commands._status import status

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "exit_with_error",
    "get_error_console",
    "register_commands",
]


def register_commands(app: "App") -> None:
    """Register all commands with an app."""
    app.command(locate, name="locate")
    app.command(status, name="status")
    app.command(badge, name="badge")
