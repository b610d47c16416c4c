"""Command-line interface for gitbadges."""

from gitbadges.cli._app import create_app, main
from gitbadges.cli._commands import CLIContext, ExitCode

__all__ = ["CLIContext", "ExitCode", "create_app", "main"]
