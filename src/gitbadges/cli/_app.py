"""The command-line interface for gitbadges."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from gitbadges.cli._commands import register_commands
from gitbadges.cli._commands._context import CLIContext

APP_HELP = "Show the git status badges a file browser would draw."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Create the gitbadges CLI application.

    Commands run through ``app.meta``, which handles ``--verbose`` and
    ``--config`` and makes a CLIContext current for the duration of the
    command.

    Args:
        console: Console for help and cyclopts output.
        error_console: Console for cyclopts parse errors.
        exit_on_error: Exit on parse errors instead of raising.
    """
    app = App(
        name="gitbadges",
        help=APP_HELP,
        help_on_error=True,
        console=console if console is not None else Console(),
        error_console=(
            error_console if error_console is not None else Console(stderr=True)
        ),
        exit_on_error=exit_on_error,
    )
    register_commands(app)

    @app.meta.default
    def _with_context(
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[
            bool, Parameter(help="Log at debug level and print extra details")
        ] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        ctx = CLIContext.from_options(config_path=config, verbose=verbose)
        CLIContext.set_current(ctx)
        try:
            app(tokens)
        finally:
            CLIContext.reset()

    return app


def main() -> None:
    """Default entrypoint for the `gitbadges` CLI."""
    create_app().meta()
