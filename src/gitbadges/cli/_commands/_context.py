# ruff: noqa: TC003  # Path needed at runtime for dataclass field
"""CLI context for global state management.

The CLIContext is set once at CLI startup and made available to all
commands via contextvars.
"""

import contextvars
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from gitbadges.config import Config, safe_load_config
from gitbadges.utils import create_logger, create_null_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_current_cli_context: "contextvars.ContextVar[CLIContext | None]" = (
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with configuration and options.

    Attributes:
        config: Loaded configuration object.
        verbose: Enable verbose output with additional details.
        config_path: Explicit config file given with --config.
        config_error: Error message if config loading failed.
        logger: Structured logger for CLI commands (writes to file only).
    """

    config: Config = field(repr=False)
    verbose: bool = False
    config_path: Path | None = None
    config_error: str | None = None
    logger: "FilteringBoundLogger | None" = field(default=None, repr=False)

    @classmethod
    def from_options(
        cls, *, config_path: Path | None = None, verbose: bool = False
    ) -> "CLIContext":
        """Build the context for one CLI invocation.

        Loads the configuration (reporting problems on stderr) and creates
        the file logger it describes, bound to the ``cli`` component.
        """
        config, config_error = safe_load_config(config_path=config_path)
        logger = create_logger(
            **config.logging.logger_options(verbose=verbose), component="cli"
        )
        if config_error is not None:
            logger.warning("config_fallback", error=config_error)
        return cls(
            config=config,
            verbose=verbose,
            config_path=config_path,
            config_error=config_error,
            logger=logger,
        )

    @classmethod
    def get_current(cls) -> "CLIContext":
        """Get current active CLIContext, or create a default if not set."""
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx
        return cls(config=Config.from_dict({}))

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:
        """Set the current active CLIContext."""
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to default context."""
        _current_cli_context.set(None)

    def get_logger(self) -> "FilteringBoundLogger":
        """Return the context logger, or a null logger if none was created."""
        return self.logger if self.logger is not None else create_null_logger()
