# ruff: noqa: TC003, D415  # Path needed at runtime for cyclopts parameter parsing
"""Repository location command."""

from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from gitbadges.cli._commands._context import CLIContext
from gitbadges.cli._commands._shared import print_line, require_repository


def locate(
    path: Annotated[Path, Parameter(help="Path to examine")],
) -> None:
    """Print the repository root a path denotes

    Only the path itself is examined; parent directories are not searched.
    """
    root = require_repository(path, logger=CLIContext.get_current().get_logger())
    print_line(str(root))
