# ruff: noqa: TC003, D415  # Path needed at runtime for cyclopts parameter parsing
"""Badge resolution command."""

import os
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter
from rich.console import Console

from gitbadges.cli._commands._context import CLIContext
from gitbadges.cli._commands._shared import print_line
from gitbadges.observation import ObservationController
from gitbadges.repository import GitStatusEnumerator

NO_BADGE = "-"


def badge(
    *paths: Annotated[Path, Parameter(help="Paths to resolve")],
    observe: Annotated[
        Path | None,
        Parameter(
            name=["--observe", "-o"],
            help="Directory to observe first (default: each path's parent)",
        ),
    ] = None,
) -> None:
    """Print the badge a file browser would draw for each path

    Each path is resolved the way the file browser extension resolves it:
    the observed directory decides which repository snapshot is built.
    """
    ctx = CLIContext.get_current()
    logger = ctx.get_logger()
    console = Console()

    enumerator = GitStatusEnumerator(logger=logger)
    with ObservationController(
        enumerator, background=False, logger=logger
    ) as controller:
        if observe is not None:
            controller.begin_observing(observe)

        for path in paths:
            target = Path(os.path.abspath(path))
            if observe is None:
                controller.begin_observing(target.parent)
            resolved = controller.badge_for(target, is_directory=target.is_dir())
            label = resolved.value if resolved is not None else NO_BADGE
            print_line(f"{path}: {label}", console=console)
