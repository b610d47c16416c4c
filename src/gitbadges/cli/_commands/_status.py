# ruff: noqa: TC003, D415, FBT002  # Path needed at runtime for cyclopts parameter parsing
"""Repository status command."""

from pathlib import Path
from typing import Annotated

from cyclopts import Parameter
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gitbadges.badges import badge_for_status
from gitbadges.cli._commands._context import CLIContext
from gitbadges.cli._commands._shared import (
    ExitCode,
    exit_with_error,
    require_repository,
)
from gitbadges.enums import StatusKind
from gitbadges.exceptions import EnumerationError, SnapshotBuildError
from gitbadges.repository import GitStatusEnumerator
from gitbadges.status import build_snapshot

_STATUS_STYLES = {
    StatusKind.ADDED: "green",
    StatusKind.DELETED: "red",
    StatusKind.UNTRACKED: "red",
    StatusKind.UNREADABLE: "red",
    StatusKind.CONFLICTED: "bold red",
    StatusKind.IGNORED: "dim",
    StatusKind.UNMODIFIED: "dim",
}


def status(
    path: Annotated[Path, Parameter(help="Repository root")],
    all_entries: Annotated[
        bool,
        Parameter(
            name=["--all", "-a"],
            help="Include unmodified and ignored files",
        ),
    ] = False,
) -> None:
    """Show the merged status and badge of each file in a repository"""
    ctx = CLIContext.get_current()
    logger = ctx.get_logger()

    root = require_repository(path, logger=logger)

    try:
        snapshot = build_snapshot(
            root, GitStatusEnumerator(logger=logger), logger=logger
        )
    except (EnumerationError, SnapshotBuildError) as e:
        exit_with_error(str(e), ExitCode.ENUMERATION_FAILED)

    console = Console()
    if not all_entries and snapshot.is_clean():
        console.print("[dim]No pending changes[/dim]")
        return

    rows = [
        (entry, kind)
        for entry, kind in sorted(snapshot.items())
        if all_entries or not kind.is_quiet
    ]

    table = Table(title=escape(str(root)))
    table.add_column("Path")
    table.add_column("Status")
    table.add_column("Badge")
    for entry, kind in rows:
        style = _STATUS_STYLES.get(kind, "yellow")
        table.add_row(
            escape(entry),
            f"[{style}]{kind.name.lower()}[/{style}]",
            badge_for_status(kind).value,
        )
    console.print(table)

    if ctx.verbose:
        console.print(f"[dim]{len(snapshot)} path(s) in snapshot[/dim]")
