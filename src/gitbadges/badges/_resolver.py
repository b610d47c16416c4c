"""Badge resolution for files and directories.

Targets are absolute paths. Translation to repository-relative keys happens
here and nowhere else.
"""

import os
from collections.abc import Callable
from pathlib import Path

from gitbadges.badges._table import (
    DIRECTORY_CLEAN_BADGE,
    DIRECTORY_DIRTY_BADGE,
    REPOSITORY_CLEAN_BADGE,
    REPOSITORY_DIRTY_BADGE,
    badge_for_status,
)
from gitbadges.enums import BadgeId
from gitbadges.repository._locator import locate_repository
from gitbadges.status._snapshot import StatusSnapshot


def relative_path(target: Path | str, root: Path | str) -> str | None:
    """Return target relative to root, or None if target is outside root.

    The test is a string prefix test on the two paths. One leading separator
    is removed from the remainder, and platform separators become ``/``.

    Args:
        target: Absolute path being resolved.
        root: Repository root.

    Returns:
        Relative path using ``/`` separators (empty for the root itself), or
        None when target does not start with root.
    """
    target_str, root_str = str(target), str(root)
    if not target_str.startswith(root_str):
        return None

    remainder = target_str[len(root_str) :]
    if remainder.startswith(os.sep):
        remainder = remainder[len(os.sep) :]
    if os.sep != "/":
        remainder = remainder.replace(os.sep, "/")
    return remainder


def _rollup(snapshot: StatusSnapshot, prefix: str) -> BadgeId:
    for _path, status in snapshot.with_prefix(prefix):
        if not status.is_quiet:
            return DIRECTORY_DIRTY_BADGE
    return DIRECTORY_CLEAN_BADGE


def resolve_badge(
    target: Path | str,
    *,
    is_directory: bool,
    snapshot: StatusSnapshot | None,
    clean_check: Callable[[Path], bool],
    locate: Callable[[Path], Path | None] = locate_repository,
) -> BadgeId | None:
    """Resolve the badge for a path.

    Without a snapshot only directories get a badge: a directory that is a
    repository root shows whether its working directory is clean. With a
    snapshot the target's own status is used, and a directory without its
    own entry rolls up the statuses of every entry under it.

    Args:
        target: Absolute path to resolve.
        is_directory: Whether target is a directory.
        snapshot: Snapshot of the observed repository, if any.
        clean_check: Clean check for a repository root, used without a
            snapshot.
        locate: Repository locator, used without a snapshot.

    Returns:
        The badge, or None when no badge applies.
    """
    if snapshot is None:
        if not is_directory:
            return None
        root = locate(Path(target))
        if root is None:
            return None
        return REPOSITORY_CLEAN_BADGE if clean_check(root) else REPOSITORY_DIRTY_BADGE

    relative = relative_path(target, snapshot.root)
    if relative is None:
        return None

    status = snapshot.get(relative)
    if status is not None:
        return badge_for_status(status)

    if is_directory:
        return _rollup(snapshot, relative)
    return None
