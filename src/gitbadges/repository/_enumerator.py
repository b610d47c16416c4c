"""Git status enumeration.

This module provides the GitPython-backed implementation of the status
enumeration capability. Status is read from ``git status --porcelain=v2``,
whose two-letter code carries both comparison views at once: the first letter
compares HEAD with the index, the second compares the index with the working
tree. All paths are repository-relative strings.
"""

# ruff: noqa: TC003  # Path needed at runtime for method signatures
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Final

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from gitbadges.enums import StatusKind, StatusShow
from gitbadges.exceptions import EnumerationError
from gitbadges.repository._models import (
    CLEAN_CHECK_OPTIONS,
    DeltaPair,
    StatusDelta,
    StatusOptions,
)
from gitbadges.utils._logging import create_null_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_STATUS_CODES: Final = {
    ".": StatusKind.UNMODIFIED,
    "M": StatusKind.MODIFIED,
    "T": StatusKind.TYPECHANGE,
    "A": StatusKind.ADDED,
    "D": StatusKind.DELETED,
    "R": StatusKind.RENAMED,
    "C": StatusKind.COPIED,
    "U": StatusKind.CONFLICTED,
}

# Number of space-separated fields before the path in each record type
_ORDINARY_FIELDS: Final = 8
_RENAMED_FIELDS: Final = 9
_UNMERGED_FIELDS: Final = 10

_RawEntry = tuple[str, StatusKind | None, StatusKind | None, str | None]


def _status_kind(code: str) -> StatusKind:
    """Map a porcelain status letter to a StatusKind.

    Unknown letters map to UNREADABLE so a malformed record marks the file
    instead of failing the enumeration.
    """
    return _STATUS_CODES.get(code, StatusKind.UNREADABLE)


def _status_args(options: StatusOptions) -> list[str]:
    """Build ``git status`` arguments for the requested options.

    Args:
        options: The enumeration options.

    Returns:
        Command-line arguments for ``git status``.
    """
    wants_all = (options.include_untracked and options.recurse_untracked_dirs) or (
        options.include_ignored and options.recurse_ignored_dirs
    )
    if wants_all:
        untracked = "all"
    elif options.include_untracked or options.include_ignored:
        untracked = "normal"
    else:
        untracked = "no"

    args = ["--porcelain=v2", "-z", f"--untracked-files={untracked}"]
    args.append("--ignored=traditional" if options.include_ignored else "--ignored=no")
    args.append("--renames" if options.renames_head_to_index else "--no-renames")
    return args


def _malformed(record: str) -> _RawEntry:
    """Treat an unparseable record as an unreadable file."""
    return record.rsplit(" ", 1)[-1], None, StatusKind.UNREADABLE, None


def parse_porcelain_v2(output: str) -> Iterator[_RawEntry]:
    """Parse NUL-separated ``git status --porcelain=v2 -z`` output.

    Args:
        output: Raw status output.

    Yields:
        Tuples of (path, head-to-index status, index-to-workdir status,
        original path). A view the record does not report is None.
    """
    records = output.split("\0")
    position = 0
    while position < len(records):
        record = records[position]
        position += 1
        if not record or record.startswith("#"):
            continue

        kind = record[0]
        if kind == "1":
            fields = record.split(" ", _ORDINARY_FIELDS)
            if len(fields) <= _ORDINARY_FIELDS:
                yield _malformed(record)
                continue
            xy = fields[1]
            yield (
                fields[_ORDINARY_FIELDS],
                _status_kind(xy[0]),
                _status_kind(xy[1]),
                None,
            )
        elif kind == "2":
            fields = record.split(" ", _RENAMED_FIELDS)
            if len(fields) <= _RENAMED_FIELDS:
                yield _malformed(record)
                continue
            # Renamed and copied records are followed by the original path
            original = records[position] if position < len(records) else None
            position += 1
            xy = fields[1]
            yield (
                fields[_RENAMED_FIELDS],
                _status_kind(xy[0]),
                _status_kind(xy[1]),
                original,
            )
        elif kind == "u":
            fields = record.split(" ", _UNMERGED_FIELDS)
            if len(fields) <= _UNMERGED_FIELDS:
                yield _malformed(record)
                continue
            yield fields[_UNMERGED_FIELDS], None, StatusKind.CONFLICTED, None
        elif kind == "?":
            yield record[2:], None, StatusKind.UNTRACKED, None
        elif kind == "!":
            yield record[2:], None, StatusKind.IGNORED, None
        else:
            yield _malformed(record)


def _delta(
    path: str,
    status: StatusKind | None,
    *,
    old_path: str | None = None,
    include_unmodified: bool,
) -> StatusDelta | None:
    """Wrap a parsed status in a StatusDelta, or None if it is not reported."""
    if status is None:
        return None
    if status is StatusKind.UNMODIFIED and not include_unmodified:
        return None
    return StatusDelta(path=path, status=status, old_path=old_path)


def _more_severe(
    first: StatusDelta | None, second: StatusDelta | None
) -> StatusDelta | None:
    if first is None:
        return second
    if second is None or first.status >= second.status:
        return first
    return second


def _combine(previous: DeltaPair, current: DeltaPair) -> DeltaPair:
    """Join two records git reported for the same path into one pair.

    This happens when a file is removed from the index but kept on disk:
    the staged deletion and the untracked file arrive as separate records.
    """
    return DeltaPair(
        head_to_index=_more_severe(previous.head_to_index, current.head_to_index),
        index_to_workdir=_more_severe(
            previous.index_to_workdir, current.index_to_workdir
        ),
    )


def _build_pairs(
    entries: Iterator[_RawEntry],
    tracked: frozenset[str],
    options: StatusOptions,
) -> list[DeltaPair]:
    """Combine parsed status entries and unchanged tracked files into pairs.

    Args:
        entries: Parsed porcelain entries.
        tracked: Every path in the index (only used for unmodified files).
        options: The enumeration options.

    Returns:
        DeltaPairs sorted by path.
    """
    show_index = options.show is not StatusShow.WORKDIR_ONLY
    show_workdir = options.show is not StatusShow.INDEX_ONLY

    pairs: dict[str, DeltaPair] = {}
    for path, head_status, workdir_status, original in entries:
        if workdir_status is StatusKind.UNTRACKED and not options.include_untracked:
            continue
        if workdir_status is StatusKind.IGNORED and not options.include_ignored:
            continue

        head_delta = (
            _delta(
                path,
                head_status,
                old_path=original,
                include_unmodified=options.include_unmodified,
            )
            if show_index
            else None
        )
        workdir_delta = (
            _delta(
                path,
                workdir_status,
                include_unmodified=options.include_unmodified,
            )
            if show_workdir
            else None
        )
        if head_delta is None and workdir_delta is None:
            continue
        pair = DeltaPair(head_to_index=head_delta, index_to_workdir=workdir_delta)
        previous = pairs.get(path)
        pairs[path] = pair if previous is None else _combine(previous, pair)

    if options.include_unmodified:
        for path in tracked.difference(pairs):
            unchanged = StatusDelta(path=path, status=StatusKind.UNMODIFIED)
            pairs[path] = DeltaPair(
                head_to_index=unchanged if show_index else None,
                index_to_workdir=unchanged if show_workdir else None,
            )

    return [pairs[path] for path in sorted(pairs)]


def _open_repo(root: Path) -> Repo:
    """Open the repository at exactly the given root.

    Args:
        root: The repository root directory.

    Returns:
        The opened Repo. Callers must close it.

    Raises:
        EnumerationError: If root is not a non-bare git repository.
    """
    try:
        repo = Repo(str(root), search_parent_directories=False)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        msg = f"Not a git repository: {root}"
        raise EnumerationError(msg, root=root) from e

    if repo.bare:
        repo.close()
        msg = f"Bare repository has no working tree: {root}"
        raise EnumerationError(msg, root=root)
    return repo


class GitStatusEnumerator:
    """Read-only status enumeration backed by GitPython.

    Each call opens the repository, runs the git commands it needs and closes
    the repository again, so no file handles outlive a call.
    """

    __slots__ = ("_logger",)

    def __init__(self, *, logger: "FilteringBoundLogger | None" = None) -> None:
        """Initialize the enumerator.

        Args:
            logger: Logger for git command diagnostics.
        """
        self._logger = logger if logger is not None else create_null_logger()

    def enumerate_status(
        self, root: Path, options: StatusOptions
    ) -> Iterator[DeltaPair]:
        """Enumerate per-file deltas for the repository at root.

        Args:
            root: The repository root directory.
            options: What the enumeration should report.

        Returns:
            Iterator of DeltaPairs in path order.

        Raises:
            EnumerationError: If the repository cannot be read.
        """
        repo = _open_repo(root)
        try:
            output: str = repo.git.status(*_status_args(options))
            tracked: frozenset[str] = frozenset()
            if options.include_unmodified:
                listing: str = repo.git.ls_files("-z")
                tracked = frozenset(path for path in listing.split("\0") if path)
        except GitCommandError as e:
            self._logger.debug("git_status_failed", root=str(root), error=str(e))
            msg = f"git status failed: {e}"
            raise EnumerationError(msg, root=root) from e
        finally:
            repo.close()

        return iter(_build_pairs(parse_porcelain_v2(output), tracked, options))

    def is_working_directory_clean(self, root: Path) -> bool:
        """Check whether the repository has no staged, modified or untracked files.

        Args:
            root: The repository root directory.

        Returns:
            True if the working directory is clean. Ignored files do not count.

        Raises:
            EnumerationError: If the repository cannot be read.
        """
        pairs = self.enumerate_status(root, CLEAN_CHECK_OPTIONS)
        return not any(
            delta is not None and not delta.status.is_quiet
            for pair in pairs
            for delta in (pair.head_to_index, pair.index_to_workdir)
        )
