"""Repository status models.

This module defines the data structures exchanged between the status
enumeration capability and the snapshot builder. All paths are
repository-relative strings using "/" separators.
"""

from dataclasses import dataclass
from typing import Final

from gitbadges.enums import StatusKind, StatusShow


@dataclass(frozen=True, slots=True)
class StatusDelta:
    """A single file's status in one comparison view.

    Attributes:
        path: Repository-relative path of the file (new path for renames).
            None when the enumeration could not identify the file.
        status: Change state in this view.
        old_path: Previous path for renamed files, None otherwise.
    """

    path: str | None
    status: StatusKind
    old_path: str | None = None


@dataclass(frozen=True, slots=True)
class DeltaPair:
    """Both comparison views for one file, as delivered per enumeration step.

    Attributes:
        head_to_index: Committed-vs-staged observation, None if unchanged
            or not reported in that view.
        index_to_workdir: Staged-vs-working-tree observation, None if not
            reported in that view.
    """

    head_to_index: StatusDelta | None = None
    index_to_workdir: StatusDelta | None = None


@dataclass(frozen=True, slots=True)
class StatusOptions:
    """Flags controlling what a status enumeration reports.

    Attributes:
        show: Which comparison views to report.
        include_unmodified: Report files unchanged in every view.
        include_untracked: Report files absent from the index.
        recurse_untracked_dirs: Report each file inside untracked directories
            instead of one entry for the directory.
        include_ignored: Report files matched by ignore rules.
        recurse_ignored_dirs: Report each file inside ignored directories
            instead of one entry for the directory.
        renames_head_to_index: Pair deleted and added paths with identical
            content into a single renamed entry in the committed-vs-staged view.
    """

    show: StatusShow = StatusShow.INDEX_AND_WORKDIR
    include_unmodified: bool = False
    include_untracked: bool = False
    recurse_untracked_dirs: bool = False
    include_ignored: bool = False
    recurse_ignored_dirs: bool = False
    renames_head_to_index: bool = False


SNAPSHOT_OPTIONS: Final = StatusOptions(
    show=StatusShow.INDEX_AND_WORKDIR,
    include_unmodified=True,
    include_untracked=True,
    recurse_untracked_dirs=True,
    include_ignored=True,
    recurse_ignored_dirs=True,
    renames_head_to_index=True,
)

CLEAN_CHECK_OPTIONS: Final = StatusOptions(
    show=StatusShow.INDEX_AND_WORKDIR,
    include_untracked=True,
)
