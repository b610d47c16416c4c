"""Enumeration types for gitbadges."""

from enum import IntEnum, StrEnum


class StatusKind(IntEnum):
    """Change state of a single file in one comparison view.

    Values mirror the delta type ordinals of the underlying status engine.
    Merging compares these raw values directly (greater wins), so the
    numbering must not be reordered.
    """

    UNMODIFIED = 0
    ADDED = 1
    DELETED = 2
    MODIFIED = 3
    RENAMED = 4
    COPIED = 5
    IGNORED = 6
    UNTRACKED = 7
    TYPECHANGE = 8
    UNREADABLE = 9
    CONFLICTED = 10

    @property
    def is_quiet(self) -> bool:
        """Whether this status does not count as a pending change."""
        return self in (StatusKind.UNMODIFIED, StatusKind.IGNORED)


class BadgeId(StrEnum):
    """Badge identifiers registered with the host file browser."""

    CAUTION = "Caution"
    GREEN = "Green"
    ORANGE = "Orange"
    RED = "Red"
    PLUS = "Plus"
    TRANSPARENT = "Transparent"
    CLEAN_REPO = "Clean Repo"
    MODIFIED_REPO = "Modified Repo"


class StatusShow(StrEnum):
    """Which comparison views an enumeration reports."""

    INDEX_AND_WORKDIR = "index_and_workdir"
    INDEX_ONLY = "index_only"
    WORKDIR_ONLY = "workdir_only"


class BuildState(StrEnum):
    """Progress of the snapshot build for the observed repository."""

    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"
