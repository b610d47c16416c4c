"""Status to badge mapping."""

from types import MappingProxyType
from typing import Final

from gitbadges.enums import BadgeId, StatusKind

STATUS_BADGES: Final = MappingProxyType(
    {
        StatusKind.UNMODIFIED: BadgeId.GREEN,
        StatusKind.ADDED: BadgeId.PLUS,
        StatusKind.DELETED: BadgeId.RED,
        StatusKind.MODIFIED: BadgeId.ORANGE,
        StatusKind.RENAMED: BadgeId.ORANGE,
        StatusKind.COPIED: BadgeId.ORANGE,
        StatusKind.IGNORED: BadgeId.TRANSPARENT,
        StatusKind.UNTRACKED: BadgeId.RED,
        StatusKind.TYPECHANGE: BadgeId.ORANGE,
        StatusKind.UNREADABLE: BadgeId.RED,
        StatusKind.CONFLICTED: BadgeId.RED,
    }
)

DIRECTORY_DIRTY_BADGE: Final = BadgeId.ORANGE
DIRECTORY_CLEAN_BADGE: Final = BadgeId.GREEN
REPOSITORY_CLEAN_BADGE: Final = BadgeId.CLEAN_REPO
REPOSITORY_DIRTY_BADGE: Final = BadgeId.MODIFIED_REPO


def badge_for_status(status: StatusKind) -> BadgeId:
    """Return the badge drawn for a file with the given merged status."""
    return STATUS_BADGES[status]
