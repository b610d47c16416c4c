"""Badge resolution for gitbadges.

Functions:
    badge_for_status: Fixed status to badge table.
    relative_path: Translate an absolute path into a snapshot key.
    resolve_badge: Resolve the badge for a file or directory.
    palette_by_badge: Index a palette by badge identifier.

Classes:
    BadgeAsset: Image and label registered for a badge.
"""

from gitbadges.badges._palette import DEFAULT_PALETTE, BadgeAsset, palette_by_badge
from gitbadges.badges._resolver import relative_path, resolve_badge
from gitbadges.badges._table import (
    DIRECTORY_CLEAN_BADGE,
    DIRECTORY_DIRTY_BADGE,
    REPOSITORY_CLEAN_BADGE,
    REPOSITORY_DIRTY_BADGE,
    STATUS_BADGES,
    badge_for_status,
)

__all__ = [
    "DEFAULT_PALETTE",
    "DIRECTORY_CLEAN_BADGE",
    "DIRECTORY_DIRTY_BADGE",
    "REPOSITORY_CLEAN_BADGE",
    "REPOSITORY_DIRTY_BADGE",
    "STATUS_BADGES",
    "BadgeAsset",
    "badge_for_status",
    "palette_by_badge",
    "relative_path",
    "resolve_badge",
]
