"""Status snapshots for gitbadges.

Functions:
    merge_status: Pick the more severe of two statuses.
    merge_deltas: Merge both comparison views of one file.
    build_snapshot: Enumerate a repository into a StatusSnapshot.

Classes:
    StatusSnapshot: Immutable relative path to status mapping.
"""

from gitbadges.status._merge import merge_deltas, merge_status
from gitbadges.status._snapshot import StatusSnapshot, build_snapshot

__all__ = [
    "StatusSnapshot",
    "build_snapshot",
    "merge_deltas",
    "merge_status",
]
