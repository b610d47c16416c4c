"""Git status badges for file browsers.

gitbadges answers, for any path, which badge a file browser should draw to
show that path's git status. It keeps one merged status snapshot for the
repository being browsed and rebuilds it only when browsing moves to a
different repository.

Example:
    >>> from gitbadges import GitStatusEnumerator, ObservationController
    >>> with ObservationController(GitStatusEnumerator()) as controller:
    ...     controller.begin_observing("/path/to/repo")
    ...     controller.wait_until_idle()
    ...     controller.badge_for("/path/to/repo/README.md")
    <BadgeId.GREEN: 'Green'>
"""

from gitbadges.badges import (
    DEFAULT_PALETTE,
    BadgeAsset,
    badge_for_status,
    relative_path,
    resolve_badge,
)
from gitbadges.enums import BadgeId, BuildState, StatusKind, StatusShow
from gitbadges.exceptions import (
    BuildCancelledError,
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    EnumerationError,
    GitBadgesError,
    MergeIdentityError,
    RepositoryError,
    SnapshotBuildError,
)
from gitbadges.host import BadgeHost, SyncExtension
from gitbadges.observation import (
    ObservationController,
    ObservationState,
    ObservingNonRepo,
    ObservingRepo,
    Unobserved,
)
from gitbadges.repository import (
    SNAPSHOT_OPTIONS,
    DeltaPair,
    FakeStatusEnumerator,
    GitStatusEnumerator,
    StatusDelta,
    StatusEnumerator,
    StatusOptions,
    locate_repository,
)
from gitbadges.status import StatusSnapshot, build_snapshot, merge_deltas, merge_status

__all__ = [
    "DEFAULT_PALETTE",
    "SNAPSHOT_OPTIONS",
    "BadgeAsset",
    "BadgeHost",
    "BadgeId",
    "BuildCancelledError",
    "BuildState",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "DeltaPair",
    "EnumerationError",
    "FakeStatusEnumerator",
    "GitBadgesError",
    "GitStatusEnumerator",
    "MergeIdentityError",
    "ObservationController",
    "ObservationState",
    "ObservingNonRepo",
    "ObservingRepo",
    "RepositoryError",
    "SnapshotBuildError",
    "StatusDelta",
    "StatusEnumerator",
    "StatusKind",
    "StatusOptions",
    "StatusShow",
    "StatusSnapshot",
    "SyncExtension",
    "Unobserved",
    "badge_for_status",
    "build_snapshot",
    "locate_repository",
    "merge_deltas",
    "merge_status",
    "relative_path",
    "resolve_badge",
]
