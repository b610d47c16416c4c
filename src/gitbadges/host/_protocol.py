"""Badge host protocol.

The host is the file browser integration that draws badges. It is only
reached through this protocol so the adapter can be exercised without a
real file browser.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from gitbadges.enums import BadgeId  # noqa: TC001


@runtime_checkable
class BadgeHost(Protocol):
    """Protocol for the file browser badge registration API."""

    def set_observed_directories(self, paths: Sequence[str]) -> None:
        """Tell the host which directory trees to report."""
        ...

    def set_badge_image(self, badge: BadgeId, *, image: str, label: str) -> None:
        """Associate an image and label with a badge identifier."""
        ...

    def set_badge_identifier(self, badge: BadgeId, path: str) -> None:
        """Draw a registered badge on a path."""
        ...
